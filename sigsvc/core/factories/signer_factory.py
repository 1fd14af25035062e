# sigsvc/core/factories/signer_factory.py

import logging
from typing import Callable, Dict, List, Tuple, Type

from sigsvc.core.config.algorithm_constants import AlgorithmConstants
from sigsvc.core.exceptions import UnknownAlgorithmError
from sigsvc.core.interfaces.i_key_generator import IKeyGenerator
from sigsvc.core.interfaces.i_signer import ISigner
from sigsvc.core.models.key_pair import KeyPair
from sigsvc.infra.crypto.key_generators import ECCKeyGenerator, RSAKeyGenerator
from sigsvc.infra.crypto.rsa_signer import RSASigner
from sigsvc.infra.crypto.ecdsa_signer import ECDSASigner

logger = logging.getLogger(__name__)

class SignerFactory:
    """
    Fábrica Central de Firmantes.
    Único punto de extensión para nuevas familias: un generador,
    un firmante y una entrada en _REGISTRY.
    """

    _REGISTRY: Dict[str, Tuple[Type[IKeyGenerator], Callable[[KeyPair], ISigner]]] = {
        AlgorithmConstants.ALGORITHM_RSA: (RSAKeyGenerator, RSASigner),
        AlgorithmConstants.ALGORITHM_ECC: (ECCKeyGenerator, ECDSASigner),
    }

    @staticmethod
    def supported_algorithms() -> List[str]:
        return list(SignerFactory._REGISTRY.keys())

    @staticmethod
    def create_signer(algorithm: str) -> ISigner:
        """
        Genera un par de claves nuevo para 'algorithm' y lo envuelve en su firmante.

        Raises:
            UnknownAlgorithmError: Algoritmo no soportado (sensible a mayúsculas).
            KeyGenerationError: Fallo del backend al generar las claves.
        """
        entry = SignerFactory._REGISTRY.get(algorithm)
        if entry is None:
            logger.warning(f"Algoritmo rechazado: '{algorithm}'")
            raise UnknownAlgorithmError(algorithm, SignerFactory.supported_algorithms())

        generator_cls, signer_cls = entry
        logger.info(f"🏭 SignerFactory: creando firmante '{algorithm}'")

        key_pair = generator_cls().generate()
        return signer_cls(key_pair)
