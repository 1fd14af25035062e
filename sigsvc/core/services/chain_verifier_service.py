# sigsvc/core/services/chain_verifier_service.py

import base64
import binascii
import hashlib
import logging
from typing import Sequence

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding
from ecdsa import VerifyingKey, BadSignatureError, util # type: ignore

from sigsvc.core.config.algorithm_constants import AlgorithmConstants
from sigsvc.core.exceptions import UnknownAlgorithmError
from sigsvc.core.models.signature import Signature

logger = logging.getLogger(__name__)

class ChainVerifierService:
    """
    Servicio de Dominio encargado de la verificación de firmas y cadenas.
    Solo necesita material público: clave PEM, id del dispositivo y la
    secuencia de firmas devueltas, en orden.
    """

    @staticmethod
    def verify_signature(algorithm: str, public_key_pem: str, signature: Signature) -> bool:
        """Verifica una firma aislada contra su 'signed_data'."""
        try:
            raw_signature = base64.b64decode(signature.signature, validate=True)
        except (binascii.Error, ValueError):
            logger.warning("Firma con base64 inválido.")
            return False

        data = signature.signed_data.encode("utf-8")

        if algorithm == AlgorithmConstants.ALGORITHM_RSA:
            return ChainVerifierService._verify_rsa(public_key_pem, raw_signature, data)
        if algorithm == AlgorithmConstants.ALGORITHM_ECC:
            return ChainVerifierService._verify_ecdsa(public_key_pem, raw_signature, data)
        raise UnknownAlgorithmError(algorithm)

    @staticmethod
    def verify_chain(device_id: str, algorithm: str, public_key_pem: str, signatures: Sequence[Signature]) -> bool:
        """
        Rehace la cadena desde la primera firma: contador K-1 en la firma K,
        enlace inicial base64(device_id) y después la firma anterior.
        Detecta reordenamientos, omisiones y manipulaciones.
        """
        sep = AlgorithmConstants.SECURED_DATA_SEPARATOR
        link = base64.b64encode(device_id.encode("utf-8")).decode("ascii")

        for counter, sig in enumerate(signatures):
            prefix = f"{counter}{sep}"
            suffix = f"{sep}{link}"

            well_formed = (
                len(sig.signed_data) >= len(prefix) + len(suffix)
                and sig.signed_data.startswith(prefix)
                and sig.signed_data.endswith(suffix)
            )
            if not well_formed:
                logger.warning(f"Cadena rota en la posición {counter} del dispositivo {device_id}.")
                return False

            if not ChainVerifierService.verify_signature(algorithm, public_key_pem, sig):
                logger.warning(f"Firma inválida en la posición {counter} del dispositivo {device_id}.")
                return False

            link = sig.signature

        return True

    @staticmethod
    def _verify_rsa(public_key_pem: str, signature: bytes, data: bytes) -> bool:
        try:
            public_key = serialization.load_pem_public_key(public_key_pem.encode("ascii"))
            public_key.verify( # type: ignore
                signature,
                data,
                padding.PSS(mgf=padding.MGF1(hashes.SHA256()), salt_length=padding.PSS.AUTO),
                hashes.SHA256(),
            )
            return True
        except InvalidSignature:
            return False
        except Exception as e:
            logger.error(f"Error inesperado verificando firma RSA: {e}")
            return False

    @staticmethod
    def _verify_ecdsa(public_key_pem: str, signature: bytes, data: bytes) -> bool:
        try:
            vk = VerifyingKey.from_pem(public_key_pem) # type: ignore
            digest = hashlib.sha256(data).digest()
            return vk.verify_digest(signature, digest, sigdecode=util.sigdecode_der) # type: ignore
        except BadSignatureError:
            return False
        except Exception as e:
            logger.error(f"Error inesperado verificando firma ECDSA: {e}")
            return False
