# sigsvc/infra/crypto/key_generators.py
import logging

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from ecdsa import SigningKey # type: ignore

from sigsvc.core.config.algorithm_constants import AlgorithmConstants
from sigsvc.core.exceptions import KeyGenerationError
from sigsvc.core.interfaces.i_key_generator import IKeyGenerator
from sigsvc.core.models.key_pair import KeyPair

logger = logging.getLogger(__name__)

class RSAKeyGenerator(IKeyGenerator):
    """Pares RSA (backend 'cryptography'). Módulo y exponente fijos."""

    def generate(self) -> KeyPair:
        try:
            private_key = rsa.generate_private_key(
                public_exponent=AlgorithmConstants.RSA_PUBLIC_EXPONENT,
                key_size=AlgorithmConstants.RSA_KEY_SIZE,
            )
            public_key = private_key.public_key()
            public_pem = public_key.public_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PublicFormat.SubjectPublicKeyInfo,
            ).decode("ascii")

            logger.info(f"🔑 Par RSA-{AlgorithmConstants.RSA_KEY_SIZE} generado.")
            return KeyPair(
                algorithm=AlgorithmConstants.ALGORITHM_RSA,
                private_key=private_key,
                public_key=public_key,
                public_key_pem=public_pem,
            )
        except Exception as exc:
            logger.exception("Fallo al generar el par de claves RSA")
            raise KeyGenerationError("No se pudo generar el par de claves RSA.") from exc


class ECCKeyGenerator(IKeyGenerator):
    """Pares ECDSA (backend 'ecdsa') sobre la curva fija del protocolo."""

    def generate(self) -> KeyPair:
        try:
            sk = SigningKey.generate(curve=AlgorithmConstants.ECC_CURVE) # type: ignore
            vk = sk.verifying_key
            public_pem: str = vk.to_pem().decode("ascii") # type: ignore

            logger.info(f"🔑 Par ECC ({AlgorithmConstants.ECC_CURVE.name}) generado.")
            return KeyPair(
                algorithm=AlgorithmConstants.ALGORITHM_ECC,
                private_key=sk,
                public_key=vk,
                public_key_pem=public_pem,
            )
        except Exception as exc:
            logger.exception("Fallo al generar el par de claves ECC")
            raise KeyGenerationError("No se pudo generar el par de claves ECC.") from exc
