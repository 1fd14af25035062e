# sigsvc/infra/crypto/rsa_signer.py
import logging

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from sigsvc.core.config.algorithm_constants import AlgorithmConstants
from sigsvc.core.exceptions import SigningError
from sigsvc.core.interfaces.i_signer import ISigner
from sigsvc.core.models.key_pair import KeyPair

logger = logging.getLogger(__name__)

class RSASigner(ISigner):
    """RSASSA-PSS sobre SHA-256, sal del tamaño del digest."""

    def __init__(self, key_pair: KeyPair) -> None:
        self._key_pair = key_pair
        self._padding = padding.PSS(
            mgf=padding.MGF1(hashes.SHA256()),
            salt_length=padding.PSS.DIGEST_LENGTH,
        )
        logger.info("Firmante RSA inicializado.")

    @property
    def algorithm(self) -> str:
        return AlgorithmConstants.ALGORITHM_RSA

    def sign(self, payload: bytes) -> bytes:
        try:
            # 'cryptography' calcula el SHA-256 del payload internamente
            signature: bytes = self._key_pair.private_key.sign(
                payload,
                self._padding,
                hashes.SHA256(),
            )
            return signature

        except Exception as exc:
            logger.exception("Error criptográfico durante la firma RSA")
            raise SigningError("Error al firmar con RSA.") from exc

    def get_public_key(self) -> str:
        return self._key_pair.public_key_pem
