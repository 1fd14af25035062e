# sigsvc/infra/crypto/ecdsa_signer.py
import hashlib
import logging

from ecdsa import util # type: ignore

from sigsvc.core.config.algorithm_constants import AlgorithmConstants
from sigsvc.core.exceptions import SigningError
from sigsvc.core.interfaces.i_signer import ISigner
from sigsvc.core.models.key_pair import KeyPair

logger = logging.getLogger(__name__)

class ECDSASigner(ISigner):

    def __init__(self, key_pair: KeyPair) -> None:
        self._key_pair = key_pair
        logger.info("Firmante ECDSA inicializado.")

    @property
    def algorithm(self) -> str:
        return AlgorithmConstants.ALGORITHM_ECC

    def sign(self, payload: bytes) -> bytes:
        try:
            digest = hashlib.sha256(payload).digest()

            # Firma DER (ASN.1 SEQUENCE {r, s}); nonce aleatorio en cada llamada
            signature_bytes: bytes = self._key_pair.private_key.sign_digest(
                digest,
                sigencode=util.sigencode_der # type: ignore
            )
            return signature_bytes

        except Exception as exc:
            logger.exception("Error criptográfico durante la firma ECDSA")
            raise SigningError("Error al firmar con ecdsa.") from exc

    def get_public_key(self) -> str:
        return self._key_pair.public_key_pem
