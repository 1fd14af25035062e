# sigsvc/core/interfaces/i_signer.py

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

class ISigner(ABC):
    """
    [Abstracción de Seguridad]
    Contrato que define la capacidad de firmar digitalmente.

    Cada familia de algoritmo (RSA, ECC) aporta una implementación.
    El dispositivo de firma solo conoce este contrato, nunca la clave privada.
    """

    @property
    @abstractmethod
    def algorithm(self) -> str:
        """Identificador público del algoritmo ('RSA', 'ECC')."""
        pass

    @abstractmethod
    def sign(self, payload: bytes) -> bytes:
        """
        Firma criptográficamente un payload arbitrario.

        El payload se resume con SHA-256 antes de firmar. La salida NO es
        determinista: dos firmas del mismo payload difieren byte a byte.

        Args:
            payload: Los bytes exactos a firmar.

        Returns:
            bytes: La firma cruda.

        Raises:
            SigningError: Si el motor criptográfico falla.
        """
        pass

    @abstractmethod
    def get_public_key(self) -> str:
        """
        Expone la identidad pública del firmante.

        Returns:
            str: Clave pública en formato PEM (SubjectPublicKeyInfo).
        """
        pass
