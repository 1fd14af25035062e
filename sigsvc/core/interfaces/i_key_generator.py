# sigsvc/core/interfaces/i_key_generator.py

from abc import ABC, abstractmethod

from sigsvc.core.models.key_pair import KeyPair

class IKeyGenerator(ABC):
    """
    Contrato de generación de pares de claves por familia de algoritmo.
    El tamaño de clave o la curva son constantes internas de cada implementación.
    """

    @abstractmethod
    def generate(self) -> KeyPair:
        """
        Genera un par de claves nuevo.

        Raises:
            KeyGenerationError: Si la fuente de entropía o el backend fallan.
        """
        pass
