# sigsvc/core/config/algorithm_constants.py

from typing import Final

from ecdsa import NIST384p  # type: ignore


class AlgorithmConstants:
    """
    Vocabulario inmutable de los algoritmos de firma.
    Los parámetros de clave son constantes de implementación: el cliente
    solo elige la familia, nunca el tamaño ni la curva.
    """

    # ==========================================================================
    # 1. IDENTIFICADORES PÚBLICOS (API)
    # ==========================================================================
    ALGORITHM_RSA: Final[str] = "RSA"
    ALGORITHM_ECC: Final[str] = "ECC"

    # ==========================================================================
    # 2. PARÁMETROS RSA
    # ==========================================================================
    RSA_PUBLIC_EXPONENT: Final[int] = 65537
    RSA_KEY_SIZE: Final[int]        = 2048

    # ==========================================================================
    # 3. PARÁMETROS ECC
    # ==========================================================================
    ECC_CURVE: Final = NIST384p

    # ==========================================================================
    # 4. ENCADENAMIENTO DE FIRMAS
    # ==========================================================================
    SECURED_DATA_SEPARATOR: Final[str] = "_"
