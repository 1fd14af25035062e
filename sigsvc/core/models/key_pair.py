# sigsvc/core/models/key_pair.py

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class KeyPair:
    """
    Par de claves asimétricas de una familia de algoritmo.
    Inmutable. Solo lo conoce el firmante que lo envuelve; la clave
    privada nunca se serializa ni aparece en repr().
    """
    algorithm: str
    private_key: Any = field(repr=False)
    public_key: Any = field(repr=False)
    public_key_pem: str = field(repr=False)
