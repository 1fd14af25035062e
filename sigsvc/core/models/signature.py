# sigsvc/core/models/signature.py

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Signature:
    """Resultado de una firma: la firma en base64 y el payload exacto que se firmó."""
    signature: str
    signed_data: str

    def to_dict(self) -> Dict[str, str]:
        return {"signature": self.signature, "signed_data": self.signed_data}
