# sigsvc/core/models/signature_device.py

import base64
import logging
import threading
from typing import Any, Dict

from sigsvc.core.config.algorithm_constants import AlgorithmConstants
from sigsvc.core.interfaces.i_signer import ISigner
from sigsvc.core.models.signature import Signature

logger = logging.getLogger(__name__)

class SignatureDevice:
    """
    Dispositivo de firma: una identidad, un firmante y el estado de la cadena.

    Cada firma embebe el contador y la firma anterior (o el id en base64 para
    la primera), de modo que la firma N depende de todo el historial previo.

    [THREAD-SAFE]: Un candado por dispositivo serializa sus propias firmas.
    Dispositivos distintos firman en paralelo.
    """

    def __init__(self, device_id: str, label: str, signer: ISigner) -> None:
        if not isinstance(device_id, str):
            raise TypeError(f"device_id debe ser str. Recibido: {type(device_id)}")
        if not isinstance(label, str):
            raise TypeError(f"label debe ser str. Recibido: {type(label)}")

        self._id: str = device_id
        self._label: str = label
        self._signer: ISigner = signer

        self._signature_counter: int = 0
        self._last_signature: str = ""
        self._lock = threading.Lock()

    # --- Identidad (Inmutable) ---
    @property
    def id(self) -> str: return self._id
    @property
    def label(self) -> str: return self._label
    @property
    def algorithm(self) -> str: return self._signer.algorithm

    def get_public_key(self) -> str:
        return self._signer.get_public_key()

    # --- Estado de la Cadena (Lectura Segura) ---
    @property
    def signature_counter(self) -> int:
        with self._lock:
            return self._signature_counter

    @property
    def last_signature(self) -> str:
        with self._lock:
            return self._last_signature

    def sign(self, data: str) -> Signature:
        """
        Firma 'data' encadenándola con el historial del dispositivo.

        Todo el algoritmo (leer enlace, construir payload, firmar, actualizar
        estado) es una única sección crítica. Si el firmante falla, el
        contador y la última firma quedan intactos.

        Raises:
            SigningError: Propagado desde el firmante.
        """
        with self._lock:
            secured_data = self._build_secured_data(data)

            raw_signature = self._signer.sign(secured_data.encode("utf-8"))

            # Solo se avanza la cadena tras una firma exitosa
            self._last_signature = base64.b64encode(raw_signature).decode("ascii")
            self._signature_counter += 1
            result = Signature(signature=self._last_signature, signed_data=secured_data)
            counter = self._signature_counter

        # Log fuera del candado
        logger.info(f"Dispositivo {self._id}: firma #{counter} generada.")
        return result

    def _build_secured_data(self, data: str) -> str:
        """<contador>_<data>_<enlace>. Requiere el candado adquirido."""
        if self._signature_counter == 0:
            link = base64.b64encode(self._id.encode("utf-8")).decode("ascii")
        else:
            link = self._last_signature

        sep = AlgorithmConstants.SECURED_DATA_SEPARATOR
        return f"{self._signature_counter}{sep}{data}{sep}{link}"

    def to_dict(self) -> Dict[str, Any]:
        """Vista pública del dispositivo (sin material privado)."""
        with self._lock:
            counter = self._signature_counter
        return {
            "id": self._id,
            "label": self._label,
            "algorithm": self.algorithm,
            "signature_counter": counter,
            "public_key": self.get_public_key(),
        }

    def __repr__(self) -> str:
        return f"SignatureDevice(id={self._id!r}, label={self._label!r}, algorithm={self.algorithm!r})"
