# sigsvc/core/services/device_service.py

import logging
import uuid
from typing import List, Optional, Sequence

from sigsvc.core.factories.signer_factory import SignerFactory
from sigsvc.core.interfaces.i_device_repository import IDeviceRepository
from sigsvc.core.models.signature import Signature
from sigsvc.core.models.signature_device import SignatureDevice
from sigsvc.core.services.chain_verifier_service import ChainVerifierService

logger = logging.getLogger(__name__)

class DeviceService:
    """
    Servicio de Dominio que orquesta el ciclo de vida de los dispositivos:
    Algoritmo -> Firmante (claves nuevas) -> Dispositivo -> Registro -> Firmas.

    No reintenta nada: cada error tipado sube tal cual al llamante,
    que decide cómo traducirlo (p. ej. a códigos HTTP).
    """

    def __init__(self, repository: IDeviceRepository) -> None:
        self._repository = repository

    def create_device(self, algorithm: str, label: str = "", device_id: Optional[str] = None) -> SignatureDevice:
        # El firmante se resuelve ANTES de tocar el registro:
        # un algoritmo desconocido no deja rastro.
        signer = SignerFactory.create_signer(algorithm)

        if device_id is None:
            device_id = str(uuid.uuid4())

        device = SignatureDevice(device_id, label, signer)
        self._repository.save(device)
        return device

    def list_devices(self) -> List[SignatureDevice]:
        return self._repository.find_all()

    def get_device(self, device_id: str) -> SignatureDevice:
        return self._repository.find_by_id(device_id)

    def sign_data(self, device_id: str, data: str) -> Signature:
        device = self._repository.find_by_id(device_id)
        return device.sign(data)

    def count_devices(self) -> int:
        return self._repository.count()

    def verify_chain(self, device_id: str, signatures: Sequence[Signature]) -> bool:
        """
        Verifica una cadena de firmas con la clave pública del dispositivo.
        La secuencia debe empezar en la primera firma del dispositivo.
        """
        device = self._repository.find_by_id(device_id)
        valid = ChainVerifierService.verify_chain(
            device.id, device.algorithm, device.get_public_key(), signatures
        )
        logger.info(f"Verificación de cadena del dispositivo {device_id}: {'OK' if valid else 'RECHAZADA'} ({len(signatures)} firmas).")
        return valid
