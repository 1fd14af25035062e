# sigsvc/infra/persistence/in_memory_device_repository.py

import logging
from typing import Dict, List

from sigsvc.core.exceptions import DeviceAlreadyExistsError, DeviceNotFoundError
from sigsvc.core.interfaces.i_device_repository import IDeviceRepository
from sigsvc.core.models.signature_device import SignatureDevice
from sigsvc.core.utils.rw_lock import ReadWriteLock

logger = logging.getLogger(__name__)

class InMemoryDeviceRepository(IDeviceRepository):
    """
    Registro de dispositivos en memoria del proceso.
    Se pierde al reiniciar: no hay persistencia de claves.

    [THREAD-SAFE]: 'save' toma el candado exclusivo; las consultas, el compartido.
    El estado interno de cada dispositivo lo protege su propio candado.
    """

    def __init__(self) -> None:
        self._devices: Dict[str, SignatureDevice] = {}
        self._lock = ReadWriteLock()
        logger.info("Registro de dispositivos (memoria) iniciado.")

    def save(self, device: SignatureDevice) -> None:
        with self._lock.write_lock():
            if device.id in self._devices:
                logger.warning(f"Registro rechazado: el dispositivo {device.id} ya existe.")
                raise DeviceAlreadyExistsError(device.id)

            self._devices[device.id] = device
            logger.info(f"Dispositivo {device.id} registrado ({device.algorithm}).")

    def find_by_id(self, device_id: str) -> SignatureDevice:
        with self._lock.read_lock():
            device = self._devices.get(device_id)

        if device is None:
            logger.warning(f"Dispositivo no encontrado: {device_id}")
            raise DeviceNotFoundError(device_id)
        return device

    def find_all(self) -> List[SignatureDevice]:
        with self._lock.read_lock():
            return list(self._devices.values())

    def count(self) -> int:
        with self._lock.read_lock():
            return len(self._devices)
