# sigsvc/interface/api/dependencies.py
import logging
from typing import Optional

from sigsvc.core.interfaces.i_device_repository import IDeviceRepository
from sigsvc.core.services.device_service import DeviceService
from sigsvc.infra.persistence.in_memory_device_repository import InMemoryDeviceRepository

logger = logging.getLogger(__name__)

class ServiceContainer:
    """Contenedor de proceso: un único registro de dispositivos y su servicio."""

    _repository: Optional[IDeviceRepository] = None
    _service: Optional[DeviceService] = None

    @classmethod
    def initialize(cls, repository: Optional[IDeviceRepository] = None) -> None:
        if cls._service is not None:
            logger.debug("Servicio ya inicializado. Ignorando initialize.")
            return

        cls._repository = repository or InMemoryDeviceRepository()
        cls._service = DeviceService(cls._repository)
        logger.info(f"✅ [API-DI] Registro '{type(cls._repository).__name__}' inyectado correctamente.")

    @classmethod
    def get_service(cls) -> DeviceService:
        if cls._service is None:
            logger.critical("🚨 ERROR DE ARRANQUE: El servicio no ha sido inicializado. Ejecute initialize() primero.")
            raise RuntimeError("El servicio no ha sido inicializado. Ejecute initialize() primero.")
        return cls._service

    @classmethod
    def shutdown(cls) -> None:
        if cls._service is not None:
            logger.info("🛑 [API] Liberando registro de dispositivos (los datos en memoria se pierden).")
        cls._service = None
        cls._repository = None

def get_device_service() -> DeviceService:
    return ServiceContainer.get_service()
