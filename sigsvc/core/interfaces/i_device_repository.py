# sigsvc/core/interfaces/i_device_repository.py

from abc import ABC, abstractmethod
from typing import List

from sigsvc.core.models.signature_device import SignatureDevice

class IDeviceRepository(ABC):
    """
    Contrato Polimórfico para el registro de dispositivos de firma.
    No existen operaciones de actualización ni de borrado.
    """

    @abstractmethod
    def save(self, device: SignatureDevice) -> None:
        """
        Registra un dispositivo nuevo. Nunca sobrescribe.
        Lanza DeviceAlreadyExistsError si el id ya está registrado.
        """
        pass

    @abstractmethod
    def find_by_id(self, device_id: str) -> SignatureDevice:
        """Lanza DeviceNotFoundError si el id no existe."""
        pass

    @abstractmethod
    def find_all(self) -> List[SignatureDevice]:
        """Listado completo (orden no garantizado)."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass
