# sigsvc/core/exceptions.py

from typing import List, Optional


class SigningServiceError(Exception):
    """Raíz de todos los errores tipados del motor de firma."""


class UnknownAlgorithmError(SigningServiceError):
    """El algoritmo solicitado no tiene generador ni firmante registrado."""

    def __init__(self, algorithm: str, supported: Optional[List[str]] = None) -> None:
        self.algorithm = algorithm
        message = f"Algoritmo desconocido: '{algorithm}'"
        if supported:
            message += f" (soportados: {', '.join(supported)})"
        super().__init__(message)


class KeyGenerationError(SigningServiceError):
    """Fallo del backend criptográfico al generar un par de claves."""


class SigningError(SigningServiceError):
    """Fallo del backend criptográfico durante la firma."""


class DeviceAlreadyExistsError(SigningServiceError):
    """Ya existe un dispositivo registrado con ese identificador."""

    def __init__(self, device_id: str) -> None:
        self.device_id = device_id
        super().__init__(f"El dispositivo '{device_id}' ya existe")


class DeviceNotFoundError(SigningServiceError):
    """No existe ningún dispositivo con ese identificador."""

    def __init__(self, device_id: str) -> None:
        self.device_id = device_id
        super().__init__(f"Dispositivo no encontrado: '{device_id}'")
