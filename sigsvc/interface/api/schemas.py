# sigsvc/interface/api/schemas.py
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

class ImmutableModel(BaseModel):
    """
    Clase base que fuerza la inmutabilidad (frozen=True).
    Garantiza que el estado del objeto no sea modificado después de crearse.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore'
    )

# --- SOBRES DE RESPUESTA ---

class DataResponse(ImmutableModel, Generic[T]):
    data: T

class ErrorResponse(ImmutableModel):
    errors: List[str]

# --- SISTEMA ---

class HealthResponse(ImmutableModel):
    status: str
    version: str
    devices: int

# --- DISPOSITIVOS ---

class CreateDeviceRequest(ImmutableModel):
    algorithm: str = Field(..., description="Familia de algoritmo: 'RSA' o 'ECC'")
    label: str = Field("", description="Etiqueta de visualización")
    # Si se omite, el servidor genera un UUID4
    id: Optional[str] = Field(None, description="Identificador opaco del dispositivo")

class CreateDeviceResponse(ImmutableModel):
    id: str
    label: str
    algorithm: str

class DeviceSummary(ImmutableModel):
    id: str
    label: str

class DeviceDetail(ImmutableModel):
    id: str
    label: str
    algorithm: str
    signature_counter: int
    public_key: str = Field(..., description="Clave pública PEM para verificar las firmas")

# --- FIRMAS ---

class SignDataRequest(ImmutableModel):
    data: str

class SignDataByIdRequest(ImmutableModel):
    id: str
    data: str

class SignDataResponse(ImmutableModel):
    signature: str = Field(..., description="Firma cruda en base64")
    signed_data: str = Field(..., description="Payload exacto que se firmó")

# --- VERIFICACIÓN ---

class VerifyChainRequest(ImmutableModel):
    signatures: List[SignDataResponse] = Field(..., description="Firmas del dispositivo, en orden, desde la primera")

class VerifyChainResponse(ImmutableModel):
    valid: bool
