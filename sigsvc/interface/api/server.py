# sigsvc/interface/api/server.py

import logging
from contextlib import asynccontextmanager
from typing import List

# --- Framework Imports ---
from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse

# --- Project Imports ---
from sigsvc.interface.api import schemas
from sigsvc.interface.api.config import settings
from sigsvc.interface.api.dependencies import ServiceContainer, get_device_service
from sigsvc.core.services.device_service import DeviceService
from sigsvc.core.models.signature import Signature
from sigsvc.core.exceptions import (
    SigningServiceError,
    UnknownAlgorithmError,
    KeyGenerationError,
    SigningError,
    DeviceAlreadyExistsError,
    DeviceNotFoundError,
)

logger = logging.getLogger(__name__)

# ==============================================================================
# 🚦 TRADUCCIÓN DE ERRORES DE DOMINIO -> HTTP
# ==============================================================================

_STATUS_BY_ERROR = {
    UnknownAlgorithmError: status.HTTP_400_BAD_REQUEST,
    DeviceAlreadyExistsError: status.HTTP_409_CONFLICT,
    DeviceNotFoundError: status.HTTP_404_NOT_FOUND,
    KeyGenerationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    SigningError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

def _error_response(status_code: int, message: str) -> JSONResponse:
    body = schemas.ErrorResponse(errors=[message])
    return JSONResponse(status_code=status_code, content=body.model_dump())

async def signing_service_error_handler(request: Request, exc: SigningServiceError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    if status_code >= 500:
        # Los fallos criptográficos ya se registraron con traza en la capa infra
        logger.error(f"Fallo interno en {request.method} {request.url.path}: {exc}")
        return _error_response(status_code, "Error interno del servicio de firma.")

    logger.warning(f"Petición rechazada ({status_code}) en {request.url.path}: {exc}")
    return _error_response(status_code, str(exc))

# ==============================================================================
# 🌐 RUTAS
# ==============================================================================

router = APIRouter(prefix=settings.api_prefix)

@router.get("/health", response_model=schemas.DataResponse[schemas.HealthResponse], tags=["Sistema"])
def health(service: DeviceService = Depends(get_device_service)):
    return schemas.DataResponse(data=schemas.HealthResponse(
        status="pass",
        version=settings.version,
        devices=service.count_devices(),
    ))

@router.post(
    "/signature-devices",
    response_model=schemas.DataResponse[schemas.CreateDeviceResponse],
    status_code=status.HTTP_201_CREATED,
    tags=["Dispositivos"],
)
def create_device(req: schemas.CreateDeviceRequest, service: DeviceService = Depends(get_device_service)):
    device = service.create_device(req.algorithm, req.label, req.id)
    return schemas.DataResponse(data=schemas.CreateDeviceResponse(
        id=device.id,
        label=device.label,
        algorithm=device.algorithm,
    ))

@router.get(
    "/signature-devices",
    response_model=schemas.DataResponse[List[schemas.DeviceSummary]],
    tags=["Dispositivos"],
)
def list_devices(service: DeviceService = Depends(get_device_service)):
    devices = [schemas.DeviceSummary(id=d.id, label=d.label) for d in service.list_devices()]
    return schemas.DataResponse(data=devices)

@router.get(
    "/signature-devices/{device_id}",
    response_model=schemas.DataResponse[schemas.DeviceDetail],
    tags=["Dispositivos"],
)
def get_device(device_id: str, service: DeviceService = Depends(get_device_service)):
    device = service.get_device(device_id)
    return schemas.DataResponse(data=schemas.DeviceDetail(**device.to_dict()))

@router.post(
    "/signature-devices/{device_id}/sign",
    response_model=schemas.DataResponse[schemas.SignDataResponse],
    tags=["Firmas"],
)
def sign_with_device(device_id: str, req: schemas.SignDataRequest, service: DeviceService = Depends(get_device_service)):
    signature = service.sign_data(device_id, req.data)
    return schemas.DataResponse(data=schemas.SignDataResponse(**signature.to_dict()))

@router.post("/sign", response_model=schemas.DataResponse[schemas.SignDataResponse], tags=["Firmas"])
def sign_data(req: schemas.SignDataByIdRequest, service: DeviceService = Depends(get_device_service)):
    signature = service.sign_data(req.id, req.data)
    return schemas.DataResponse(data=schemas.SignDataResponse(**signature.to_dict()))

@router.post(
    "/signature-devices/{device_id}/verify",
    response_model=schemas.DataResponse[schemas.VerifyChainResponse],
    tags=["Firmas"],
)
def verify_chain(device_id: str, req: schemas.VerifyChainRequest, service: DeviceService = Depends(get_device_service)):
    signatures = [Signature(signature=s.signature, signed_data=s.signed_data) for s in req.signatures]
    valid = service.verify_chain(device_id, signatures)
    return schemas.DataResponse(data=schemas.VerifyChainResponse(valid=valid))

# ==============================================================================
# 🏗️ APLICACIÓN
# ==============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🔏 [BOOT] Iniciando Signature Device Service...")
    ServiceContainer.initialize()
    try:
        yield
    finally:
        logger.info("🛑 Apagando Signature Device Service...")
        ServiceContainer.shutdown()

app = FastAPI(title=settings.title, version=settings.version, debug=settings.debug_mode, lifespan=lifespan)
app.add_exception_handler(SigningServiceError, signing_service_error_handler) # type: ignore
app.include_router(router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
