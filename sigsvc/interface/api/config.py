# sigsvc/interface/api/config.py

import os
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

API_VERSION = "v0"

@dataclass(frozen=True)
class ApiConfig:
    host: str
    port: int
    title: str
    version: str
    api_prefix: str
    debug_mode: bool

    @classmethod
    def load(cls) -> 'ApiConfig':

        # Todo se lee del entorno (main.py inyecta los overrides de CLI)
        host = os.getenv("SIGSVC_API_HOST", "0.0.0.0")
        port = int(os.getenv("SIGSVC_API_PORT", 8080))
        title = os.getenv("SIGSVC_API_TITLE", "Signature Device Service")
        debug = os.getenv("SIGSVC_DEBUG", "False").lower() == "true"

        config = cls(
            host=host,
            port=port,
            title=title,
            version=API_VERSION,
            api_prefix=f"/api/{API_VERSION}",
            debug_mode=debug,
        )

        logger.info("⚙️  Configuración de la API cargada:")
        logger.info(f"   URL: http://{config.host}:{config.port}{config.api_prefix}")
        logger.info(f"   Título: {config.title} {config.version}")
        logger.debug(f"   Debug: {config.debug_mode}")

        return config

# Instancia Singleton inmutable
settings = ApiConfig.load()
