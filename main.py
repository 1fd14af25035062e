import os
import sys
import argparse
import logging

import uvicorn

import logger_config

logger = logging.getLogger()

# =========================================================
# 🚀 ENTRY POINT PRINCIPAL
# =========================================================

def inject_environment(args: argparse.Namespace) -> None:
    """Los flags de CLI ganan sobre las variables de entorno."""
    if args.host:
        os.environ["SIGSVC_API_HOST"] = args.host
    if args.port:
        os.environ["SIGSVC_API_PORT"] = str(args.port)
    if args.log_dir:
        os.environ["SIGSVC_LOG_DIR"] = args.log_dir

def main():
    parser = argparse.ArgumentParser(description="Lanzador Signature Device Service")

    parser.add_argument("--host", type=str, help="Forzar host de la API")
    parser.add_argument("--port", type=int, help="Forzar puerto de la API")
    parser.add_argument("--log-dir", type=str, help="Directorio de logs de sesión")

    args = parser.parse_args()
    inject_environment(args)

    logger_config.setup_logging()

    # La configuración se lee al importar: después de inyectar el entorno
    from sigsvc.interface.api.config import settings

    print("\n" + "="*60)
    print(f"🔏 INICIANDO SIGNATURE DEVICE SERVICE")
    print(f"🌐 API Disponible en: http://{settings.host}:{settings.port}{settings.api_prefix}")
    print("="*60 + "\n")

    try:
        uvicorn.run(
            "sigsvc.interface.api.server:app",
            host=settings.host,
            port=settings.port,
            log_level="info"
        )
    except Exception as e:
        logger.critical(f"❌ Error fatal en el servicio: {e}", exc_info=True)
        sys.exit(1)

if __name__ == "__main__":
    main()
