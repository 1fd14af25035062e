# logger_config.py
import logging
import os
import glob
import sys
from typing import List, Optional

def setup_logging(log_dir: Optional[str] = None) -> str:
    # 1. Definir ruta: por defecto 'data/logs' junto a este archivo
    if log_dir is None:
        ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
        log_dir = os.getenv("SIGSVC_LOG_DIR", os.path.join(ROOT_DIR, "data", "logs"))

    os.makedirs(log_dir, exist_ok=True)

    # 2. Rotación de Archivos: siguiente número libre (signing_0.log, signing_1.log...)
    existentes: List[str] = glob.glob(os.path.join(log_dir, "signing_*.log"))
    indices: List[int] = []
    for archivo in existentes:
        try:
            num = int(archivo.split('_')[-1].split('.')[0])
            indices.append(num)
        except (ValueError, IndexError): continue

    siguiente: int = max(indices) + 1 if indices else 0
    nombre_archivo: str = os.path.join(log_dir, f"signing_{siguiente}.log")

    # 3. Configurar el Root Logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    # Limpiamos handlers anteriores para evitar duplicados si se llama dos veces
    root_logger.handlers = []

    # --- CANAL 1: ARCHIVO (Todo el historial detallado) ---
    fh = logging.FileHandler(nombre_archivo, encoding='utf-8')
    fh.setLevel(logging.INFO)
    fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] [%(threadName)s] [%(name)s]: %(message)s'))

    # --- CANAL 2: TERMINAL (Solo ERRORES o CRÍTICOS) ---
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(logging.ERROR)
    ch.setFormatter(logging.Formatter('\n❌ ERROR EN: %(name)s | Línea: %(lineno)d\nDetalle: %(message)s\n'))

    root_logger.addHandler(fh)
    root_logger.addHandler(ch)

    print(f"📝 Log de sesión guardado en: {nombre_archivo}")
    return nombre_archivo
