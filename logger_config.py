# logger_config.py
import logging
import os
import glob
import sys
from typing import List, Optional

from ledgerguard.core.config.config_manager import ConfigManager

def setup_logging(log_dir: Optional[str] = None, console: bool = True) -> str:
    config = ConfigManager().logging

    # 1. Definir ruta: si es relativa, cuelga de la raíz del proyecto
    log_dir = log_dir or config.log_dir
    if not os.path.isabs(log_dir):
        ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
        log_dir = os.path.join(ROOT_DIR, log_dir)

    os.makedirs(log_dir, exist_ok=True)

    # 2. Rotación de Archivos: Buscar el siguiente número (validator_0.log, validator_1.log...)
    existentes: List[str] = glob.glob(os.path.join(log_dir, "validator_*.log"))
    indices: List[int] = []
    for archivo in existentes:
        try:
            # Extraer el número del nombre del archivo
            num = int(archivo.split('_')[-1].split('.')[0])
            indices.append(num)
        except (ValueError, IndexError): continue

    siguiente: int = max(indices) + 1 if indices else 0
    nombre_archivo: str = os.path.join(log_dir, f"validator_{siguiente}.log")

    # 3. Configurar el Root Logger
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Limpiamos handlers anteriores para evitar duplicados si se llama dos veces
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # --- CANAL 1: ARCHIVO (Todo el historial detallado) ---
    fh = logging.FileHandler(nombre_archivo, encoding='utf-8')
    fh.setLevel(config.level)
    fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] [%(name)s]: %(message)s'))
    root_logger.addHandler(fh)

    # --- CANAL 2: TERMINAL (Solo ERRORES o CRÍTICOS) ---
    if console:
        ch = logging.StreamHandler(sys.stdout)
        ch.setLevel(logging.ERROR)
        ch.setFormatter(logging.Formatter('\n❌ ERROR EN: %(name)s | Línea: %(lineno)d\nDetalle: %(message)s\n'))
        root_logger.addHandler(ch)

    return nombre_archivo
