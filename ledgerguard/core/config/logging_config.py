# ledgerguard/core/config/logging_config.py

import os
import logging
from typing import Dict, Any

class LoggingConfig:
    """
    Configuración de logs: nivel y carpeta de los archivos de sesión.
    """

    DEFAULT_LOG_DIR = os.path.join("data", "logs")

    def __init__(self):
        self._level = os.getenv("LEDGERGUARD_LOG_LEVEL", "INFO").upper()
        self._log_dir = os.getenv("LEDGERGUARD_LOG_DIR", LoggingConfig.DEFAULT_LOG_DIR)

    @property
    def level_name(self) -> str: return self._level
    @property
    def log_dir(self) -> str: return self._log_dir

    @property
    def level(self) -> int:
        """Nivel numérico de logging (INFO si el nombre configurado no existe)."""
        value = logging.getLevelName(self._level)
        return value if isinstance(value, int) else logging.INFO

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        if "level" in data:
            self._level = str(data["level"]).upper()
        if "log_dir" in data:
            self._log_dir = str(data["log_dir"])
