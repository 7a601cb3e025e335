# ledgerguard/core/config/config_manager.py
'''
class ConfigManager:
    Centraliza el acceso a la configuración (Validador y Logs), cargando valores
    desde el entorno (.env incluido) o desde un diccionario JSON.

    Methods:
        __new__(cls): Implementa el patrón Singleton para asegurar una única instancia.
        _initialize(self): Carga las configuraciones especializadas con valores por defecto/entorno.
        load_from_json_dict(self, json_data: Dict[str, Any]) -> None: Actualiza las secciones desde un JSON completo.
        reset(cls) -> None: Descarta la instancia (tests o recarga de entorno).
'''

from dotenv import load_dotenv
from typing import Dict, Any

# Cargar variables de entorno si existen
load_dotenv()

# Importar piezas de configuración
from ledgerguard.core.config.validator_config import ValidatorConfig
from ledgerguard.core.config.logging_config import LoggingConfig

class ConfigManager:

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._validator = ValidatorConfig()   # Reglas de validación
        self._logging = LoggingConfig()       # Nivel y carpeta de logs

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def load_from_json_dict(self, json_data: Dict[str, Any]) -> None:

        # Validador
        if "validator" in json_data:
            self._validator.update_from_dict(json_data["validator"])

        # Logs
        if "logging" in json_data:
            self._logging.update_from_dict(json_data["logging"])

    # --- ACCESORES ---

    @property
    def validator(self) -> ValidatorConfig:
        return self._validator

    @property
    def logging(self) -> LoggingConfig:
        return self._logging
