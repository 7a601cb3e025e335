# ledgerguard/core/config/validator_config.py

import os
from typing import Dict, Any

_TRUTHY = ("1", "true", "yes", "on")

def _parse_flag(value: Any) -> bool:
    """Interpreta un flag de entorno o JSON ("false" en texto es False)."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY

class ValidatorConfig:
    """
    Reglas configurables del validador de transacciones.
    """

    def __init__(self):
        # Exigir que el dueño declarado del input sea el dueño real de la UTXO
        self._enforce_owner_match = _parse_flag(os.getenv("LEDGERGUARD_ENFORCE_OWNER_MATCH", "true"))

    # --- Getters ---
    @property
    def enforce_owner_match(self) -> bool: return self._enforce_owner_match

    # --- Actualización desde JSON ---
    def update_from_dict(self, data: Dict[str, Any]) -> None:
        if "enforce_owner_match" in data:
            self._enforce_owner_match = _parse_flag(data["enforce_owner_match"])
