# ledgerguard/core/managers/utxo_pool.py

import logging
import threading
from typing import Dict, List, Optional, Any

# Modelos
from ledgerguard.core.interfaces.i_utxo_pool import IUTXOPool
from ledgerguard.core.models.utxo import UTXO
from ledgerguard.core.models.utxo_id import UtxoId

logger = logging.getLogger(__name__)

class InMemoryUTXOPool(IUTXOPool):
    """
    Pool de referencia (Unspent Transaction Outputs) en memoria.
    El validador solo usa get_utxo; las escrituras son responsabilidad del dueño del Pool.

    [THREAD-SAFE]: Lecturas concurrentes seguras mientras otro hilo agrega o gasta.
    """

    def __init__(self) -> None:
        self._utxos: Dict[UtxoId, UTXO] = {}
        self._lock = threading.RLock()
        logger.debug("Pool UTXO en memoria iniciado.")

    def add_utxo(self, utxo_id: UtxoId, utxo: UTXO) -> None:
        with self._lock:
            if utxo_id in self._utxos:
                logger.warning(f"UTXO {utxo_id.key} ya existía; se sobrescribe.")
            self._utxos[utxo_id] = utxo

    def remove_utxo(self, utxo_id: UtxoId) -> None:
        """Marca la salida como gastada. Idempotente."""
        with self._lock:
            if self._utxos.pop(utxo_id, None) is None:
                logger.warning(f"Intento de gastar UTXO inexistente: {utxo_id.key}")

    # --- Consultas Seguras ---

    def get_utxo(self, tx_id: str, output_index: int) -> Optional[UTXO]:
        try:
            utxo_id = UtxoId(tx_id, output_index)
        except (ValueError, TypeError):
            return None

        with self._lock:
            return self._utxos.get(utxo_id)

    def contains(self, utxo_id: UtxoId) -> bool:
        with self._lock:
            return utxo_id in self._utxos

    def total_supply(self) -> int:
        with self._lock:
            return sum(u.amount for u in self._utxos.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._utxos)

    # --- Snapshots (archivos JSON de la CLI) ---

    @classmethod
    def from_snapshot(cls, entries: List[Dict[str, Any]]) -> 'InMemoryUTXOPool':
        pool = cls()
        for entry in entries:
            pool.add_utxo(UtxoId.from_dict(entry), UTXO.from_dict(entry))
        logger.info(f"Pool cargado desde snapshot: {len(pool)} UTXOs.")
        return pool

    def to_snapshot(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [{**utxo_id.to_dict(), **utxo.to_dict()} for utxo_id, utxo in self._utxos.items()]
