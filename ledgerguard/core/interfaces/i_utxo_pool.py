# ledgerguard/core/interfaces/i_utxo_pool.py
from abc import ABC, abstractmethod
from typing import Optional

from ledgerguard.core.models.utxo import UTXO

class IUTXOPool(ABC):
    """
    Contrato de lectura del Estado (Monedas no gastadas).
    Es lo único que el validador necesita del Pool: nunca escribe en él.
    """

    @abstractmethod
    def get_utxo(self, tx_id: str, output_index: int) -> Optional[UTXO]:
        """
        Recupera una UTXO específica.

        Returns:
            UTXO si existe y no está gastada; None en caso contrario.
        """
        pass
