# ledgerguard/core/models/utxo_id.py

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class UtxoId:
    """
    Referencia inmutable a una salida: (TX de origen, índice de output).
    Es un valor: dos referencias con los mismos campos son la misma UTXO.
    """
    tx_id: str
    output_index: int

    def __post_init__(self) -> None:
        if not isinstance(self.tx_id, str):
            raise TypeError(f"tx_id debe ser str. Recibido: {type(self.tx_id)}")
        if not self.tx_id:
            raise ValueError("Referencia a TX de origen vacía.")
        if isinstance(self.output_index, bool) or not isinstance(self.output_index, int):
            raise TypeError(f"output_index debe ser int. Recibido: {type(self.output_index)}")
        if self.output_index < 0:
            raise ValueError("Índice de output negativo.")

    @property
    def key(self) -> str:
        return f"{self.tx_id}:{self.output_index}"

    def to_dict(self) -> Dict[str, Any]:
        return {"tx_id": self.tx_id, "output_index": self.output_index}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'UtxoId':
        return UtxoId(
            tx_id=data["tx_id"],
            output_index=data["output_index"]
        )

    def __str__(self) -> str:
        return self.key
