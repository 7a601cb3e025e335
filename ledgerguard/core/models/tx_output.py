# ledgerguard/core/models/tx_output.py

from typing import Dict, Any


class TxOutput:
    """
    Representa una salida de transacción: un monto asignado a un nuevo dueño.
    """

    def __init__(self, amount: int, owner: str) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"amount debe ser int. Recibido: {type(amount)}")
        if amount < 0:
            raise ValueError("El valor del output no puede ser negativo.")
        if not isinstance(owner, str):
            raise TypeError(f"owner debe ser str. Recibido: {type(owner)}")

        self._amount: int = amount
        self._owner: str = owner

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def owner(self) -> str:
        return self._owner

    def to_dict(self) -> Dict[str, Any]:
        return {
            "amount": self._amount,
            "owner": self._owner
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'TxOutput':
        return TxOutput(
            amount=data["amount"],
            owner=data["owner"]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TxOutput):
            return NotImplemented
        return self._amount == other._amount and self._owner == other._owner

    def __hash__(self) -> int:
        return hash((self._amount, self._owner))

    def __repr__(self) -> str:
        return f"<TxOutput val={self._amount} owner={self._owner[:8]}...>"
