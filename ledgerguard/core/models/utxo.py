# ledgerguard/core/models/utxo.py

from typing import Dict, Any


class UTXO:
    """
    Registro del Pool para una salida no gastada: dueño y monto.
    El validador solo lo lee; el Pool es el único que lo crea o elimina.
    """

    __slots__ = ("_owner", "_amount")

    def __init__(self, owner: str, amount: int) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"amount debe ser int. Recibido: {type(amount)}")
        if amount < 0:
            raise ValueError("El monto de una UTXO no puede ser negativo.")
        if not isinstance(owner, str):
            raise TypeError(f"owner debe ser str. Recibido: {type(owner)}")

        self._owner: str = owner
        self._amount: int = amount

    @property
    def owner(self) -> str: return self._owner
    @property
    def amount(self) -> int: return self._amount

    def to_dict(self) -> Dict[str, Any]:
        return {"owner": self._owner, "amount": self._amount}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'UTXO':
        return UTXO(owner=data["owner"], amount=data["amount"])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UTXO):
            return NotImplemented
        return self._owner == other._owner and self._amount == other._amount

    def __hash__(self) -> int:
        return hash((self._owner, self._amount))

    def __repr__(self) -> str:
        return f"<UTXO amount={self._amount} owner={self._owner[:8]}...>"
