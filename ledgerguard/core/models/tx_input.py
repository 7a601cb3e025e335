# ledgerguard/core/models/tx_input.py

from typing import Dict, Any

from ledgerguard.core.models.utxo_id import UtxoId


class TxInput:

    def __init__(self, utxo_id: UtxoId, owner: str, signature: str = "") -> None:
        if not isinstance(utxo_id, UtxoId):
            raise TypeError(f"utxo_id debe ser UtxoId. Recibido: {type(utxo_id)}")
        if not isinstance(owner, str):
            raise TypeError(f"owner debe ser str. Recibido: {type(owner)}")

        self._utxo_id: UtxoId = utxo_id
        self._owner: str = owner
        # Firma DER en hexadecimal (vacía mientras la TX no esté firmada)
        self._signature: str = signature or ""

    # --- Getters ---
    @property
    def utxo_id(self) -> UtxoId: return self._utxo_id
    @property
    def owner(self) -> str: return self._owner
    @property
    def signature(self) -> str: return self._signature

    def with_signature(self, signature: str) -> 'TxInput':
        """Devuelve una copia del input con otra firma (el original no cambia)."""
        return TxInput(self._utxo_id, self._owner, signature)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "utxo_id": self._utxo_id.to_dict(),
            "owner": self._owner,
            "signature": self._signature
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'TxInput':
        raw_sig = data.get("signature", "")

        # Si ya viene como bytes (memoria), lo pasamos a Hex
        if isinstance(raw_sig, bytes):
            raw_sig = raw_sig.hex()

        return TxInput(
            utxo_id=UtxoId.from_dict(data["utxo_id"]),
            owner=data["owner"],
            signature=str(raw_sig)
        )

    def __repr__(self) -> str:
        return f"<TxInput ref={self._utxo_id.key} owner={self._owner[:8]}...>"
