# ledgerguard/core/models/transaction.py

import logging
from typing import List, Dict, Any, Optional, Sequence, Tuple

from ledgerguard.core.models.tx_input import TxInput
from ledgerguard.core.models.tx_output import TxOutput

logger = logging.getLogger(__name__)

class Transaction:
    """
    Transacción inmutable: identificador, inputs y outputs ordenados y timestamp.
    Los getters devuelven copias para que nadie (incluido el validador) la mute.
    """

    def __init__(
        self,
        tx_id: str,
        timestamp: int,
        inputs: Optional[Sequence[TxInput]] = None,
        outputs: Optional[Sequence[TxOutput]] = None
    ) -> None:
        if not isinstance(tx_id, str):
            raise TypeError(f"tx_id debe ser str. Recibido: {type(tx_id)}")
        if not tx_id:
            raise ValueError("Identificador de transacción vacío.")
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise TypeError(f"timestamp debe ser int. Recibido: {type(timestamp)}")

        self._tx_id: str = tx_id
        self._timestamp: int = timestamp
        self._inputs: Tuple[TxInput, ...] = tuple(inputs) if inputs is not None else ()
        self._outputs: Tuple[TxOutput, ...] = tuple(outputs) if outputs is not None else ()

        for inp in self._inputs:
            if not isinstance(inp, TxInput):
                raise TypeError(f"Input inválido: se esperaba TxInput, se recibió {type(inp).__name__}.")
        for out in self._outputs:
            if not isinstance(out, TxOutput):
                raise TypeError(f"Output inválido: se esperaba TxOutput, se recibió {type(out).__name__}.")

        logger.debug(f"TX {self._tx_id[:8]}... instanciada.")

    # --- Getters ---
    @property
    def tx_id(self) -> str: return self._tx_id
    @property
    def timestamp(self) -> int: return self._timestamp
    @property
    def inputs(self) -> List[TxInput]: return list(self._inputs)
    @property
    def outputs(self) -> List[TxOutput]: return list(self._outputs)

    @property
    def total_output_amount(self) -> int:
        return sum(out.amount for out in self._outputs)

    def with_inputs(self, inputs: Sequence[TxInput]) -> 'Transaction':
        """Copia de la transacción con otros inputs (mismo ID, outputs y timestamp)."""
        return Transaction(self._tx_id, self._timestamp, inputs, self._outputs)

    def to_dict(self) -> Dict[str, Any]:
        """Serializa la transacción para archivos JSON / CLI."""
        return {
            "tx_id": self._tx_id,
            "timestamp": self._timestamp,
            "inputs": [inp.to_dict() for inp in self._inputs],
            "outputs": [out.to_dict() for out in self._outputs]
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Transaction':
        inputs_list: List[TxInput] = [TxInput.from_dict(d) for d in data.get("inputs", [])]
        outputs_list: List[TxOutput] = [TxOutput.from_dict(d) for d in data.get("outputs", [])]

        return Transaction(
            tx_id=data["tx_id"],
            timestamp=data["timestamp"],
            inputs=inputs_list,
            outputs=outputs_list
        )

    def __repr__(self) -> str:
        return f"<Transaction id={self._tx_id[:8]} in={len(self._inputs)} out={len(self._outputs)}>"
