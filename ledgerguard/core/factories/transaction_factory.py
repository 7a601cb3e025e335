# ledgerguard/core/factories/transaction_factory.py

import time
import logging
from typing import List, Optional, Sequence, Tuple

# Contratos
from ledgerguard.core.interfaces.i_signer import ISigner

# Modelos
from ledgerguard.core.models.transaction import Transaction
from ledgerguard.core.models.tx_input import TxInput
from ledgerguard.core.models.tx_output import TxOutput
from ledgerguard.core.models.utxo_id import UtxoId

# Servicios
from ledgerguard.core.services.signable_payload import SignablePayload

logger = logging.getLogger(__name__)

Spend = Tuple[UtxoId, ISigner]

class TransactionFactory:

    @staticmethod
    def create_unsigned(
        tx_id: str,
        spends: Sequence[Tuple[UtxoId, str]],
        outputs: Sequence[TxOutput],
        timestamp: Optional[int] = None
    ) -> Transaction:
        """Ensambla una TX con inputs (referencia, dueño declarado) sin firmar."""
        inputs = [TxInput(utxo_id=ref, owner=owner) for ref, owner in spends]
        return Transaction(
            tx_id=tx_id,
            timestamp=int(time.time()) if timestamp is None else timestamp,
            inputs=inputs,
            outputs=outputs
        )

    @staticmethod
    def create_signed(
        tx_id: str,
        spends: Sequence[Spend],
        outputs: Sequence[TxOutput],
        timestamp: Optional[int] = None
    ) -> Transaction:
        try:
            # 1. Ensamblaje sin firmas (dueño declarado = identidad del firmante)
            unsigned = TransactionFactory.create_unsigned(
                tx_id,
                [(ref, signer.get_public_key()) for ref, signer in spends],
                outputs,
                timestamp
            )

            # 2. Payload canónico: el mismo mensaje para todos los inputs
            payload = SignablePayload.build(unsigned)

            # 3. Firma por input
            signatures = [signer.sign(payload) for _, signer in spends]
            tx = TransactionFactory.with_signatures(unsigned, signatures)

            logger.info(f"Transacción firmada: {len(spends)} inputs | ID: {tx_id[:8]}...")
            return tx

        except Exception:
            logger.exception(f"Error fatal creando transacción firmada {tx_id[:8]}")
            raise

    @staticmethod
    def with_signatures(transaction: Transaction, signatures: Sequence[str]) -> Transaction:
        """Copia de la TX con las firmas reemplazadas, input por input."""
        inputs = transaction.inputs
        if len(signatures) != len(inputs):
            raise ValueError(f"Se esperaban {len(inputs)} firmas, se recibieron {len(signatures)}.")

        signed: List[TxInput] = [inp.with_signature(sig) for inp, sig in zip(inputs, signatures)]
        return transaction.with_inputs(signed)
