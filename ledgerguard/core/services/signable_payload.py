# ledgerguard/core/services/signable_payload.py
'''
class SignablePayload:
    Deriva la representación canónica (sin firmas) de una transacción, usada como
    mensaje de TODAS las verificaciones de firma de esa transacción.

    Formato fijo (contrato de cable, no cambiar el orden de campos):
        {"id":<tx_id>,
         "inputs":[{"utxoId":{"txId":<str>,"outputIndex":<int>},"owner":<str>}, ...],
         "outputs":[{"amount":<int>,"owner":<str>}, ...],
         "timestamp":<int>}
    JSON compacto (sin espacios), orden de inserción, codificado en UTF-8.

    Methods:
        to_dict(transaction) -> Dict: Estructura canónica sin firmas.
        build(transaction) -> bytes: Serialización determinista del dict anterior.
        digest(transaction) -> bytes: Doble SHA-256 del payload (lo que firma ECDSA).
'''

import json
from typing import Any, Dict

from ledgerguard.core.models.transaction import Transaction
from ledgerguard.core.utils.crypto_utility import CryptoUtility

class SignablePayload:

    @staticmethod
    def to_dict(transaction: Transaction) -> Dict[str, Any]:
        # La firma queda fuera: firmar un mensaje que la contiene sería circular.
        return {
            "id": transaction.tx_id,
            "inputs": [
                {
                    "utxoId": {
                        "txId": inp.utxo_id.tx_id,
                        "outputIndex": inp.utxo_id.output_index
                    },
                    "owner": inp.owner
                }
                for inp in transaction.inputs
            ],
            "outputs": [
                {"amount": out.amount, "owner": out.owner}
                for out in transaction.outputs
            ],
            "timestamp": transaction.timestamp
        }

    @staticmethod
    def build(transaction: Transaction) -> bytes:
        canonical = SignablePayload.to_dict(transaction)
        return json.dumps(canonical, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

    @staticmethod
    def digest(transaction: Transaction) -> bytes:
        return CryptoUtility.double_sha256_digest(SignablePayload.build(transaction))
