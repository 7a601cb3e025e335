# ledgerguard/tests/unit/test_transaction_factory.py
'''
Test Suite para TransactionFactory:
    Verifica el ensamblaje de transacciones y que cada input quede firmado
    sobre el payload canónico con la identidad de su firmante.
'''

import sys
import os
from unittest.mock import MagicMock

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from ledgerguard.core.factories.transaction_factory import TransactionFactory
from ledgerguard.core.interfaces.i_signer import ISigner
from ledgerguard.core.models.tx_output import TxOutput
from ledgerguard.core.models.utxo_id import UtxoId
from ledgerguard.core.services.signable_payload import SignablePayload

from ledgerguard.tests.mocks.mock_crypto import MockSigner, MockSignatureVerifier

def test_create_signed_uses_signer_identity_and_payload():
    alice = MockSigner("ALICE")
    bob = MockSigner("BOB")
    tx = TransactionFactory.create_signed(
        "tx_f", [(UtxoId("a", 0), alice), (UtxoId("b", 1), bob)], [TxOutput(3, "C")], timestamp=42
    )

    payload = SignablePayload.build(tx)
    verifier = MockSignatureVerifier()

    assert [inp.owner for inp in tx.inputs] == ["ALICE", "BOB"]
    assert tx.timestamp == 42
    assert all(verifier.verify(payload, inp.signature, inp.owner) for inp in tx.inputs)

def test_every_signer_receives_the_same_message():
    signer = MagicMock(spec=ISigner)
    signer.get_public_key.return_value = "PK"
    signer.sign.return_value = "aa"

    tx = TransactionFactory.create_signed(
        "tx_m", [(UtxoId("a", 0), signer), (UtxoId("a", 1), signer)], [], timestamp=1
    )

    messages = [call.args[0] for call in signer.sign.call_args_list]
    assert messages == [SignablePayload.build(tx)] * 2

def test_create_unsigned_defaults_timestamp_to_now():
    tx = TransactionFactory.create_unsigned("tx_u", [(UtxoId("a", 0), "A")], [])
    assert tx.timestamp > 0
    assert tx.inputs[0].signature == ""

def test_with_signatures_requires_one_per_input():
    tx = TransactionFactory.create_unsigned("tx_u", [(UtxoId("a", 0), "A")], [], timestamp=1)
    with pytest.raises(ValueError):
        TransactionFactory.with_signatures(tx, ["aa", "bb"])

def test_signer_failure_propagates():
    signer = MagicMock(spec=ISigner)
    signer.get_public_key.return_value = "PK"
    signer.sign.side_effect = ValueError("Error al firmar con ecdsa.")

    with pytest.raises(ValueError):
        TransactionFactory.create_signed("tx_e", [(UtxoId("a", 0), signer)], [], timestamp=1)
