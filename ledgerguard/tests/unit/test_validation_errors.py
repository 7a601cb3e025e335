# ledgerguard/tests/unit/test_validation_errors.py
'''
Test Suite para los tipos de resultado:
    Verifica mensajes estables, contexto por tipo de error,
    la regla valid == sin errores y la serialización del resultado.
'''

import sys
import os

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from ledgerguard.core.models.utxo_id import UtxoId
from ledgerguard.core.validators.validation_errors import (
    AmountTotals,
    CollaboratorError,
    ErrorKind,
    MalformedTransactionError,
    ValidationError,
    ValidationResult,
    ValidatorFatalError,
)

REF = UtxoId("tx1", 0)

def test_error_kinds_are_closed_set():
    assert {k.value for k in ErrorKind} == {
        "UTXO_NOT_FOUND", "AMOUNT_MISMATCH", "INVALID_SIGNATURE", "DOUBLE_SPENDING"
    }

def test_constructors_set_kind_message_and_context():
    assert ValidationError.utxo_not_found(REF) == ValidationError(
        ErrorKind.UTXO_NOT_FOUND, "UTXO not found: tx1:0", REF
    )
    assert ValidationError.double_spending(REF).message == \
        "UTXO referenced multiple times in transaction: tx1:0"
    mismatch = ValidationError.amount_mismatch(10, 9)
    assert mismatch.message == "Input amount (10) does not match output amount (9)"
    assert mismatch.context == AmountTotals(10, 9)
    assert ValidationError.owner_mismatch(REF).kind is ErrorKind.INVALID_SIGNATURE

def test_result_validity_follows_errors():
    assert ValidationResult.from_errors([]).valid is True
    result = ValidationResult.from_errors([
        ValidationError.double_spending(REF), ValidationError.double_spending(REF)
    ])
    assert result.valid is False
    assert len(result.errors_of(ErrorKind.DOUBLE_SPENDING)) == 2
    assert result.errors_of(ErrorKind.AMOUNT_MISMATCH) == []

def test_result_to_dict():
    result = ValidationResult.from_errors([
        ValidationError.utxo_not_found(REF), ValidationError.amount_mismatch(0, 5)
    ])
    assert result.to_dict() == {
        "valid": False,
        "errors": [
            {"kind": "UTXO_NOT_FOUND", "message": "UTXO not found: tx1:0",
             "context": {"tx_id": "tx1", "output_index": 0}},
            {"kind": "AMOUNT_MISMATCH", "message": "Input amount (0) does not match output amount (5)",
             "context": {"total_input": 0, "total_output": 5}},
        ]
    }

def test_from_errors_copies_the_list():
    errors = [ValidationError.utxo_not_found(REF)]
    result = ValidationResult.from_errors(errors)
    errors.clear()
    assert len(result.errors) == 1

def test_fatal_errors_share_a_base():
    assert issubclass(MalformedTransactionError, ValidatorFatalError)
    assert issubclass(CollaboratorError, ValidatorFatalError)
    assert not issubclass(ValidatorFatalError, ValueError)
