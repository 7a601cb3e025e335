# ledgerguard/core/validators/validation_errors.py
'''
Taxonomía cerrada de errores de validación y el resultado agregado.

Los ValidationError son DATOS (se acumulan en el resultado), no excepciones.
Las excepciones de este módulo (ValidatorFatalError y derivadas) indican que el
validador no puede emitir un veredicto confiable y se propagan al llamador.
'''

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ledgerguard.core.models.utxo_id import UtxoId


class ErrorKind(str, Enum):
    UTXO_NOT_FOUND = "UTXO_NOT_FOUND"
    AMOUNT_MISMATCH = "AMOUNT_MISMATCH"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    DOUBLE_SPENDING = "DOUBLE_SPENDING"


@dataclass(frozen=True)
class AmountTotals:
    total_input: int
    total_output: int

    def to_dict(self) -> Dict[str, Any]:
        return {"total_input": self.total_input, "total_output": self.total_output}


ErrorContext = Union[UtxoId, AmountTotals]


@dataclass(frozen=True)
class ValidationError:
    kind: ErrorKind
    message: str
    context: Optional[ErrorContext] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "context": self.context.to_dict() if self.context is not None else None
        }

    # --- Constructores por tipo (mensajes estables para logs y clientes) ---

    @staticmethod
    def utxo_not_found(utxo_id: UtxoId) -> 'ValidationError':
        return ValidationError(ErrorKind.UTXO_NOT_FOUND, f"UTXO not found: {utxo_id.key}", utxo_id)

    @staticmethod
    def amount_mismatch(total_input: int, total_output: int) -> 'ValidationError':
        return ValidationError(
            ErrorKind.AMOUNT_MISMATCH,
            f"Input amount ({total_input}) does not match output amount ({total_output})",
            AmountTotals(total_input, total_output)
        )

    @staticmethod
    def invalid_signature(utxo_id: UtxoId) -> 'ValidationError':
        return ValidationError(
            ErrorKind.INVALID_SIGNATURE,
            f"Invalid signature for input referencing UTXO {utxo_id.key}",
            utxo_id
        )

    @staticmethod
    def owner_mismatch(utxo_id: UtxoId) -> 'ValidationError':
        return ValidationError(
            ErrorKind.INVALID_SIGNATURE,
            f"Claimed owner does not match owner of UTXO {utxo_id.key}",
            utxo_id
        )

    @staticmethod
    def double_spending(utxo_id: UtxoId) -> 'ValidationError':
        return ValidationError(
            ErrorKind.DOUBLE_SPENDING,
            f"UTXO referenced multiple times in transaction: {utxo_id.key}",
            utxo_id
        )


@dataclass
class ValidationResult:
    valid: bool
    errors: List[ValidationError] = field(default_factory=list)

    @staticmethod
    def from_errors(errors: List[ValidationError]) -> 'ValidationResult':
        return ValidationResult(valid=not errors, errors=list(errors))

    @property
    def kinds(self) -> List[ErrorKind]:
        return [e.kind for e in self.errors]

    def errors_of(self, kind: ErrorKind) -> List[ValidationError]:
        return [e for e in self.errors if e.kind == kind]

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "errors": [e.to_dict() for e in self.errors]}


# --- Fallos fatales (se lanzan, nunca se acumulan) ---

class ValidatorFatalError(Exception):
    """El validador no puede emitir un veredicto confiable."""


class MalformedTransactionError(ValidatorFatalError):
    """La transacción recibida es nula o no es un Transaction."""


class CollaboratorError(ValidatorFatalError):
    """El Pool o el verificador de firmas fallaron de forma inesperada."""
