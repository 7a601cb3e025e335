# ledgerguard/core/validators/transaction_validator.py

import logging
from typing import List, Optional, Set

# Dependencias del Proyecto
from ledgerguard.core.config.config_manager import ConfigManager
from ledgerguard.core.config.validator_config import ValidatorConfig
from ledgerguard.core.interfaces.i_signature_verifier import ISignatureVerifier
from ledgerguard.core.interfaces.i_utxo_pool import IUTXOPool
from ledgerguard.core.models.transaction import Transaction
from ledgerguard.core.models.tx_input import TxInput
from ledgerguard.core.models.tx_output import TxOutput
from ledgerguard.core.models.utxo import UTXO
from ledgerguard.core.models.utxo_id import UtxoId
from ledgerguard.core.services.signable_payload import SignablePayload
from ledgerguard.core.services.signature_verifier_service import EcdsaSignatureVerifier
from ledgerguard.core.validators.validation_errors import (
    CollaboratorError,
    MalformedTransactionError,
    ValidationError,
    ValidationResult,
)

logger = logging.getLogger(__name__)

class TransactionValidator:
    """
    Valida una transacción contra el Pool de UTXOs.

    Ejecuta SIEMPRE los cuatro chequeos (existencia, balance, firma, doble gasto)
    y devuelve todos los errores encontrados en un único ValidationResult.
    Solo lee del Pool: nunca gasta ni elimina UTXOs.
    """

    def __init__(
        self,
        utxo_pool: IUTXOPool,
        signature_verifier: Optional[ISignatureVerifier] = None,
        config: Optional[ValidatorConfig] = None
    ) -> None:
        if utxo_pool is None:
            raise ValueError("TransactionValidator requiere un Pool de UTXOs.")

        if config is None:
            config = ConfigManager().validator

        self._utxo_pool = utxo_pool
        self._verifier: ISignatureVerifier = signature_verifier or EcdsaSignatureVerifier()
        self._enforce_owner_match: bool = config.enforce_owner_match

    @property
    def utxo_pool(self) -> IUTXOPool:
        return self._utxo_pool

    def validate(self, transaction: Transaction) -> ValidationResult:
        inputs = self._ensure_well_formed(transaction)
        errors: List[ValidationError] = []

        # 1. Existencia de UTXOs (una sola consulta por input, reutilizada después)
        found: List[Optional[UTXO]] = [self._lookup(inp.utxo_id) for inp in inputs]
        for inp, utxo in zip(inputs, found):
            if utxo is None:
                logger.debug(f"TX {transaction.tx_id[:8]}: {inp.utxo_id.key} no existe en el Pool.")
                errors.append(ValidationError.utxo_not_found(inp.utxo_id))

        # 2. Balance (No crear ni destruir dinero)
        total_input = sum(utxo.amount for utxo in found if utxo is not None)
        total_output = transaction.total_output_amount
        if total_input != total_output:
            errors.append(ValidationError.amount_mismatch(total_input, total_output))

        # 3. Firmas (payload calculado una vez para toda la TX)
        payload = SignablePayload.build(transaction)
        for inp, utxo in zip(inputs, found):
            if utxo is None:
                continue
            error = self._check_authorization(inp, utxo, payload)
            if error is not None:
                errors.append(error)

        # 4. Doble gasto dentro de la misma transacción
        seen: Set[UtxoId] = set()
        for inp in inputs:
            if inp.utxo_id in seen:
                errors.append(ValidationError.double_spending(inp.utxo_id))
            else:
                seen.add(inp.utxo_id)

        result = ValidationResult.from_errors(errors)

        if result.valid:
            logger.info(f"TX {transaction.tx_id[:8]} validada correctamente.")
        else:
            kinds = ", ".join(kind.value for kind in result.kinds)
            logger.info(f"Rechazo TX {transaction.tx_id[:8]}: {kinds}")

        return result

    @staticmethod
    def _ensure_well_formed(transaction: Transaction) -> List[TxInput]:
        """Rechaza como fatal todo lo que no sea una Transaction bien construida."""
        if not isinstance(transaction, Transaction):
            raise MalformedTransactionError(
                f"Se esperaba Transaction, se recibió {type(transaction).__name__}."
            )

        tx_id = transaction.tx_id
        if not isinstance(tx_id, str) or not tx_id:
            raise MalformedTransactionError(f"Identificador de transacción inválido: {tx_id!r}")

        inputs = transaction.inputs
        if not all(isinstance(inp, TxInput) for inp in inputs):
            raise MalformedTransactionError(f"TX {tx_id[:8]}: inputs con tipo inválido.")
        if not all(isinstance(out, TxOutput) for out in transaction.outputs):
            raise MalformedTransactionError(f"TX {tx_id[:8]}: outputs con tipo inválido.")

        return inputs

    def _lookup(self, utxo_id: UtxoId) -> Optional[UTXO]:
        try:
            return self._utxo_pool.get_utxo(utxo_id.tx_id, utxo_id.output_index)
        except Exception as e:
            logger.exception(f"Fallo del Pool consultando {utxo_id.key}")
            raise CollaboratorError(f"UTXO pool lookup failed for {utxo_id.key}") from e

    def _check_authorization(self, inp: TxInput, utxo: UTXO, payload: bytes) -> Optional[ValidationError]:
        # El input solo puede gastar lo que pertenece a quien declara ser dueño
        if self._enforce_owner_match and inp.owner != utxo.owner:
            logger.debug(f"Dueño declarado no coincide con el de {inp.utxo_id.key}.")
            return ValidationError.owner_mismatch(inp.utxo_id)

        try:
            authentic = self._verifier.verify(payload, inp.signature, inp.owner)
        except Exception as e:
            logger.exception(f"Fallo del verificador de firmas en {inp.utxo_id.key}")
            raise CollaboratorError(f"Signature verifier failed for {inp.utxo_id.key}") from e

        if not authentic:
            return ValidationError.invalid_signature(inp.utxo_id)
        return None
