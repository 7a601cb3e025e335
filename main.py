import os
import sys
import json
import argparse
import logging
from typing import Any, List, Optional

import logger_config

from ledgerguard.core.config.config_manager import ConfigManager
from ledgerguard.core.managers.utxo_pool import InMemoryUTXOPool
from ledgerguard.core.models.transaction import Transaction
from ledgerguard.core.validators.transaction_validator import TransactionValidator
from ledgerguard.core.validators.validation_errors import ValidatorFatalError

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_FATAL = 2

# =========================================================
# 🛠️ FUNCIONES DE UTILIDAD
# =========================================================

def load_json(path: str) -> Any:
    """Carga un archivo JSON (TX, snapshot del Pool o configuración)."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"No existe el archivo: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Valida una transacción contra un snapshot del Pool de UTXOs."
    )
    parser.add_argument("--tx", required=True, help="Archivo JSON con la transacción")
    parser.add_argument("--pool", required=True, help="Archivo JSON con la lista de UTXOs no gastadas")
    parser.add_argument("--config", help="Archivo JSON de configuración (secciones 'validator' y 'logging')")
    parser.add_argument("--quiet", action="store_true", help="No imprimir el resultado, solo código de salida")
    return parser

# =========================================================
# 🚀 PUNTO DE ENTRADA
# =========================================================

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.config:
            ConfigManager().load_from_json_dict(load_json(args.config))

        log_file = logger_config.setup_logging()
        logger.info(f"Log de sesión: {log_file}")

        transaction = Transaction.from_dict(load_json(args.tx))
        pool = InMemoryUTXOPool.from_snapshot(load_json(args.pool))
    except (OSError, ValueError, TypeError, KeyError) as e:
        # json.JSONDecodeError es ValueError
        logger.critical(f"Entrada ilegible: {e}")
        print(f"❌ Entrada ilegible: {e}", file=sys.stderr)
        return EXIT_FATAL

    try:
        result = TransactionValidator(pool).validate(transaction)
    except ValidatorFatalError as e:
        logger.critical(f"Validación abortada: {e}")
        print(f"❌ Validación abortada: {e}", file=sys.stderr)
        return EXIT_FATAL

    if not args.quiet:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))

    return EXIT_VALID if result.valid else EXIT_INVALID

if __name__ == "__main__":
    sys.exit(main())
