# ledgerguard/core/utils/crypto_utility.py

import hashlib
from typing import Union

class CryptoUtility:

    @staticmethod
    def double_sha256_digest(data: Union[str, bytes]) -> bytes:
        """Doble SHA-256 en bytes crudos (el digest que firma ECDSA)."""
        data_bytes = CryptoUtility._to_bytes(data)
        first_hash = hashlib.sha256(data_bytes).digest()
        return hashlib.sha256(first_hash).digest()

    @staticmethod
    def double_sha256(data: Union[str, bytes]) -> str:
        """Aplica Doble SHA-256 y devuelve hexadecimal."""
        return CryptoUtility.double_sha256_digest(data).hex()

    @staticmethod
    def _to_bytes(data: Union[str, bytes]) -> bytes:
        """Normaliza entrada a bytes de forma segura."""
        if isinstance(data, str):
            return data.encode('utf-8')
        if isinstance(data, bytes):
            return data
        raise TypeError(f"Tipo no soportado para hashing: {type(data)}")
