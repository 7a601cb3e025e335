# ledgerguard/infra/crypto/software_signer.py
import logging
import hashlib
import binascii
from typing import Any

from ecdsa import SigningKey, SECP256k1, util # type: ignore

# Importación del contrato
from ledgerguard.core.interfaces.i_signer import ISigner
from ledgerguard.core.utils.crypto_utility import CryptoUtility

logger = logging.getLogger(__name__)

class SoftwareSigner(ISigner):

    def __init__(self, private_key_hex: str) -> None:
        self._sk: Any = None
        try:
            priv_key_bytes = binascii.unhexlify(private_key_hex)
            self._sk = SigningKey.from_string(priv_key_bytes, curve=SECP256k1) # type: ignore

            logger.debug("Firmante de software inicializado.")
        except Exception as e:
            logger.exception("Fallo al cargar la clave privada en SoftwareSigner")
            raise ValueError("Formato de clave privada inválido.") from e

    @classmethod
    def generate(cls) -> 'SoftwareSigner':
        """Crea un firmante con una clave privada aleatoria nueva."""
        sk = SigningKey.generate(curve=SECP256k1) # type: ignore
        return cls(sk.to_string().hex())

    def sign(self, message: bytes) -> str:
        try:
            digest = CryptoUtility.double_sha256_digest(message)

            # Firma determinista (RFC 6979) en formato DER
            signature_bytes: bytes = self._sk.sign_digest_deterministic(
                digest,
                hashfunc=hashlib.sha256,
                sigencode=util.sigencode_der # type: ignore
            )

            logger.debug(f"Firma generada para digest {digest.hex()[:8]}...")

            return binascii.hexlify(signature_bytes).decode('utf-8')

        except Exception as e:
            logger.exception("Error criptográfico durante el proceso de firma")
            raise ValueError("Error al firmar con ecdsa.") from e

    def get_public_key(self) -> str:
        vk = self._sk.verifying_key
        pub_key_bytes: bytes = vk.to_string(encoding="compressed") # type: ignore

        return binascii.hexlify(pub_key_bytes).decode('utf-8')
