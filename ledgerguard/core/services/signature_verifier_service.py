# ledgerguard/core/services/signature_verifier_service.py

import logging
import binascii

# Importamos librería criptográfica (silenciando errores de tipado legacy)
from ecdsa import VerifyingKey, SECP256k1, util, BadSignatureError, MalformedPointError # type: ignore

from ledgerguard.core.interfaces.i_signature_verifier import ISignatureVerifier
from ledgerguard.core.utils.crypto_utility import CryptoUtility

logger = logging.getLogger(__name__)

class EcdsaSignatureVerifier(ISignatureVerifier):
    """
    Servicio de Dominio encargado de la verificación criptográfica (ECDSA SECP256k1).
    Se inyecta en el TransactionValidator para el chequeo de firmas.

    - Identidad: clave pública en hex (comprimida de 33 bytes o cruda de 64).
    - Firma: DER en hex sobre el Doble SHA-256 del mensaje.
    """

    def verify(self, message: bytes, signature: str, claimed_owner: str) -> bool:
        # 1. Decodificar Clave Pública
        try:
            pub_key_bytes = binascii.unhexlify(claimed_owner)
            vk = VerifyingKey.from_string(pub_key_bytes, curve=SECP256k1) # type: ignore
        except (ValueError, TypeError, binascii.Error, MalformedPointError):
            logger.info(f"Clave pública inválida: {str(claimed_owner)[:16]}...")
            return False

        # 2. Decodificar Firma
        try:
            signature_bytes = binascii.unhexlify(signature)
        except (ValueError, TypeError, binascii.Error):
            logger.info("Firma con formato hexadecimal inválido.")
            return False

        # 3. Reconstruir el digest del mensaje
        digest = CryptoUtility.double_sha256_digest(message)

        # 4. Verificar Firma (ECDSA)
        try:
            return bool(vk.verify_digest(signature_bytes, digest, sigdecode=util.sigdecode_der)) # type: ignore
        except (BadSignatureError, ValueError):
            logger.info("Firma criptográfica inválida.")
            return False
