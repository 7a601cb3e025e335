# ledgerguard/tests/mocks/mock_crypto.py
'''
class MockSigner / MockSignatureVerifier:
    Par firmante/verificador sin criptografía real. La "firma" es el SHA-256 de
    (identidad + mensaje), así que sigue dependiendo del payload y del dueño:
    cualquier alteración del payload o de la identidad la invalida.

    Methods::
        MockSigner.sign(message) -> str: Firma simulada para la identidad del mock.
        MockSigner.get_public_key() -> str: Identidad constante del mock.
        MockSignatureVerifier.verify(message, signature, claimed_owner) -> bool:
            Recalcula la firma simulada y compara. Registra cada llamada en 'calls'.
'''

import hashlib
from typing import List, Tuple

from ledgerguard.core.interfaces.i_signer import ISigner
from ledgerguard.core.interfaces.i_signature_verifier import ISignatureVerifier

def mock_signature(owner: str, message: bytes) -> str:
    return hashlib.sha256(owner.encode("utf-8") + b"|" + message).hexdigest()

class MockSigner(ISigner):

    def __init__(self, public_key: str = "MOCK_PUB_KEY_02ABCDEF") -> None:
        self._public_key = public_key

    def sign(self, message: bytes) -> str:
        return mock_signature(self._public_key, message)

    def get_public_key(self) -> str:
        return self._public_key

class MockSignatureVerifier(ISignatureVerifier):

    def __init__(self) -> None:
        self.calls: List[Tuple[bytes, str, str]] = []

    def verify(self, message: bytes, signature: str, claimed_owner: str) -> bool:
        self.calls.append((message, signature, claimed_owner))
        return signature == mock_signature(claimed_owner, message)
