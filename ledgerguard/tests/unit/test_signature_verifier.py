# ledgerguard/tests/unit/test_signature_verifier.py
'''
Test Suite para EcdsaSignatureVerifier y SoftwareSigner (criptografía real):
    Verifica firmas ECDSA SECP256k1 sobre el payload firmable y que los datos
    corruptos se rechacen con False en lugar de lanzar excepciones.
'''

import sys
import os

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from ledgerguard.core.services.signature_verifier_service import EcdsaSignatureVerifier
from ledgerguard.infra.crypto.software_signer import SoftwareSigner

ALICE_PRIV = "11" * 32
BOB_PRIV = "22" * 32
MESSAGE = b'{"id":"tx2","inputs":[],"outputs":[],"timestamp":1}'

@pytest.fixture
def alice() -> SoftwareSigner:
    return SoftwareSigner(ALICE_PRIV)

@pytest.fixture
def verifier() -> EcdsaSignatureVerifier:
    return EcdsaSignatureVerifier()

def test_valid_signature_verifies(alice: SoftwareSigner, verifier: EcdsaSignatureVerifier):
    signature = alice.sign(MESSAGE)
    assert verifier.verify(MESSAGE, signature, alice.get_public_key()) is True

def test_signature_is_deterministic(alice: SoftwareSigner):
    assert alice.sign(MESSAGE) == alice.sign(MESSAGE)

def test_public_key_is_compressed_hex(alice: SoftwareSigner):
    pub = alice.get_public_key()
    assert len(pub) == 66
    assert pub[:2] in ("02", "03")

def test_other_message_fails(alice: SoftwareSigner, verifier: EcdsaSignatureVerifier):
    signature = alice.sign(MESSAGE)
    assert verifier.verify(MESSAGE + b" ", signature, alice.get_public_key()) is False

def test_other_owner_fails(alice: SoftwareSigner, verifier: EcdsaSignatureVerifier):
    bob = SoftwareSigner(BOB_PRIV)
    signature = alice.sign(MESSAGE)
    assert verifier.verify(MESSAGE, signature, bob.get_public_key()) is False

@pytest.mark.parametrize("signature", ["", "zz", "00", "3045" + "00" * 10])
def test_malformed_signature_returns_false(alice: SoftwareSigner, verifier: EcdsaSignatureVerifier, signature: str):
    assert verifier.verify(MESSAGE, signature, alice.get_public_key()) is False

@pytest.mark.parametrize("owner", ["", "not-hex", "02" + "00" * 5, "ALICE_PUB_KEY"])
def test_malformed_owner_returns_false(alice: SoftwareSigner, verifier: EcdsaSignatureVerifier, owner: str):
    assert verifier.verify(MESSAGE, alice.sign(MESSAGE), owner) is False

def test_generated_signer_roundtrip(verifier: EcdsaSignatureVerifier):
    signer = SoftwareSigner.generate()
    assert verifier.verify(MESSAGE, signer.sign(MESSAGE), signer.get_public_key()) is True

def test_invalid_private_key_raises():
    with pytest.raises(ValueError):
        SoftwareSigner("not-a-key")
