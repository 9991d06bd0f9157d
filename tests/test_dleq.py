from ecash.b_dhke import blind, blind_sign
from ecash.dleq import *
from ecash.generators import G, hash_to_curve
from ecash.secp import Scalar, SCALAR_ZERO
from ecash.errors import InvalidScalarError
import pytest

@pytest.fixture
def signed(keypair):
    B_ = blind(hash_to_curve(b"dleq")).blinded_point
    C_, proof = blind_sign(keypair.private_scalar, B_)
    return B_, C_, proof

def test_dleq(keypair, signed):
    B_, C_, proof = signed
    assert verify_dleq(B_, C_, keypair.public_point, proof)

def test_dleq_altered_inputs(keypair, signed):
    B_, C_, proof = signed
    A = keypair.public_point
    X = Scalar.random()*G
    assert not verify_dleq(B_ + G, C_, A, proof)
    assert not verify_dleq(B_, C_ + G, A, proof)
    assert not verify_dleq(B_, C_, X, proof)

def test_dleq_wrong_private_key(keypair, signed):
    B_, _, _ = signed

    # Mint signs with a different key but claims A
    other = Scalar.random()
    C_, proof = blind_sign(other, B_)
    assert not verify_dleq(B_, C_, keypair.public_point, proof)

    # Mint proves with its key over somebody else's signature
    forged = prove_dleq(keypair.private_scalar, B_, other*B_)
    assert not verify_dleq(B_, other*B_, keypair.public_point, forged)

def test_dleq_not_reusable_across_requests(keypair, signed):
    _, _, proof = signed
    B2 = blind(hash_to_curve(b"another")).blinded_point
    C2 = keypair.private_scalar*B2
    assert not verify_dleq(B2, C2, keypair.public_point, proof)

def test_dleq_tampered_proof(keypair, signed):
    B_, C_, proof = signed
    A = keypair.public_point
    one = Scalar.from_int(1)
    assert not verify_dleq(B_, C_, A, DLEQProof(e=proof.e + one, s=proof.s))
    assert not verify_dleq(B_, C_, A, DLEQProof(e=proof.e, s=proof.s + one))
    assert not verify_dleq(B_, C_, A, DLEQProof(e=Scalar(SCALAR_ZERO), s=proof.s))

def test_dleq_nonces_are_fresh(keypair, signed):
    B_, C_, proof = signed
    again = prove_dleq(keypair.private_scalar, B_, C_)
    assert again.e != proof.e
    assert verify_dleq(B_, C_, keypair.public_point, again)

def test_dleq_proof_encoding(keypair, signed):
    B_, C_, proof = signed
    decoded = DLEQProof.from_dict(proof.to_dict())
    assert decoded == proof
    assert verify_dleq(B_, C_, keypair.public_point, decoded)
    with pytest.raises(InvalidScalarError):
        DLEQProof.from_dict({"e": "00", "s": proof.to_dict()["s"]})
