from ecash import generators
from ecash.b_dhke import *
from ecash.errors import HashToCurveError
from ecash.generators import G, hash_to_curve
from ecash.secp import Scalar, SCALAR_ZERO
import hashlib
import pytest

def test_hash_to_curve_is_deterministic():
    assert hash_to_curve(b"secret") == hash_to_curve(b"secret")
    assert hash_to_curve(b"secret") != hash_to_curve(b"secret2")
    assert not hash_to_curve(b"").is_zero

def test_hash_to_curve_is_domain_separated():
    # a plain hash-to-scalar of the same input must land elsewhere
    plain = Scalar(hashlib.sha256(b"secret").digest()) * G
    assert hash_to_curve(b"secret") != plain

def test_hash_to_curve_vector():
    digest = hashlib.sha256(b"ecash_hash_to_curve" + b"test" + b"\x00\x00\x00\x00").digest()
    assert hash_to_curve(b"test") == Scalar(digest) * G

def test_hash_to_curve_gives_up(monkeypatch):
    monkeypatch.setattr(generators, "MAX_HASH_TO_CURVE_ITERATIONS", 0)
    with pytest.raises(HashToCurveError):
        hash_to_curve(b"secret")

def test_round_trip(keypair):
    Y = hash_to_curve(b"my note")

    # Wallet blinds
    blinded = blind(Y)

    # Mint signs blindly
    C_, _ = blind_sign(keypair.private_scalar, blinded.blinded_point)

    # Wallet unblinds and gets a*Y
    C = unblind(C_, blinded.blind_factor, keypair.public_point)
    assert C == keypair.private_scalar * Y
    assert verify_signature(keypair.private_scalar, b"my note", C)

def test_signature_is_bound_to_key_and_secret(keypair):
    other = Scalar.random()
    Y = hash_to_curve(b"my note")
    blinded = blind(Y)
    C_, _ = blind_sign(keypair.private_scalar, blinded.blinded_point)
    C = unblind(C_, blinded.blind_factor, keypair.public_point)
    assert not verify_signature(other, b"my note", C)
    assert not verify_signature(keypair.private_scalar, b"other note", C)
    assert not verify_signature(keypair.private_scalar, b"my note", C + C)

def test_blinding_hides_the_point():
    Y = hash_to_curve(b"my note")
    b1 = blind(Y)
    b2 = blind(Y)
    assert b1.blind_factor != b2.blind_factor
    assert b1.blinded_point != b2.blinded_point
    assert b1.blinded_point != Y

def test_fixed_blinding_factor():
    Y = hash_to_curve(b"my note")
    r = Scalar.from_int(42)
    assert blind(Y, r).blinded_point == Y + r*G
    with pytest.raises(ValueError):
        blind(Y, Scalar(SCALAR_ZERO))

def test_unblind_to_identity_is_rejected(keypair):
    r = Scalar.random()
    # a "signature" that is exactly r*A unblinds to the point at infinity
    C_ = r * keypair.public_point
    with pytest.raises(InvalidPointError):
        unblind(C_, r, keypair.public_point)
