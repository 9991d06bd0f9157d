import hashlib

from .errors import HashToCurveError
from .secp import ELEMENT_ZERO, GroupElement, Scalar, q

DOMAIN_SEPARATOR = b"ecash_hash_to_curve"
MAX_HASH_TO_CURVE_ITERATIONS = 2**16

# secp256k1 base point
G = GroupElement(bytes.fromhex(
    "0279BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
))
# Point at infinity
O = GroupElement(ELEMENT_ZERO)

def hash_to_curve(message: bytes) -> GroupElement:
    """
    Maps an arbitrary byte string to a curve point.

    The digest of (domain separator || message || counter) is used as a
    scalar and multiplied into the generator. Digests that are not valid
    non-zero scalars are skipped by bumping the 4-byte big-endian counter.

    Parameters:
        message (bytes): The note secret.

    Returns:
        GroupElement: The point Y for `message`.

    Raises:
        HashToCurveError: if no valid digest is found within the iteration cap.
    """
    counter = 0
    while counter < MAX_HASH_TO_CURVE_ITERATIONS:
        _hash = hashlib.sha256(
            DOMAIN_SEPARATOR + message + counter.to_bytes(4, "big")
        ).digest()
        if 0 < int.from_bytes(_hash, "big") < q:
            return Scalar(_hash) * G
        counter += 1
    # it should never reach this point
    raise HashToCurveError("No valid point found")
