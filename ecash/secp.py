import hmac
import secrets

from secp256k1 import PrivateKey, PublicKey

from .errors import EntropyError, InvalidPointError, InvalidScalarError

# Constant scalar 0
SCALAR_ZERO = b"\x00"*32
# Constant point to infinity
ELEMENT_ZERO = b"\x02" + b"\x00" * 32

# Order of the curve
q = int('FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141', 16)

# Upper bound on rejection sampling of random scalars.
# A single draw fails with probability ~2^-128.
MAX_SCALAR_ATTEMPTS = 128

class Scalar(PrivateKey):

    def __init__(self, data: bytes | None = None):
        if data and data == SCALAR_ZERO:
            self.is_zero = True
        else:
            self.is_zero = False
            super().__init__(data, raw=True)

    @classmethod
    def random(cls, max_attempts: int = MAX_SCALAR_ATTEMPTS) -> "Scalar":
        """
        Draws a uniformly random non-zero scalar from the OS CSPRNG.

        Out of range or zero draws are rejected and retried, never reduced.

        Raises:
            EntropyError: if no valid scalar was drawn within `max_attempts`.
        """
        for _ in range(max_attempts):
            data = secrets.token_bytes(32)
            if 0 < int.from_bytes(data, "big") < q:
                return cls(data)
        raise EntropyError(f"no valid scalar drawn in {max_attempts} attempts")

    @classmethod
    def from_int(cls, value: int) -> "Scalar":
        s = value % q
        return cls(s.to_bytes(32, "big")) if s else cls(SCALAR_ZERO)

    @classmethod
    def from_digest(cls, digest: bytes) -> "Scalar":
        """Reduces a hash digest modulo the group order."""
        return cls.from_int(int.from_bytes(digest, "big"))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Scalar":
        """Decodes an externally supplied 32-byte big-endian scalar."""
        if len(data) != 32:
            raise InvalidScalarError(f"expected 32 bytes, got {len(data)}")
        if int.from_bytes(data, "big") >= q:
            raise InvalidScalarError("scalar is not reduced modulo the group order")
        return cls(data)

    def __add__(self, scalar2):
        if isinstance(scalar2, Scalar):
            if scalar2.is_zero:
                return Scalar(self.to_bytes())
            elif self.is_zero:
                return Scalar(scalar2.to_bytes())
            elif scalar2 == -self:
                return Scalar(SCALAR_ZERO)
            else:
                new_scalar = self.tweak_add(scalar2.to_bytes())
                return Scalar(new_scalar)
        else:
            raise TypeError(f"Cannot add {scalar2.__class__} and Scalar")

    def __neg__(self):
        if self.is_zero:
            return Scalar(SCALAR_ZERO)
        s = int.from_bytes(self.to_bytes(), "big")
        s_ = q - s
        return Scalar(s_.to_bytes(32, "big"))

    def __sub__(self, scalar2):
        if isinstance(scalar2, Scalar):
            return self + (-scalar2)
        else:
            raise TypeError(f"Cannot subtract {scalar2.__class__} and Scalar")

    def __mul__(self, obj):
        if isinstance(obj, Scalar):
            if self.is_zero or obj.is_zero:
                return Scalar(SCALAR_ZERO)
            else:
                new_scalar = self.tweak_mul(obj.to_bytes())
                return Scalar(new_scalar)
        elif isinstance(obj, GroupElement):
            return obj.__mul__(self)
        else:
            raise TypeError(f"Cannot multiply {obj.__class__} and Scalar")

    def __eq__(self, scalar2):
        if isinstance(scalar2, Scalar):
            return hmac.compare_digest(self.to_bytes(), scalar2.to_bytes())
        return NotImplemented

    def __hash__(self):
        return hash(self.to_bytes())

    def __repr__(self):
        # never print the scalar itself
        return "Scalar(zero)" if self.is_zero else "Scalar(...)"

    def to_bytes(self):
        return self.private_key if not self.is_zero else SCALAR_ZERO

# We extend the public key to define some operations on points
# Adapted from https://github.com/WTRMQDev/secp256k1-zkp-py/blob/master/secp256k1_zkp/__init__.py
class GroupElement(PublicKey):

    def __init__(self, data: bytes | None = None):
        if data and data == ELEMENT_ZERO:
            self.is_zero = True
        else:
            self.is_zero = False
            super().__init__(data, raw=True)

    @classmethod
    def from_bytes(cls, data: bytes) -> "GroupElement":
        """Decodes an externally supplied compressed point."""
        if len(data) != 33 or data[:1] not in (b"\x02", b"\x03"):
            raise InvalidPointError("expected a 33-byte compressed point")
        try:
            return cls(data)
        except Exception as e:
            # the bindings signal an off-curve point with a bare Exception
            raise InvalidPointError(f"point is not on the curve: {e}") from e

    def __add__(self, pubkey2):
        if isinstance(pubkey2, GroupElement):
            if pubkey2.is_zero:
                return GroupElement(self.serialize(True))
            elif self.is_zero:
                return GroupElement(pubkey2.serialize(True))
            elif self == -pubkey2:
                # P + (-P): libsecp256k1 refuses to combine into infinity
                return GroupElement(ELEMENT_ZERO)
            else:
                new_pub = GroupElement()
                new_pub.combine([self.public_key, pubkey2.public_key])
                return new_pub
        else:
            raise TypeError("Cant add pubkey and %s" % pubkey2.__class__)

    def __neg__(self):
        if self.is_zero:
            return GroupElement(ELEMENT_ZERO)
        serialized = self.serialize()
        first_byte, remainder = serialized[:1], serialized[1:]
        # flip odd/even byte
        first_byte = {b"\x03": b"\x02", b"\x02": b"\x03"}[first_byte]
        return GroupElement(first_byte + remainder)

    def __sub__(self, pubkey2):
        if isinstance(pubkey2, GroupElement):
            return self + (-pubkey2)
        else:
            raise TypeError("Can't subtract element and %s" % pubkey2.__class__)

    def __mul__(self, scalar):
        if isinstance(scalar, Scalar):
            if scalar.is_zero or self.is_zero:
                return GroupElement(ELEMENT_ZERO)
            result = self.tweak_mul(scalar.to_bytes())
            return GroupElement(result.serialize(True))
        else:
            raise TypeError(f"Can't multiply GroupElement with {scalar.__class__}")

    def __eq__(self, el2):
        if isinstance(el2, GroupElement):
            return self.serialize(True) == el2.serialize(True)
        return NotImplemented

    def __hash__(self):
        return hash(self.serialize(True))

    def __repr__(self):
        return f"GroupElement({self.serialize(True).hex()})"

    def serialize(self, compressed = True):
        if self.is_zero:
            return ELEMENT_ZERO
        else:
            return super().serialize(compressed=compressed)
