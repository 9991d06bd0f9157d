from .secp import GroupElement, Scalar
from .generators import G, hash_to_curve
from typing import Tuple

from dataclasses import dataclass, field

# (denomination, blinded point) as sent to the mint
BlindedOutput = Tuple[int, GroupElement]

@dataclass(frozen=True)
class MintKeypair:
    denomination: int
    private_scalar: Scalar = field(repr=False)
    public_point: GroupElement

    @classmethod
    def generate(cls, denomination: int):
        """
        Creates a fresh random keypair for one denomination.

        Parameters:
            denomination (int): The value the keypair signs for.

        Returns:
            MintKeypair: The new keypair.
        """
        k = Scalar.random()
        return cls(denomination, k, k*G)

@dataclass
class BlindedMessage:
    blinded_point: GroupElement
    blind_factor: Scalar = field(repr=False)

@dataclass
class DLEQProof:
    e: Scalar
    s: Scalar

    def to_dict(self):
        return {
            "e": self.e.to_bytes().hex(),
            "s": self.s.to_bytes().hex(),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            e=Scalar.from_bytes(bytes.fromhex(data["e"])),
            s=Scalar.from_bytes(bytes.fromhex(data["s"])),
        )

@dataclass
class Note:
    denomination: int
    secret: bytes = field(repr=False)
    Y: GroupElement
    C: GroupElement

    @classmethod
    def create(cls, denomination: int, secret: bytes, C: GroupElement):
        return cls(denomination, secret, hash_to_curve(secret), C)

    def to_dict(self):
        return {
            "amount": self.denomination,
            "secret": self.secret.hex(),
            "C": self.C.serialize(True).hex(),
        }

    @classmethod
    def from_dict(cls, data):
        """
        Decodes a note received from another holder.

        Y is always recomputed from the secret, never taken from the wire.
        """
        return cls.create(
            int(data["amount"]),
            bytes.fromhex(data["secret"]),
            GroupElement.from_bytes(bytes.fromhex(data["C"])),
        )

@dataclass
class PendingOutput:
    """
    Wallet-side state of an output waiting for its blind signature.
    """
    denomination: int
    secret: bytes = field(repr=False)
    blinded: BlindedMessage

    @property
    def request(self) -> BlindedOutput:
        return (self.denomination, self.blinded.blinded_point)
