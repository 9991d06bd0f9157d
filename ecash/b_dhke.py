"""
Blind Diffie-Hellman key exchange.

Mint:
A = a*G
return A

Wallet:
Y = hash_to_curve(secret)
r = random blinding factor
B'= Y + r*G
return B'

Mint:
C' = a*B'
  (= a*Y + a*r*G)
return C', DLEQ(A, B', C')

Wallet:
C = C' - r*A
 (= C' - a*r*G)
 (= a*Y)
return C, secret

Mint:
Y = hash_to_curve(secret)
C == a*Y
If true, C must have originated from the mint
"""
from typing import Optional, Tuple

from .dleq import prove_dleq
from .errors import InvalidPointError
from .generators import G, hash_to_curve
from .models import BlindedMessage, DLEQProof
from .secp import GroupElement, Scalar

def blind(
    Y: GroupElement,
    blinding_factor: Optional[Scalar] = None,
) -> BlindedMessage:
    """
    Hides Y behind a fresh random multiple of G.

    Parameters:
        Y (GroupElement): hash_to_curve(secret).
        blinding_factor (Optional[Scalar]): Fixed r, for test vectors only.

    Returns:
        BlindedMessage: B' together with the r needed to unblind.
    """
    r = blinding_factor if blinding_factor is not None else Scalar.random()
    if r.is_zero:
        raise ValueError("blinding factor must be non-zero")
    B_ = Y + r*G
    if B_.is_zero:
        raise InvalidPointError("blinded point is the identity")
    return BlindedMessage(blinded_point=B_, blind_factor=r)

def blind_sign(
    a: Scalar,
    B_: GroupElement,
) -> Tuple[GroupElement, DLEQProof]:
    """
    Signs a blinded point and proves the signature used the key behind a*G.
    """
    C_ = a*B_
    return C_, prove_dleq(a, B_, C_)

def unblind(
    C_: GroupElement,
    r: Scalar,
    A: GroupElement,
) -> GroupElement:
    C = C_ - r*A
    if C.is_zero:
        raise InvalidPointError("unblinded signature is the identity")
    return C

def verify_signature(a: Scalar, secret: bytes, C: GroupElement) -> bool:
    Y = hash_to_curve(secret)
    return C == a*Y
