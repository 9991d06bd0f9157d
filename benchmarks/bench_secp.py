import secrets
import timeit

from ecash.errors import InvalidPointError, InvalidScalarError
from ecash.generators import G, O, hash_to_curve
from ecash.secp import Scalar, GroupElement

N = 5000

# fresh secrets per call, so every counter path the hash takes is sampled
note_secrets = [secrets.token_bytes(32) for _ in range(N)]
next_secret = iter(note_secrets).__next__

scalar = Scalar.random()
P = scalar*G
minus_P = -P
P_bytes = P.serialize(True)
scalar_bytes = scalar.to_bytes()

# x >= p, rejected by the bindings rather than by the length check
off_curve = b"\x02" + b"\xff"*32
overflow_scalar = b"\xff"*32

def decode_invalid_point():
    try:
        GroupElement.from_bytes(off_curve)
    except InvalidPointError:
        pass

def decode_invalid_scalar():
    try:
        Scalar.from_bytes(overflow_scalar)
    except InvalidScalarError:
        pass

benches = [
    ("hash_to_curve (fresh secret)", lambda: hash_to_curve(next_secret())),
    ("Scalar.random", Scalar.random),
    ("Scalar.from_bytes", lambda: Scalar.from_bytes(scalar_bytes)),
    ("Scalar.from_bytes (overflow)", decode_invalid_scalar),
    ("GroupElement.from_bytes", lambda: GroupElement.from_bytes(P_bytes)),
    ("GroupElement.from_bytes (off curve)", decode_invalid_point),
    ("P + (-P)", lambda: P + minus_P),
    ("P + O", lambda: P + O),
    ("P - P", lambda: P - P),
    ("scalar * G", lambda: scalar*G),
    ("scalar * O", lambda: scalar*O),
]

if __name__ == "__main__":
    print(f"{N} iterations")
    for name, fn in benches:
        elapsed = timeit.timeit(fn, number=N)
        print(f"{name:<38} {elapsed:.6f} s  ({elapsed / N * 1e6:.1f} us/op)")
