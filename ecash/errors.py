from enum import Enum

class EcashError(Exception):
    """Base class for all errors raised by the ecash core."""

class InvalidScalarError(EcashError):
    """A decoded scalar is not a canonical element of Z_q."""

class InvalidPointError(EcashError):
    """A decoded or computed point is not usable (off-curve or identity)."""

class EntropyError(EcashError):
    """A bounded sampling loop ran out of attempts.

    This signals a broken randomness source or environment and is fatal.
    """

class HashToCurveError(EntropyError):
    pass

class ProofInvalidError(EcashError):
    """The mint returned a blind signature whose DLEQ proof does not verify."""

class Rejection(Enum):
    """
    Internal reason a note or request was refused.

    The mint logs these but only ever reports a boolean to its callers,
    so a forged note and a double spend look the same from outside.
    """
    UNKNOWN_DENOMINATION = "unknown denomination"
    SECRET_MISMATCH = "point does not match secret"
    SIGNATURE_MISMATCH = "signature mismatch"
    DOUBLE_SPEND = "secret already spent"
    VALUE_MISMATCH = "value mismatch"
