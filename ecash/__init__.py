from .secp import GroupElement, Scalar
from .generators import G, hash_to_curve
from .models import BlindedMessage, DLEQProof, MintKeypair, Note, PendingOutput
from .b_dhke import blind, blind_sign, unblind, verify_signature
from .dleq import prove_dleq, verify_dleq
from .keyset import KeyRegistry
from .ledger import Ledger, MemoryLedger
from .mint import Mint
from .wallet import Wallet
from .config import MintConfig, load_config, setup_logging
from .errors import (
    EcashError,
    EntropyError,
    HashToCurveError,
    InvalidPointError,
    InvalidScalarError,
    ProofInvalidError,
    Rejection,
)

__version__ = "0.1.0"
