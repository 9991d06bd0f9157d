import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .b_dhke import blind_sign
from .config import MintConfig
from .errors import Rejection
from .generators import hash_to_curve
from .keyset import KeyRegistry, is_denomination
from .ledger import Ledger, MemoryLedger
from .models import BlindedOutput, DLEQProof, Note
from .secp import GroupElement

logger = logging.getLogger(__name__)

BlindSignature = Tuple[GroupElement, DLEQProof]

class Mint:
    """
    The issuer: a key registry plus a ledger of spent secrets.

    Every public operation reports success or failure without saying why,
    so callers cannot tell a forged note from a double spend. Reasons are
    logged at DEBUG.
    """

    def __init__(
        self,
        denominations: Iterable[int],
        ledger: Optional[Ledger] = None,
    ):
        self.keys = KeyRegistry(denominations)
        self.ledger = ledger if ledger is not None else MemoryLedger()
        logger.info("Mint initialized with denominations %s", list(self.keys.denominations))

    @classmethod
    def from_config(cls, config: MintConfig, ledger: Optional[Ledger] = None):
        return cls(config.denominations, ledger=ledger)

    def public_keys(self) -> Dict[int, GroupElement]:
        return self.keys.public_keys()

    def _check_signature(self, note: Note) -> Optional[Rejection]:
        keypair = self.keys.lookup(note.denomination)
        if keypair is None:
            return Rejection.UNKNOWN_DENOMINATION
        Y = hash_to_curve(note.secret)
        if Y != note.Y:
            return Rejection.SECRET_MISMATCH
        if keypair.private_scalar*Y != note.C:
            return Rejection.SIGNATURE_MISMATCH
        return None

    def check_note(self, note: Note) -> Optional[Rejection]:
        """
        Returns why `note` would be refused right now, or None if it would
        be accepted. Does not touch the ledger.
        """
        reason = self._check_signature(note)
        if reason is None and self.ledger.contains(note.secret):
            reason = Rejection.DOUBLE_SPEND
        return reason

    def would_verify(self, note: Note) -> bool:
        return self.check_note(note) is None

    def verify_and_spend(self, note: Note) -> bool:
        """
        Verifies a note and marks its secret spent in one step.

        Only one of several concurrent calls for the same secret can win
        the ledger insert; the rest fail as double spends.
        """
        reason = self._check_signature(note)
        if reason is None and not self.ledger.insert_if_absent(note.secret):
            reason = Rejection.DOUBLE_SPEND
        if reason is not None:
            logger.debug("Rejected %d note %s: %s",
                note.denomination, note.Y.serialize().hex()[:16], reason.value)
            return False
        return True

    def _redeem(self, notes: Sequence[Note]) -> bool:
        for note in notes:
            reason = self._check_signature(note)
            if reason is not None:
                logger.debug("Rejected %d note %s: %s",
                    note.denomination, note.Y.serialize().hex()[:16], reason.value)
                return False
        if not self.ledger.insert_all_if_absent(n.secret for n in notes):
            logger.debug("Rejected %d notes: %s", len(notes), Rejection.DOUBLE_SPEND.value)
            return False
        return True

    def _sign(self, outputs: Sequence[BlindedOutput]) -> List[BlindSignature]:
        signatures = []
        for denomination, B_ in outputs:
            keypair = self.keys.lookup(denomination)
            signatures.append(blind_sign(keypair.private_scalar, B_))
        return signatures

    def _outputs_known(self, outputs: Sequence[BlindedOutput]) -> bool:
        for denomination, B_ in outputs:
            if denomination not in self.keys:
                logger.debug("Rejected output: %s %r",
                    Rejection.UNKNOWN_DENOMINATION.value, denomination)
                return False
            if not isinstance(B_, GroupElement) or B_.is_zero:
                logger.debug("Rejected output: blinded point is not a valid element")
                return False
        return True

    def spend(self, notes: Sequence[Note]) -> bool:
        """
        Redeems all of `notes` or none of them.
        """
        if not self._redeem(notes):
            return False
        logger.info("Spent %d notes worth %d", len(notes), sum(n.denomination for n in notes))
        return True

    def mint(self, outputs: Sequence[BlindedOutput]) -> Optional[List[BlindSignature]]:
        """
        Issues new notes directly, without consuming inputs.

        Parameters:
            outputs (Sequence[BlindedOutput]): (denomination, B') pairs.

        Returns:
            Optional[List[BlindSignature]]: (C', proof) per output in request
            order, or None if any denomination is not configured.
        """
        if not self._outputs_known(outputs):
            return None
        signatures = self._sign(outputs)
        logger.info("Issued %d notes worth %d", len(outputs), sum(d for d, _ in outputs))
        return signatures

    def swap(
        self,
        inputs: Sequence[Note],
        outputs: Sequence[BlindedOutput],
    ) -> Optional[List[BlindSignature]]:
        """
        Burns `inputs` and blind-signs `outputs` of the same total value.

        Denominations, values and input signatures are all checked before any
        secret is marked spent, and the input secrets are then inserted as
        one batch. On any failure the ledger is left exactly as it was and
        nothing is signed.

        Parameters:
            inputs (Sequence[Note]): The notes being redeemed.
            outputs (Sequence[BlindedOutput]): (denomination, B') pairs.

        Returns:
            Optional[List[BlindSignature]]: (C', proof) per output in request
            order, or None on failure.
        """
        # denominations are type-checked before they are summed
        if not self._outputs_known(outputs):
            return None
        for note in inputs:
            if not is_denomination(note.denomination):
                logger.debug("Rejected input: %s %r",
                    Rejection.UNKNOWN_DENOMINATION.value, note.denomination)
                return None
        in_sum = sum(n.denomination for n in inputs)
        out_sum = sum(d for d, _ in outputs)
        if in_sum != out_sum:
            logger.debug("Rejected swap: %s (%d != %d)",
                Rejection.VALUE_MISMATCH.value, in_sum, out_sum)
            return None
        if not self._redeem(inputs):
            return None
        signatures = self._sign(outputs)
        logger.info("Swapped %d inputs for %d outputs worth %d",
            len(inputs), len(outputs), out_sum)
        return signatures
