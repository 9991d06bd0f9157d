import logging
import secrets
from typing import Dict, List, Optional, Sequence

from .b_dhke import blind, unblind
from .dleq import verify_dleq
from .errors import ProofInvalidError
from .generators import hash_to_curve
from .mint import BlindSignature, Mint
from .models import Note, PendingOutput
from .secp import GroupElement

logger = logging.getLogger(__name__)

SECRET_LENGTH = 32

class Wallet:
    """
    A holder's notes, kept in the order they were received.

    The wallet talks to a `Mint` object directly; transport is up to the
    caller.
    """

    def __init__(self, notes: Optional[List[Note]] = None):
        self.notes: List[Note] = list(notes) if notes else []

    @property
    def balance(self) -> int:
        return sum(n.denomination for n in self.notes)

    def create_outputs(self, denominations: Sequence[int]) -> List[PendingOutput]:
        """
        Draws a fresh secret per denomination and blinds its curve point.
        """
        pending = []
        for denomination in denominations:
            secret = secrets.token_bytes(SECRET_LENGTH)
            blinded = blind(hash_to_curve(secret))
            pending.append(PendingOutput(denomination, secret, blinded))
        return pending

    def receive(
        self,
        pending: Sequence[PendingOutput],
        signatures: Sequence[BlindSignature],
        public_keys: Dict[int, GroupElement],
    ) -> List[Note]:
        """
        Turns blind signatures into notes and stores them.

        Every DLEQ proof is checked before anything is stored, so a single
        bad signature means no note from this batch is kept.

        Parameters:
            pending (Sequence[PendingOutput]): The outputs that were requested.
            signatures (Sequence[BlindSignature]): The mint's reply, in request order.
            public_keys (Dict[int, GroupElement]): The mint's key per denomination.

        Returns:
            List[Note]: The new notes.

        Raises:
            ProofInvalidError: if a proof fails or a key is unknown.
        """
        if len(pending) != len(signatures):
            raise ValueError(f"expected {len(pending)} signatures, got {len(signatures)}")

        for output, (C_, proof) in zip(pending, signatures):
            A = public_keys.get(output.denomination)
            if A is None:
                raise ProofInvalidError(f"no public key for denomination {output.denomination}")
            if not verify_dleq(output.blinded.blinded_point, C_, A, proof):
                logger.warning("DLEQ proof failed for %d note", output.denomination)
                raise ProofInvalidError(f"DLEQ proof failed for {output.denomination} unit note")

        new_notes = []
        for output, (C_, _) in zip(pending, signatures):
            A = public_keys[output.denomination]
            C = unblind(C_, output.blinded.blind_factor, A)
            new_notes.append(Note.create(output.denomination, output.secret, C))

        self.notes.extend(new_notes)
        return new_notes

    def mint_notes(self, mint: Mint, denominations: Sequence[int]) -> Optional[List[Note]]:
        pending = self.create_outputs(denominations)
        signatures = mint.mint([p.request for p in pending])
        if signatures is None:
            return None
        return self.receive(pending, signatures, mint.public_keys())

    def swap(
        self,
        mint: Mint,
        inputs: Sequence[Note],
        denominations: Sequence[int],
    ) -> Optional[List[Note]]:
        """
        Trades `inputs` for fresh notes of the given denominations.

        `inputs` may belong to another holder. Any of them held by this
        wallet are dropped once the mint has accepted the swap.
        """
        pending = self.create_outputs(denominations)
        signatures = mint.swap(inputs, [p.request for p in pending])
        if signatures is None:
            return None
        self._remove(inputs)
        return self.receive(pending, signatures, mint.public_keys())

    def select(self, amount: int) -> Optional[List[Note]]:
        """
        Takes notes in stored order until they cover `amount`.

        There is no change: the selection is only returned if it sums to
        exactly `amount`.
        """
        if amount <= 0:
            return None
        selected = []
        total = 0
        for note in self.notes:
            if total >= amount:
                break
            selected.append(note)
            total += note.denomination
        if total != amount:
            return None
        return selected

    def spend(self, mint: Mint, amount: int) -> bool:
        """
        Redeems notes worth exactly `amount` at the mint.

        On failure the wallet is left unchanged.
        """
        selected = self.select(amount)
        if selected is None:
            logger.debug("No exact selection for %d", amount)
            return False
        if not mint.spend(selected):
            return False
        self._remove(selected)
        return True

    def _remove(self, notes: Sequence[Note]) -> None:
        spent = {n.secret for n in notes}
        self.notes = [n for n in self.notes if n.secret not in spent]
