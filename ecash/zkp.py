from .secp import GroupElement, Scalar
from .generators import O
import hashlib

from dataclasses import dataclass
from typing import List, Optional, Tuple
from enum import Enum

@dataclass
class Equation:
    value: GroupElement
    construction: List[GroupElement]

Statement = List[Equation]

class LinearRelationMode(Enum):
    PROVE = 0
    VERIFY = 1

    @property
    def isProve(self):
        return self == LinearRelationMode.PROVE

    @property
    def isVerify(self):
        return self == LinearRelationMode.VERIFY

class LinearRelationProverVerifier:
    """
    Proves or verifies, via Fiat-Shamir, knowledge of secrets x_i such that
    V = Σ x_i*P_i holds for every equation of a statement.

    The challenge is SHA256 over every commitment R in order, followed by
    every public value V in order, reduced modulo the group order.

    Attributes:
        random_terms (List[Scalar]): Nonces, one per secret (PROVE only).
        secrets (List[Scalar]): The witnesses (PROVE only).
        responses (List[Scalar]): Responses from the proof (VERIFY only).
        c (Scalar): The challenge from the proof (VERIFY only).
        commitments (List[GroupElement]): R for each equation added so far.
        values (List[GroupElement]): V for each equation added so far.
        mode (LinearRelationMode): PROVE or VERIFY.
    """
    random_terms: List[Scalar]
    secrets: List[Scalar]
    responses: List[Scalar]
    c: Scalar
    commitments: List[GroupElement]
    values: List[GroupElement]
    mode: LinearRelationMode

    def __init__(self,
        mode: LinearRelationMode,
        secrets: Optional[List[Scalar]] = None,
        proof: Optional[Tuple[Scalar, List[Scalar]]] = None,
    ):
        """
        Parameters:
            mode (LinearRelationMode): PROVE or VERIFY.
            secrets (Optional[List[Scalar]]): The witnesses, required if mode is PROVE.
            proof (Optional[Tuple[Scalar, List[Scalar]]]): (challenge, responses), required if mode is VERIFY.
        """
        match mode:
            case LinearRelationMode.PROVE:
                assert secrets is not None, "mode is PROVE but no secrets provided"
                self.secrets = secrets
                # a nonce must never be shared between two proofs
                self.random_terms = [Scalar.random() for _ in secrets]
            case LinearRelationMode.VERIFY:
                assert proof is not None, "mode is VERIFY but no proof provided"
                self.c, self.responses = proof
            case _:
                raise ValueError("unrecognized mode")

        self.commitments = []
        self.values = []
        self.mode = mode

    def add_statement(self, statement: Statement):
        """
        Adds the equations of a statement to be proven or verified.

        Parameters:
            statement (Statement): The statement to be added.
        """
        for eq in statement:
            R = O
            V = eq.value
            if self.mode.isProve:
                for k, P in zip(self.random_terms, eq.construction):
                    R += k * P
            elif self.mode.isVerify:
                for s, P in zip(self.responses, eq.construction):
                    R += s * P
                R -= self.c * V
            self.commitments.append(R)
            self.values.append(V)

        if not self.commitments:
            raise ValueError("add_statement: empty statement")

    def challenge(self) -> Scalar:
        preimage = b"".join(
            P.serialize(True) for P in self.commitments + self.values
        )
        return Scalar.from_digest(hashlib.sha256(preimage).digest())

    def prove(self) -> Tuple[Scalar, List[Scalar]]:
        """
        Returns:
            Tuple[Scalar, List[Scalar]]: The challenge and one response per secret.
        """
        assert self.mode.isProve, "mode is not PROVE!"
        c = self.challenge()
        responses = [k + c*x for k, x in zip(self.random_terms, self.secrets)]
        return c, responses

    def verify(self) -> bool:
        assert self.mode.isVerify, "mode is not VERIFY!"
        if self.c.is_zero:
            return False
        return self.c == self.challenge()
