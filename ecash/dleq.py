from .secp import GroupElement, Scalar
from .generators import G
from .models import DLEQProof
from .zkp import Equation, LinearRelationMode, LinearRelationProverVerifier

class DLEQStatement:

    @classmethod
    def create(cls,
        A: GroupElement,
        B_: GroupElement,
        C_: GroupElement,
    ):
        return [
            Equation(           # A = a*G
                value=A,
                construction=[G]
            ),
            Equation(           # C' = a*B'
                value=C_,
                construction=[B_]
            ),
        ]

def prove_dleq(
    a: Scalar,
    B_: GroupElement,
    C_: GroupElement,
) -> DLEQProof:
    """
    Generates a proof that log_G(A) == log_B'(C') for A = a*G.

    Parameters:
        a (Scalar): The mint private scalar for the denomination.
        B_ (GroupElement): The blinded point that was signed.
        C_ (GroupElement): The blind signature a*B'.

    Returns:
        DLEQProof: The (e, s) proof.
    """
    prover = LinearRelationProverVerifier(
        LinearRelationMode.PROVE,
        secrets=[a],
    )
    prover.add_statement(DLEQStatement.create(a*G, B_, C_))
    e, (s,) = prover.prove()
    return DLEQProof(e=e, s=s)

def verify_dleq(
    B_: GroupElement,
    C_: GroupElement,
    A: GroupElement,
    proof: DLEQProof,
) -> bool:
    """
    Verifies that C' was produced with the private scalar behind A.

    Parameters:
        B_ (GroupElement): The blinded point the wallet sent.
        C_ (GroupElement): The blind signature returned by the mint.
        A (GroupElement): The mint public key for the denomination.
        proof (DLEQProof): The proof returned with C'.

    Returns:
        bool: True if the proof is valid, False otherwise.
    """
    verifier = LinearRelationProverVerifier(
        LinearRelationMode.VERIFY,
        proof=(proof.e, [proof.s]),
    )
    verifier.add_statement(DLEQStatement.create(A, B_, C_))
    return verifier.verify()
