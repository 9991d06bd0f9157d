import pytest

from ecash.ledger import Ledger
from ecash.mint import Mint
from ecash.models import MintKeypair
from ecash.wallet import Wallet

class DictLedger(Ledger):
    """
    Single-threaded backend keyed by secret, standing in for a storage
    engine. Its batch checks every secret before writing any, and calls
    `on_conflict` (if set) at the point where it refuses a batch.
    """

    def __init__(self):
        self.spent = {}
        self.on_conflict = None

    def contains(self, secret):
        return secret in self.spent

    def insert_if_absent(self, secret):
        if secret in self.spent:
            return False
        self.spent[secret] = True
        return True

    def insert_all_if_absent(self, secrets):
        secrets = list(secrets)
        if len(set(secrets)) != len(secrets) or any(s in self.spent for s in secrets):
            if self.on_conflict:
                self.on_conflict()
            return False
        for s in secrets:
            self.spent[s] = True
        return True

@pytest.fixture
def dict_ledger():
    return DictLedger()

@pytest.fixture
def mint():
    return Mint([1, 2, 4, 8])

@pytest.fixture
def keypair():
    return MintKeypair.generate(4)

@pytest.fixture
def alice(mint):
    # Alice mints a 4 and a 2 directly
    wallet = Wallet()
    assert wallet.mint_notes(mint, [4, 2]) is not None
    return wallet

@pytest.fixture
def bob():
    return Wallet()
