import logging
import threading
from abc import ABC, abstractmethod
from typing import Iterable, Set

logger = logging.getLogger(__name__)

class Ledger(ABC):
    """
    Set of spent note secrets.

    A secret is present if and only if its note has been spent, so no
    implementation may insert a secret it could later have to take back.

    `insert_if_absent` must be atomic: among concurrent callers inserting
    the same secret exactly one gets True. `insert_all_if_absent` must check
    every secret before inserting any, in one transaction.
    """

    @abstractmethod
    def contains(self, secret: bytes) -> bool:
        ...

    @abstractmethod
    def insert_if_absent(self, secret: bytes) -> bool:
        ...

    @abstractmethod
    def insert_all_if_absent(self, secrets: Iterable[bytes]) -> bool:
        """
        Inserts every secret or none of them.

        Returns False without touching the ledger if any secret is already
        present or appears twice in `secrets`.
        """
        ...

class MemoryLedger(Ledger):
    """In-process ledger backed by a set and a single lock."""

    def __init__(self):
        self._spent: Set[bytes] = set()
        self._lock = threading.Lock()

    def contains(self, secret: bytes) -> bool:
        with self._lock:
            return secret in self._spent

    def insert_if_absent(self, secret: bytes) -> bool:
        with self._lock:
            if secret in self._spent:
                return False
            self._spent.add(secret)
            return True

    def insert_all_if_absent(self, secrets: Iterable[bytes]) -> bool:
        secrets = list(secrets)
        with self._lock:
            # duplicates inside one batch count as a double spend
            if len(set(secrets)) != len(secrets):
                return False
            if any(s in self._spent for s in secrets):
                return False
            self._spent.update(secrets)
        logger.debug("Recorded %d spent secrets", len(secrets))
        return True

    def __contains__(self, secret: bytes) -> bool:
        return self.contains(secret)

    def __len__(self) -> int:
        with self._lock:
            return len(self._spent)
