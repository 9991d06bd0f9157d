from typing import Dict, Iterable, Optional, Tuple

from .models import MintKeypair
from .secp import GroupElement

def is_denomination(value) -> bool:
    # bool is an int subclass and 1.0 hashes like 1; neither is a denomination
    return isinstance(value, int) and not isinstance(value, bool) and value > 0

class KeyRegistry:
    """
    One keypair per denomination, generated at construction and never
    changed afterwards. Safe to share between threads without locking.
    """

    def __init__(self, denominations: Iterable[int]):
        denominations = set(denominations)
        if not denominations:
            raise ValueError("a registry needs at least one denomination")
        for d in denominations:
            if not is_denomination(d):
                raise ValueError(f"invalid denomination: {d!r}")
        self._keys: Dict[int, MintKeypair] = {
            d: MintKeypair.generate(d) for d in sorted(denominations)
        }

    @property
    def denominations(self) -> Tuple[int, ...]:
        return tuple(self._keys)

    def lookup(self, denomination: int) -> Optional[MintKeypair]:
        if not is_denomination(denomination):
            return None
        return self._keys.get(denomination)

    def public_keys(self) -> Dict[int, GroupElement]:
        return {d: kp.public_point for d, kp in self._keys.items()}

    def __contains__(self, denomination) -> bool:
        return self.lookup(denomination) is not None

    def __len__(self) -> int:
        return len(self._keys)
