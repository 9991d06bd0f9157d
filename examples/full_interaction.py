from ecash.config import MintConfig, setup_logging
from ecash.dleq import verify_dleq
from ecash.mint import Mint
from ecash.wallet import Wallet

config = MintConfig(denominations=[1, 2, 4, 8])
setup_logging(config.log)

# Mint with one keypair per denomination
mint = Mint.from_config(config)
print(f"Mint initialized with denominations: {list(mint.keys.denominations)}")

# Alice mints ecash (direct issuance)
alice = Wallet()
alice.mint_notes(mint, [4, 2])
print("Alice minted ecash:")
for n in alice.notes:
    print(f" - {n.denomination} unit note")

# Bob prepares blinded outputs for the swap
bob = Wallet()
outputs = bob.create_outputs([4, 2])

## SEND([p.request for p in outputs], alice.notes)

# Mint burns Alice's notes and blindly signs Bob's outputs
signatures = mint.swap(alice.notes, [p.request for p in outputs])
assert signatures is not None, "swap failed"
print("Swap successful, mint reissued notes")

## RECEIVE(signatures)

# Bob checks every DLEQ proof, then unblinds
keys = mint.public_keys()
for p, (C_, proof) in zip(outputs, signatures):
    assert verify_dleq(p.blinded.blinded_point, C_, keys[p.denomination], proof)
    print(f"DLEQ proof verified for {p.denomination} unit note")
bob.receive(outputs, signatures, keys)
alice.notes.clear()

print("Bob received ecash:")
for n in bob.notes:
    print(f" - {n.denomination} unit note")

# Bob spends
notes = list(bob.notes)
ok = bob.spend(mint, 6)
print(f"Bob spend result: {ok}")
assert ok

# Double-spend attempt with the same notes
print("Attempting double spend...")
double_spend = Wallet(notes).spend(mint, 6)
print(f"Double spend result: {double_spend}")
assert not double_spend
