import timeit
from ecash.b_dhke import blind, blind_sign, unblind
from ecash.dleq import verify_dleq
from ecash.generators import hash_to_curve
from ecash.mint import Mint
from ecash.wallet import Wallet

mint = Mint([1, 2, 4, 8])
keypair = mint.keys.lookup(8)
A = keypair.public_point

Y = hash_to_curve(b"\x00"*32)
blinded = blind(Y)
C_, proof = blind_sign(keypair.private_scalar, blinded.blinded_point)

def bench_blind():
    _ = blind(Y)

def bench_blind_sign():
    _ = blind_sign(keypair.private_scalar, blinded.blinded_point)

def bench_dleq_verify():
    assert verify_dleq(blinded.blinded_point, C_, A, proof)

def bench_unblind():
    _ = unblind(C_, blinded.blind_factor, A)

def bench_swap():
    wallet = Wallet()
    wallet.mint_notes(mint, [8])
    assert wallet.swap(mint, wallet.notes, [4, 2, 1, 1]) is not None

blind_time = timeit.timeit("bench_blind()", globals=globals(), number=1000)
sign_time = timeit.timeit("bench_blind_sign()", globals=globals(), number=1000)
dleq_time = timeit.timeit("bench_dleq_verify()", globals=globals(), number=1000)
unblind_time = timeit.timeit("bench_unblind()", globals=globals(), number=1000)
swap_time = timeit.timeit("bench_swap()", globals=globals(), number=100)

print("1000 iterations")
print(f"Blind time: {blind_time:.9f} seconds")
print(f"Blind sign + DLEQ prove time: {sign_time:.9f} seconds")
print(f"DLEQ verify time: {dleq_time:.9f} seconds")
print(f"Unblind time: {unblind_time:.9f} seconds")
print("=======================================")
print("100 iterations")
print(f"Mint + swap (1 -> 4 notes) time: {swap_time:.9f} seconds")
