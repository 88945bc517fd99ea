from functools import lru_cache
from math import isqrt
from typing import Dict

from tqdm import tqdm

from babyjub.curve import B, ZERO, EdPoint
from babyjub.elgamal import Ciphertext, exp_elgamal_decrypt
from babyjub.exceptions import DecryptError

# Baby-step giant-step search for m such that m * B == P with 0 <= m < 2**bits.
# Takes about 2**(bits/2) point additions and as many table entries, so 32 bits
# is quick while 40 bits needs a million entry table and some patience.

MAX_BITS = 48


# Only the most recent table is kept, at 48 bits it has 2**24 entries
@lru_cache(maxsize=1)
def baby_steps(n: int) -> Dict[bytes, int]:
  """Table of j * B for 0 <= j < n, keyed by the encoded point."""
  table = {}
  P = ZERO
  for j in range(n):
    table[bytes(P)] = j
    P = (P + B).norm
  return table

def recover(P: EdPoint, bits: int = 32, progress: bool = False) -> int:
  """Find the integer m embedded in P = m * B, searching 0 <= m < 2**bits."""
  if not 0 < bits <= MAX_BITS:
    raise ValueError(f"Search range of {bits} bits is not supported (1..{MAX_BITS})")
  n = isqrt((1 << bits) - 1) + 1
  table = baby_steps(n)
  giant = -(n * B)
  P = P.norm
  for i in tqdm(range(n), disable=not progress, unit="step", leave=False):
    j = table.get(bytes(P))
    if j is not None:
      m = i * n + j
      if m >> bits:
        break
      return m
    P = (P + giant).norm
  raise DecryptError(f"Plaintext not found within {bits} bits")

def decrypt_int(sk: int, ct: Ciphertext, bits: int = 32, progress: bool = False) -> int:
  """Decrypt a ciphertext and recover the integer plaintext."""
  return recover(exp_elgamal_decrypt(sk, ct), bits, progress)
