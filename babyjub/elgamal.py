from __future__ import annotations

from typing import NamedTuple

from babyjub.curve import B, EdPoint
from babyjub.exceptions import InvalidEncoding
from babyjub.keys import check_key, decode_point, pack_point, unpack_point

# Exponential ElGamal on Baby Jubjub: the plaintext m is embedded as m * B, which
# makes ciphertexts additively homomorphic but requires solving a discrete log
# (see babyjub.dlog) to read back the integer after decryption.

# Randomness r must be uniformly random in [0, q) and never reused, which is
# not (and cannot be) checked here.


class Ciphertext(NamedTuple):
  c1: EdPoint
  c2: EdPoint

  def __bytes__(self):
    return pack_point(self.c1) + pack_point(self.c2)

  def __add__(self, othr):
    """Homomorphic addition: decrypts to the sum of the plaintexts."""
    if not isinstance(othr, Ciphertext): return NotImplemented
    return Ciphertext(self.c1 + othr.c1, self.c2 + othr.c2)

  @staticmethod
  def from_bytes(data: bytes) -> Ciphertext:
    if len(data) != 64: raise InvalidEncoding("Ciphertext should be exactly 64 bytes")
    return Ciphertext(unpack_point(data[:32]), unpack_point(data[32:]))


def embed(m: int) -> EdPoint:
  """The curve point representing plaintext m."""
  return m * B

def _encrypt(pk: EdPoint, m: int, r: int) -> Ciphertext:
  if not isinstance(m, int) or m < 0:
    raise ValueError(f"Plaintext must be a non-negative integer, got {m!r}")
  shared = r * pk
  return Ciphertext(r * B, shared + embed(m))

def exp_elgamal_encrypt(pk: EdPoint, m: int, r: int) -> Ciphertext:
  """Encrypt plaintext m for public key pk using randomness r."""
  return _encrypt(check_key(pk), m, r)

def exp_elgamal_encrypt_packed(packed: bytes, m: int, r: int) -> Ciphertext:
  """Encrypt for a packed public key, validating the key only once."""
  return _encrypt(check_key(decode_point(packed)), m, r)

def exp_elgamal_decrypt(sk: int, ct: Ciphertext) -> EdPoint:
  """Decrypt into the embedded plaintext point m * B. The ciphertext is not validated."""
  c1, c2 = ct
  shared = sk * c1
  return (c2 - shared).norm
