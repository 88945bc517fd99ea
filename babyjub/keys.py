from secrets import randbelow

from babyjub.curve import B, EdPoint, a, d, fe, lt_bytes32, one, p2, q, tobytes, tointsign, zero
from babyjub.exceptions import InvalidEncoding, InvalidKey

# Packed public keys are compatible with circomlibjs packPoint/unpackPoint:
# little endian y with the sign of x (x > (p-1)/2) in the high bit of the last byte.


def is_valid_subgroup(P: EdPoint) -> bool:
  """True if P is on the curve and in the prime order subgroup (q * P is the neutral element)."""
  return P.on_curve and (q * P).is_zero

def check_key(P: EdPoint) -> EdPoint:
  if not is_valid_subgroup(P):
    raise InvalidKey("Not a valid Baby Jubjub public key")
  return P

def new_private_key() -> int:
  """A uniformly random private scalar in [1, q)."""
  return 1 + randbelow(q - 1)

# ElGamal randomness is sampled exactly like private keys
new_randomness = new_private_key

def priv_to_pub_key(sk: int) -> EdPoint:
  """Public key of a private scalar, sk * B. The range of sk is not checked."""
  return sk * B

def pack_point(P: EdPoint) -> bytes:
  """Compress a public key into 32 bytes."""
  check_key(P)
  return tobytes(P.y.val | lt_bytes32(p2, P.x) << 255)

def decode_point(packed: bytes) -> EdPoint:
  """Restore a point from its packed form, enforcing canonicity but not subgroup membership."""
  if len(packed) != 32:
    raise InvalidEncoding(f"Packed point must be 32 bytes, got {len(packed)}")
  val, sign = tointsign(bytes(packed))
  y = fe(val)
  # Values at or above p would alias another byte string for the same y
  if bytes(y) != tobytes(val):
    raise InvalidEncoding("Non-canonical y coordinate")
  try:
    x = ((one - y.sq) / (a - d * y.sq)).sqrt
  except ValueError:
    raise InvalidEncoding("Not a point on Baby Jubjub")
  # The root may come back with either sign, flip it to match the flag
  if sign != lt_bytes32(p2, x):
    x = -x
  # Stricter than circomlibjs, which negates 0 to 0 and accepts both encodings.
  # x = 0 has no negative, only the unsigned encoding is canonical
  if sign and x == zero:
    raise InvalidEncoding("Sign bit set for x = 0")
  return EdPoint(x, y)

def unpack_point(packed: bytes) -> EdPoint:
  """Decompress and validate a packed public key."""
  return check_key(decode_point(packed))
