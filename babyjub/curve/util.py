from typing import Tuple


def toint(x) -> int:
  if isinstance(x, int): return x
  if len(x) != 32: raise ValueError("Should be exactly 32 bytes")
  return int.from_bytes(x, "little")

def tointsign(x) -> Tuple[int, bool]:
  """Separate the 255 bit integer and its high bit as a sign, return both."""
  val = toint(x)
  sign = val & 1 << 255
  return val ^ sign, bool(sign)

def tobytes(x: int) -> bytes:
  return x.to_bytes(32, "little")

def lt_bytes32(x, y) -> bool:
  """Compare two field elements (fe or int) as integers via their 32-byte little endian encodings."""
  xb = tobytes(x) if isinstance(x, int) else bytes(x)
  yb = tobytes(y) if isinstance(y, int) else bytes(y)
  # Most significant byte first, the first differing byte decides
  return xb[::-1] < yb[::-1]
