from __future__ import annotations

from functools import cached_property

# Field prime (scalar field of BN254, the native field of the proof system)
p = 21888242871839275222246405745257275088548364400416034343698204186575808495617

# Precalculate commonly needed parts of the prime
p2 = (p - 1) // 2

# p - 1 = 2**s * t with t odd, for Tonelli-Shanks
s, t = 0, p - 1
while not t & 1:
  s, t = s + 1, t >> 1


class fe:
  """A prime field scalar modulo p (BN254 scalar field)"""
  def __init__(self, x: int): self.val = x % p
  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.val.to_bytes(32, 'little')

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == other.val

  def __abs__(self): return -self if self.is_negative else self
  def __neg__(self): return fe(-self.val)
  def __add__(self, o: fe): return fe(self.val + o.val)
  def __sub__(self, o: fe): return fe(self.val - o.val)
  def __mul__(self, o: fe): return fe(self.val * o.val)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    return self if o == one else fe(self.val * o.inv.val)

  def __pow__(self, e: int) -> fe:
    return self.sq if e == 2 else fe(pow(self.val, e, p))

  @cached_property
  def inv(self) -> fe:
    if self.val == 0: raise ZeroDivisionError("Inverse of zero")
    return self**-1

  @cached_property
  def is_negative(self) -> bool: return self.val > p2

  @cached_property
  def chi(self) -> fe:
    """Legendre symbol: zero, one or minus1"""
    return self**p2

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    x = self * self
    x.is_square = True
    return x

  @cached_property
  def is_square(self) -> bool: return self == zero or self.chi == one

  @cached_property
  def sqrt(self) -> fe:
    """The square root (Tonelli-Shanks). Raises ValueError if not a square."""
    if not self.is_square: raise ValueError('Not a square!')
    if self == zero: return zero
    m, c = s, nonresidue**t
    b, root = self**t, self**((t + 1) // 2)
    while b != one:
      # Find the least i such that b^(2^i) == 1
      i, b2 = 0, b
      while b2 != one:
        b2, i = b2.sq, i + 1
      e = c**(1 << m - i - 1)
      root *= e
      c = e.sq
      b *= c
      m = i
    assert root.sq == self
    # Choose the root between 0 and (p-1)/2
    return abs(root)

zero, one, minus1 = fe(0), fe(1), fe(-1)

# Smallest quadratic non-residue, needed by the square root
nonresidue = next(fe(n) for n in range(2, 100) if fe(n).chi == minus1)


def value_name(v: fe) -> str:
  """Return variable names rather than fe(...) for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, fe) and v == val:
      return name
  for name, val in globals().items():
    if isinstance(val, fe) and v == -val:
      return f"-{name}"
  return f"fe({v.val})"
