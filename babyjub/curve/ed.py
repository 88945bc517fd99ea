from __future__ import annotations

from functools import cached_property

from .scalar import fe, one, p2, zero
from .util import lt_bytes32, tobytes

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2
# Baby Jubjub constants (EIP-2494):
a, d = fe(168700), fe(168696)

# Prime order of the subgroup generated by B, and the cofactor
q = 2736030358979909402780800718157159386076813972158567259200215660948447373041
cofactor = 8

# Points are represented as tuples (X, Y, Z) of projective
# coordinates, with x = X/Z, y = Y/Z

class EdPoint:
  def __init__(self, x: fe, y: fe, z: fe = one):
    self.X = x
    self.Y = y
    self.Z = z

  def __repr__(self): return point_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return tobytes(self.y.val + (self.is_negative << 255))
  def __hash__(self): return self.y.val

  @cached_property
  def norm(self) -> EdPoint:
    """Return a normalized point, with Z=1."""
    return EdPoint(self.x, self.y)

  @cached_property
  def is_negative(self) -> bool:
    """The sign of x: set when x is above (p-1)/2."""
    return lt_bytes32(p2, self.x)

  @cached_property
  def on_curve(self) -> bool:
    x2, y2 = self.x.sq, self.y.sq
    return a * x2 + y2 == one + d * x2 * y2

  @cached_property
  def is_zero(self) -> bool:
    """True for the neutral element (0, 1)."""
    return self.X == zero and self.Y == self.Z

  @cached_property
  def x(self) -> fe: return self.X / self.Z

  @cached_property
  def y(self) -> fe: return self.Y / self.Z

  def __add__(self, othr: EdPoint) -> EdPoint:
    if not isinstance(othr, EdPoint): return NotImplemented
    # Unified addition, complete on Baby Jubjub because a is square and d is not
    A = self.Z * othr.Z
    B = A.sq
    C = self.X * othr.X
    D = self.Y * othr.Y
    E = d * C * D
    F, G = B - E, B + E
    X = A * F * ((self.X + self.Y) * (othr.X + othr.Y) - C - D)
    Y = A * G * (D - a * C)
    return EdPoint(X, Y, F * G)

  def __sub__(self, othr: EdPoint) -> EdPoint:
    return self + -othr

  def __neg__(self) -> EdPoint:
    return EdPoint(-self.X, self.Y, self.Z)

  def __mul__(self, s: int) -> EdPoint:
    """Multiply the point by scalar."""
    if not isinstance(s, int): return NotImplemented
    Q = ZERO  # Neutral element
    P = self
    # Modulo the full group order 8 * q, so that low order components are preserved
    s %= cofactor * q
    while s > 0:
      if s & 1: Q += P
      P += P
      s >>= 1
    return Q.norm

  def __rmul__(self, s: int) -> EdPoint:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, EdPoint): raise TypeError(f"EdPoints cannot be compared with {type(othr)}")
    # x1 / z1 == x2 / z2  <==>  x1 * z2 == x2 * z1
    return (
      (self.X * othr.Z - othr.X * self.Z) == zero and
      (self.Y * othr.Z - othr.Y * self.Z) == zero
    )

# Neutral element
ZERO = EdPoint(zero, one)

# Generator of the full group (order 8 * q)
G = EdPoint(
  fe(995203441582195749578291179787384436505546430278305826713579947235728471134),
  fe(5472060717959818805561601436314318772137091100104008585924551046643952123905),
)

# Base point (prime group generator), equal to 8 * G
B = EdPoint(
  fe(5299619240641551281634865583518297030282874472190772894086521144482721001553),
  fe(16950150798460657717958625567821834550301663161624707787222815936182638968203),
)

# Low order generator and all the low order points
L = q * G
LO = [i * L for i in range(cofactor)]


def point_name(P: EdPoint) -> str:
  """Return variable names rather than xy coordinates for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, EdPoint) and P == val:
      return name
  for i, val in enumerate(LO):
    if P == val:
      return f"LO[{i}]"
  return f"EdPoint({P.x!r}, {P.y!r})"
