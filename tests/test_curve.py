from secrets import randbelow, token_bytes

import pytest

from babyjub.curve import *


def test_fe():
  assert one + zero == one
  assert zero - one == minus1
  assert fe(1234) / fe(324123) == (fe(324123) / fe(1234)).inv
  assert repr(fe(1234)) == "fe(1234)"
  assert repr(fe(-1)) == "minus1"
  assert bytes(zero) == bytes(32)
  assert str(one) == "01" + 31 * "00"
  assert fe(p + 5) == fe(5)

  x = fe(toint(token_bytes(32)))
  assert x.sq.sqrt == abs(x)
  assert x.inv.inv == x
  assert x**3 == x * x * x
  assert x * fe(2) == x + x
  assert x * fe(2) != x
  assert zero.sqrt == zero
  assert not hasattr(fe, "bit")

  # Exactly one of x and -x is negative (unless zero)
  assert x.is_negative != (-x).is_negative

  with pytest.raises(TypeError):
    fe(1) == 1

  with pytest.raises(ZeroDivisionError):
    one / zero


def test_fe_nonsquare():
  n = next(fe(i) for i in range(2, 100) if not fe(i).is_square)
  with pytest.raises(ValueError):
    n.sqrt
  # A non-square times a square is never a square
  x = fe(randbelow(p - 1) + 1)
  assert not (n * x.sq).is_square


def test_lt_bytes32():
  assert lt_bytes32(1, 2)
  assert not lt_bytes32(2, 1)
  assert not lt_bytes32(7, 7)
  # Decided by the most significant differing byte, not the first one
  assert lt_bytes32(255, 256)
  assert not lt_bytes32(256 + 255, 256)
  assert lt_bytes32(fe(p2), fe(p - 1))
  assert not lt_bytes32(p2, fe(p2))
  for _ in range(100):
    x, y = randbelow(p), randbelow(p)
    assert lt_bytes32(fe(x), fe(y)) == (x < y)
    assert lt_bytes32(p2, fe(x)) == fe(x).is_negative


def test_constants():
  assert G.on_curve
  assert B.on_curve
  assert 8 * G == B
  assert q * B == ZERO
  assert q * G != ZERO
  assert cofactor * q * G == ZERO
  assert repr(ZERO) == "ZERO"
  assert repr(B) == "B"
  assert str(ZERO) == "01" + 31 * "00"
  # a is square and d is not, making the addition law complete
  assert a.is_square
  assert not d.is_square


def test_group_law():
  s, t = randbelow(q), randbelow(q)
  P, Q = s * B, t * B
  assert P + ZERO == P
  assert P - P == ZERO
  assert (P - P).is_zero
  assert P + Q == Q + P
  assert (P + Q) + B == P + (Q + B)
  assert (s + t) * B == P + Q
  assert (s * t) * B == s * Q
  assert -P == (q - s) * B
  assert 0 * P == ZERO
  assert 2 * P == P + P
  assert P.on_curve
  assert not EdPoint(one, fe(2)).on_curve


def test_lo():
  assert LO[0] == ZERO
  assert LO[1] == L
  assert repr(LO[1]) == "L"
  assert repr(LO[2]) == "LO[2]"
  assert len(set(LO)) == cofactor
  for P in LO:
    assert P.on_curve
    assert 8 * P == ZERO
  # Point of order 2
  assert LO[4] == EdPoint(zero, minus1)
  assert 8 * B != ZERO
  assert 8 * (B + L) != ZERO
  assert q * (B + L) == q * L


def test_hashmap():
  assert len({fe(i * p) for i in range(2)}) == 1
  assert len({i * B for i in range(10)}) == 10
