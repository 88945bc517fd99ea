import pytest

from babyjub.curve import ZERO, G
from babyjub.dlog import baby_steps, decrypt_int, recover
from babyjub.elgamal import embed, exp_elgamal_encrypt
from babyjub.exceptions import DecryptError
from babyjub.keys import new_private_key, new_randomness, priv_to_pub_key


def test_recover():
  for m in (0, 1, 5, 255, 256, 257, 40000, 65535):
    assert recover(embed(m), bits=16) == m
  assert recover(ZERO, bits=1) == 0
  assert recover(embed(1), bits=1) == 1


def test_recover_out_of_range():
  with pytest.raises(DecryptError):
    recover(embed(65536), bits=16)
  with pytest.raises(DecryptError):
    recover(embed(70000), bits=16)
  # A point not in the prime order subgroup is never found
  with pytest.raises(DecryptError):
    recover(G, bits=8)
  with pytest.raises(ValueError):
    recover(ZERO, bits=0)
  with pytest.raises(ValueError):
    recover(ZERO, bits=100)


def test_baby_steps_cached():
  assert baby_steps(16) is baby_steps(16)
  assert len(baby_steps(16)) == 16
  # A single table is kept at a time
  baby_steps(8)
  assert baby_steps.cache_info().currsize == 1
  assert baby_steps.cache_info().maxsize == 1


def test_decrypt_int():
  sk = new_private_key()
  pk = priv_to_pub_key(sk)
  ct = exp_elgamal_encrypt(pk, 12345, new_randomness())
  assert decrypt_int(sk, ct, bits=16) == 12345
  with pytest.raises(DecryptError):
    decrypt_int(sk, ct, bits=8)
