__version__ = "0.1.0"

from babyjub.elgamal import (
  Ciphertext, embed, exp_elgamal_decrypt, exp_elgamal_encrypt, exp_elgamal_encrypt_packed
)
from babyjub.exceptions import DecryptError, InvalidEncoding, InvalidKey
from babyjub.keys import (
  check_key, is_valid_subgroup, new_private_key, new_randomness, pack_point, priv_to_pub_key,
  unpack_point
)
