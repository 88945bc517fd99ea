import sys

import pyperclip

from babyjub import dlog, elgamal, keys, util
from babyjub.cli.keys import secret_arg
from babyjub.exceptions import CliArgError


def main_enc(args):
  if len(args.recipients) != 1:
    raise CliArgError("Exactly one recipient public key must be given with -r")
  packed = util.decode_packed(args.recipients[0])
  if len(args.files) != 1:
    raise CliArgError("Exactly one value to encrypt must be given")
  try:
    m = int(args.files[0], 0)
  except ValueError:
    raise CliArgError(f"Not an integer: {args.files[0]}")
  if m < 0:
    raise CliArgError("Only non-negative values can be encrypted")
  r = util.decode_scalar(args.nonce) if args.nonce else keys.new_randomness()
  ct = elgamal.exp_elgamal_encrypt_packed(packed, m, r)
  data = util.armor_encode(bytes(ct))
  if args.paste:
    pyperclip.copy(f"```\n{data}\n```\n")
    sys.stderr.write("Ciphertext copied to clipboard.\n")
    return
  print(data)


def main_dec(args):
  sk = secret_arg(args)
  try:
    bits = int(args.bits) if args.bits else 32
  except ValueError:
    raise CliArgError(f"Invalid --bits {args.bits}")
  if args.paste:
    if args.files:
      raise CliArgError("Cannot give ciphertext with -A")
    text = pyperclip.paste()
  elif len(args.files) == 1:
    text = sys.stdin.read() if args.files[0] == '-' else args.files[0]
  else:
    raise CliArgError("Exactly one ciphertext must be given (or - for stdin)")
  ct = elgamal.Ciphertext.from_bytes(util.armor_decode(text))
  print(dlog.decrypt_int(sk, ct, bits, progress=sys.stderr.isatty()))
