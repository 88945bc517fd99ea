import sys
from typing import NoReturn

import babyjub

T = "\x1B[1;44m"  # titlebar (white on blue)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}babyjub {F}keygen{N} {D}—{N} create a new secret key and its public key\n",
  pub=f"{C}babyjub {F}pub -i {N}seckey {D}—{N} show the packed public key of a secret key\n",
  enc=f"{C}babyjub {F}enc -r {N}pubkey {D}[{F}-n {N}nonce{D}] [{F}-A{D}]{N} value\n",
  dec=f"{C}babyjub {F}dec -i {N}seckey {D}[{F}--bits {N}32{D}] [{F}-A {D}|{N} ciphertext{D}]{N}\n",
)

usagetext = dict(
  keygen="""\
Prints a random secret key (64 hex digits) on the first line and the matching
packed public key (32 bytes in hex) on the second line.
""",
  pub=f"""\
  {F}-i {N}seckey         Secret key as printed by {C}babyjub {F}keygen{N}
""",
  enc=f"""\
Encrypt a non-negative integer with exponential ElGamal. The ciphertext is
printed as Base64 text. Never reuse a nonce: by default a random one is used.

  {F}-r {N}pubkey         Packed public key of the recipient (hex)
  {F}-n {N}nonce          Encryption randomness (hex), for reproducible output
  {F}-A{N}                Copy the ciphertext to clipboard
""",
  dec=f"""\
Decrypt a ciphertext and search for the integer value (discrete logarithm).
Values up to 32 bits are found quickly, larger ranges take considerably longer.

  {F}-i {N}seckey         Secret key (hex)
  {F}--bits {N}N          Search range for the value, 0 ≤ value < 2^N (default 32)
  {F}-A{N}                Paste the ciphertext from clipboard
""",
)

introduction = """\
Exponential ElGamal encryption of small integers on the Baby Jubjub curve,
compatible with circomlibjs packed public keys.
"""

shorthelp = f"""\
{T}                   Babyjub {babyjub.__version__} - ElGamal on Baby Jubjub                       {N}

{usage['keygen']}{usage['pub']}{usage['enc']}{usage['dec']}
"""

cmdhelp = {
  mode: f"{shorthelp.split(chr(10))[0]}\n\n{usage[mode]}\n{usagetext[mode]}"
  for mode in usage
}

fullhelp = f"{shorthelp}{introduction}"


def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"Babyjub {babyjub.__version__}")
  sys.exit(0)
