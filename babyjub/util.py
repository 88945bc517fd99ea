import re
from base64 import b64decode, b64encode

from babyjub.curve import q


def armor_decode(data: str) -> bytes:
  """Base64 decode, tolerant of surrounding whitespace, quote marks and code block markers."""
  data = data.replace('\r\n', '\n').strip('\uFEFF`> \t\n')
  if not data.isascii():
    raise ValueError("Invalid armored encoding: data is not ASCII/Base64")
  data = "".join(line.lstrip('\t >').rstrip() for line in data.split('\n'))
  if not re.match("^[A-Za-z0-9+/]*$", data):
    raise ValueError("Invalid armored encoding: unrecognized data")
  padding = -len(data) % 4
  if padding == 3:
    raise ValueError("Invalid armored encoding: invalid length for Base64 sequence")
  return b64decode(data + padding*'=', validate=True)


def armor_encode(data: bytes) -> str:
  """Base64 without the padding."""
  return b64encode(data).decode().rstrip('=')


def encode_scalar(s: int) -> str:
  """Secret keys and nonces are shown as 64 hex digits (big endian)."""
  return f"{s:064x}"


def decode_scalar(text: str) -> int:
  text = text.strip().lower().removeprefix("0x")
  if not re.match("^[0-9a-f]{1,64}$", text):
    raise ValueError("Invalid scalar: expected up to 64 hex digits")
  s = int(text, 16)
  if not 0 < s < q:
    raise ValueError("Invalid scalar: out of range")
  return s


def decode_packed(text: str) -> bytes:
  """Packed public keys are shown as 64 hex digits (the 32 bytes in order)."""
  try:
    packed = bytes.fromhex(text.strip())
  except ValueError:
    raise ValueError("Invalid public key: not hex")
  if len(packed) != 32:
    raise ValueError("Invalid public key: should be 32 bytes")
  return packed
