class InvalidKey(ValueError):
  """Point is not on the curve or not in the prime order subgroup"""

class InvalidEncoding(ValueError):
  """Packed point is not the canonical encoding of any curve point"""

class DecryptError(ValueError):
  """Plaintext could not be recovered"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
