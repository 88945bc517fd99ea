from babyjub import keys, util
from babyjub.exceptions import CliArgError


def secret_arg(args) -> int:
  if len(args.identities) != 1:
    raise CliArgError("Exactly one secret key must be given with -i")
  return util.decode_scalar(args.identities[0])


def main_keygen(args):
  if args.files:
    raise CliArgError(f"Unexpected arguments: {' '.join(args.files)}")
  sk = keys.new_private_key()
  pk = keys.pack_point(keys.priv_to_pub_key(sk))
  print(util.encode_scalar(sk))
  print(pk.hex())


def main_pub(args):
  sk = secret_arg(args)
  print(keys.pack_point(keys.priv_to_pub_key(sk)).hex())
