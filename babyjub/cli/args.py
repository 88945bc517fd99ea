import sys

from babyjub.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.identities = []
    self.recipients = []
    self.nonce = ""
    self.bits = ""
    self.paste = None
    self.debug = None


keygenargs = dict(debug='--debug'.split(),)

pubargs = dict(
  identities='-i --identity'.split(),
  debug='--debug'.split(),
)

encargs = dict(
  recipients='-r --recipient'.split(),
  nonce='-n --nonce'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

decargs = dict(
  identities='-i --identity'.split(),
  bits='--bits'.split(),
  paste='-A'.split(),
  debug='--debug'.split(),
)

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('keygen', 'gen', '-g'): return 'keygen', keygenargs
  if arg in ('pub', 'pubkey'): return 'pub', pubargs
  if arg in ('enc', 'encrypt', '-e'): return 'enc', encargs
  if arg in ('dec', 'decrypt', '-d'): return 'dec', decargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing to allow combined short flags with parameters (-Ar key)
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  args = Args()
  # Separate mode selector from other arguments
  if av[0].startswith("-") and len(av[0]) > 2 and not needhelp(av):
    av.insert(1, f'-{av[0][2:]}')
    av[0] = av[0][:2]

  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (keygen/pub/enc/dec/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  shortargs = [flag[1:] for switches in ad.values() for flag in switches if not flag.startswith("--")]
  for a in aiter:
    aprint = a
    if not a.startswith('-') or a == '-':
      args.files.append(a)
      continue
    if a == '--':
      args.files += aiter
      break
    if a.startswith('--'):
      a = a.lower()
    if not a.startswith('--') and len(a) > 2:
      falseargs = [arg for arg in a[1:] if arg not in shortargs]
      if falseargs:
        print_help(args.mode, f' 💣  Unknown argument: babyjub {args.mode} {a} (failing -{" -".join(falseargs)})')
      a = [f'-{shortarg}' for shortarg in a[1:]]
    if isinstance(a, str):
      a = [a]
    for flag in a:
      argvar = next((k for k, v in ad.items() if flag in v), None)
      if argvar is None:
        print_help(args.mode, f' 💣  Unknown argument: babyjub {args.mode} {aprint}')
      try:
        var = getattr(args, argvar)
        if isinstance(var, list):
          var.append(next(aiter))
        elif isinstance(var, str):
          setattr(args, argvar, next(aiter))
        else:
          setattr(args, argvar, True)
      except StopIteration:
        print_help(args.mode, f' 💣  Argument parameter missing: babyjub {args.mode} {aprint} …')

  return args
