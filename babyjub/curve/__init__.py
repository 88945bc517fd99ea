# A plain Python submodule for Baby Jubjub curve math

# Baby Jubjub is the twisted Edwards curve defined over the scalar field of BN254,
# so that its arithmetic is cheap inside SNARK circuits over that field.
# https://eips.ethereum.org/EIPS/eip-2494

# Not constant time, not zeroing buffers after use. These are very low level
# primitives that perform no validation of their inputs; use babyjub.keys for
# anything that handles untrusted points.

# Lower case constants are scalars (int or fe), upper case are EdPoints.

from .ed import LO, ZERO, B, EdPoint, G, L, a, cofactor, d, q
from .scalar import fe, minus1, one, p, p2, zero
from .util import lt_bytes32, tobytes, toint, tointsign
