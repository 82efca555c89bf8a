"""
Passto - deterministic password derivation

Derives a reproducible, site-specific password from a passphrase and a
service label. Nothing is stored: the same inputs and settings always
give the same output.

Main exports:
- derive: Derive a password (``encode`` is an alias)
- PasstoEngine: Derivation bound to one set of settings
- AlgorithmSettings: Settings model and its algorithm variants
"""

__version__ = "0.1.0"

from .engine import PasstoEngine, derive, encode
from .settings import (
    AlgorithmSettings,
    HashingAlgorithm,
    Hex,
    Base64,
    Base64Url,
    CustomAlphabet,
    Prepend,
    Append,
    Zip,
)
from .salting import salt
from .hashing import hash_data
from .digest import encode_digest
from .errors import *

__all__ = [
    'derive',
    'encode',
    'PasstoEngine',
    'AlgorithmSettings',
    'HashingAlgorithm',
    'Hex',
    'Base64',
    'Base64Url',
    'CustomAlphabet',
    'Prepend',
    'Append',
    'Zip',
    'salt',
    'hash_data',
    'encode_digest',
]
