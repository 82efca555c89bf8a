"""Settings model and serialization for Passto."""

from .model import (
    AlgorithmSettings,
    HashingAlgorithm,
    DigestAlgorithm,
    Hex,
    Base64,
    Base64Url,
    CustomAlphabet,
    SaltingAlgorithm,
    Prepend,
    Append,
    Zip,
)
from .serialization import serialize, deserialize, settings_to_dict, settings_from_dict

__all__ = [
    'AlgorithmSettings',
    'HashingAlgorithm',
    'DigestAlgorithm',
    'Hex',
    'Base64',
    'Base64Url',
    'CustomAlphabet',
    'SaltingAlgorithm',
    'Prepend',
    'Append',
    'Zip',
    'serialize',
    'deserialize',
    'settings_to_dict',
    'settings_from_dict',
]
