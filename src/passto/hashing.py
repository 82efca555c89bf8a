"""
Hashing stage.
Uses the standard SHA-2 implementations from the cryptography package.
"""

from cryptography.hazmat.primitives import hashes

from .errors import InvalidSettingsError
from .settings.model import HashingAlgorithm

_HASH_CLASSES = {
    HashingAlgorithm.SHA256: hashes.SHA256,
    HashingAlgorithm.SHA512: hashes.SHA512,
}


def hash_data(algorithm: HashingAlgorithm, data: bytes) -> bytes:
    """
    Hash bytes with the selected algorithm.
    
    Args:
        algorithm: Hashing algorithm
        data: Raw bytes to hash
        
    Returns:
        Digest bytes (32 for SHA-256, 64 for SHA-512)
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"Expected bytes, got {type(data)}")
    
    try:
        hash_class = _HASH_CLASSES[HashingAlgorithm(algorithm)]
    except (KeyError, ValueError):
        raise InvalidSettingsError(f"Unknown hashing algorithm: {algorithm!r}")
    
    hasher = hashes.Hash(hash_class())
    hasher.update(bytes(data))
    return hasher.finalize()


def hash_repeatedly(algorithm: HashingAlgorithm, data: bytes, iterations: int) -> bytes:
    """
    Hash data, then re-hash each digest until ``iterations`` passes are done.
    At least one pass is always performed.
    """
    hashed = hash_data(algorithm, data)
    for _ in range(1, iterations):
        hashed = hash_data(algorithm, hashed)
    return hashed
