"""
Salting stage: combine service bytes with passphrase bytes.
All functions are pure.
"""

from typing import List

from .errors import InvalidSettingsError
from .invariants import validate_chunk_size
from .settings.model import Append, Prepend, SaltingAlgorithm, Zip


def _chunks(data: bytes, size: int) -> List[bytes]:
    """Split data into consecutive chunks; the last one may be shorter."""
    return [data[i:i + size] for i in range(0, len(data), size)]


def zip_chunks(data: bytes, salt_bytes: bytes, chunk_size: int) -> bytes:
    """
    Interleave salt and data chunk by chunk, salt first.
    
    Pairing stops at the shorter chunk list, so trailing chunks of the
    longer input are dropped.
    
    Args:
        data: Data bytes
        salt_bytes: Salt bytes
        chunk_size: Bytes per chunk
        
    Returns:
        Interleaved bytes
        
    Raises:
        InvalidSettingsError: If chunk size is not positive
    """
    validate_chunk_size(chunk_size)
    
    pairs = zip(_chunks(salt_bytes, chunk_size), _chunks(data, chunk_size))
    return b''.join(salt_chunk + data_chunk for salt_chunk, data_chunk in pairs)


def salt(algorithm: SaltingAlgorithm, data: bytes, salt_bytes: bytes) -> bytes:
    """
    Combine data with salt according to the salting algorithm.
    
    Args:
        algorithm: Salting variant
        data: Data bytes (the service on the first pass)
        salt_bytes: Salt bytes (the passphrase)
        
    Returns:
        Combined bytes
    """
    if isinstance(algorithm, Prepend):
        return bytes(salt_bytes) + bytes(data)
    
    if isinstance(algorithm, Append):
        return bytes(data) + bytes(salt_bytes)
    
    if isinstance(algorithm, Zip):
        return zip_chunks(bytes(data), bytes(salt_bytes), algorithm.chunk_size)
    
    raise InvalidSettingsError(f"Unknown salting algorithm: {algorithm!r}")
