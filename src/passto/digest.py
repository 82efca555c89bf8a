"""
Digest stage: render hash bytes as printable text.

Besides hex and the two base64 flavours, bytes can be written as a numeral in
an arbitrary base whose digits are the characters of a custom alphabet.
"""

import base64
from typing import Sequence

from .config import MIN_ALPHABET_LENGTH
from .errors import CustomAlphabetTooShortError, InvalidSettingsError
from .settings.model import Base64, Base64Url, CustomAlphabet, DigestAlgorithm, Hex


def sorted_alphabet(alphabet: str) -> Sequence[str]:
    """
    Digit symbols in code point order.
    Digit value ``i`` is rendered as the ``i``-th symbol of the result.
    """
    return sorted(alphabet)


def encode_custom_alphabet(data: bytes, alphabet: str) -> str:
    """
    Encode bytes as a numeral over a custom alphabet.
    
    The bytes are read as one unsigned little-endian integer. Digits are
    emitted least significant first and the result is not reversed, so the
    first character carries the lowest digit.
    
    Args:
        data: Bytes to encode
        alphabet: Digit symbols; order is irrelevant, only sorted order counts
        
    Returns:
        Encoded string; empty when the integer value is zero
        
    Raises:
        CustomAlphabetTooShortError: If alphabet has fewer than 16 characters
    """
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise CustomAlphabetTooShortError(len(alphabet), MIN_ALPHABET_LENGTH)
    
    digits = sorted_alphabet(alphabet)
    base = len(digits)
    value = int.from_bytes(bytes(data), 'little')
    
    result = []
    while value > 0:
        value, remainder = divmod(value, base)
        result.append(digits[remainder])
    
    return ''.join(result)


def encode_digest(algorithm: DigestAlgorithm, data: bytes) -> str:
    """
    Render bytes with the selected digest algorithm.
    
    Args:
        algorithm: Digest variant
        data: Hash bytes
        
    Returns:
        Printable string
        
    Raises:
        CustomAlphabetTooShortError: If a custom alphabet is too short
    """
    if isinstance(algorithm, Hex):
        return bytes(data).hex()
    
    if isinstance(algorithm, Base64):
        return base64.b64encode(data).decode('ascii')
    
    if isinstance(algorithm, Base64Url):
        return base64.urlsafe_b64encode(data).rstrip(b'=').decode('ascii')
    
    if isinstance(algorithm, CustomAlphabet):
        return encode_custom_alphabet(data, algorithm.alphabet)
    
    raise InvalidSettingsError(f"Unknown digest algorithm: {algorithm!r}")
