"""
Settings model for the derivation pipeline.
Algorithm families are closed sets of variants; settings are immutable values.
"""

import dataclasses
import enum
from dataclasses import dataclass
from typing import Optional, Union

from ..config import (
    DEFAULT_HASHING_ITERATIONS,
    DEFAULT_SALTING_ITERATIONS,
    DIGEST_SIZES,
    HASHING_SHA256,
    HASHING_SHA512,
)
from ..errors import InvalidSettingsError
from ..invariants import (
    validate_alphabet,
    validate_chunk_size,
    validate_iterations,
    validate_max_length,
)


class HashingAlgorithm(str, enum.Enum):
    """Cryptographic hash applied to the salted bytes."""

    SHA256 = HASHING_SHA256
    SHA512 = HASHING_SHA512

    @property
    def digest_size(self) -> int:
        """Digest size in bytes."""
        return DIGEST_SIZES[self.value]


# ==================== Digest variants ====================


@dataclass(frozen=True)
class Hex:
    """Lowercase hexadecimal, two characters per byte."""


@dataclass(frozen=True)
class Base64:
    """Standard base64 alphabet with '=' padding."""


@dataclass(frozen=True)
class Base64Url:
    """URL-safe base64 alphabet, no padding."""


@dataclass(frozen=True)
class CustomAlphabet:
    """
    Arbitrary-base numeral over a caller-supplied alphabet.
    
    The alphabet is sorted before use, so only its set of characters
    (with multiplicity) matters, not the order given.
    """

    alphabet: str

    def __post_init__(self):
        validate_alphabet(self.alphabet)


DigestAlgorithm = Union[Hex, Base64, Base64Url, CustomAlphabet]
DIGEST_VARIANTS = (Hex, Base64, Base64Url, CustomAlphabet)


# ==================== Salting variants ====================


@dataclass(frozen=True)
class Prepend:
    """Salt bytes followed by data bytes."""


@dataclass(frozen=True)
class Append:
    """Data bytes followed by salt bytes."""


@dataclass(frozen=True)
class Zip:
    """
    Interleave salt and data in chunks of ``chunk_size`` bytes.
    Pairing stops at the shorter input; leftover chunks are dropped.
    """

    chunk_size: int

    def __post_init__(self):
        validate_chunk_size(self.chunk_size)


SaltingAlgorithm = Union[Prepend, Append, Zip]
SALTING_VARIANTS = (Prepend, Append, Zip)


# ==================== Aggregate ====================


@dataclass(frozen=True)
class AlgorithmSettings:
    """
    Complete parameter set for one derivation.
    
    Attributes:
        hashing: Hash function applied after salting
        digest: Encoding that renders the hash as text
        salting: Strategy combining passphrase and service
        max_length: Optional cap on output length (characters)
        hashing_iterations: Hash passes; 0 behaves as 1
        salting_iterations: Salting passes; 0 behaves as 1
    """

    hashing: HashingAlgorithm = HashingAlgorithm.SHA256
    digest: DigestAlgorithm = Base64()
    salting: SaltingAlgorithm = Prepend()
    max_length: Optional[int] = None
    hashing_iterations: int = DEFAULT_HASHING_ITERATIONS
    salting_iterations: int = DEFAULT_SALTING_ITERATIONS

    def __post_init__(self):
        if not isinstance(self.hashing, HashingAlgorithm):
            try:
                object.__setattr__(self, 'hashing', HashingAlgorithm(self.hashing))
            except ValueError:
                raise InvalidSettingsError(f"Unknown hashing algorithm: {self.hashing!r}")
        
        if not isinstance(self.digest, DIGEST_VARIANTS):
            raise InvalidSettingsError(f"Unknown digest algorithm: {self.digest!r}")
        
        if not isinstance(self.salting, SALTING_VARIANTS):
            raise InvalidSettingsError(f"Unknown salting algorithm: {self.salting!r}")
        
        validate_max_length(self.max_length)
        validate_iterations('hashing_iterations', self.hashing_iterations)
        validate_iterations('salting_iterations', self.salting_iterations)

    def replace(self, **changes) -> 'AlgorithmSettings':
        """Return a copy with the given fields changed (validated again)."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_string(cls, text: Union[str, bytes]) -> 'AlgorithmSettings':
        """
        Parse settings from their serialized text form (str or UTF-8 bytes).
        
        Raises:
            SettingsDeserializationError: If text is not valid settings
        """
        from .serialization import deserialize
        return deserialize(text)

    def to_string(self) -> str:
        """Serialize to canonical settings text."""
        from .serialization import serialize
        return serialize(self)

    def __str__(self) -> str:
        return self.to_string()
