"""
Passto Public API - deterministic password derivation

This is the main entry point for the Passto system.
Every derivation flows Salting -> Hashing -> Digest -> truncation.
"""

import logging
from typing import Optional

from .digest import encode_digest
from .hashing import hash_repeatedly
from .invariants import effective_iterations
from .salting import salt
from .settings.model import AlgorithmSettings

logger = logging.getLogger(__name__)


def _require_bytes(name: str, value) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
    return bytes(value)


def truncate(text: str, max_length: Optional[int]) -> str:
    """Keep at most ``max_length`` characters (code points) of text."""
    if max_length is not None and len(text) > max_length:
        return text[:max_length]
    return text


def derive(
    passphrase: bytes,
    service: bytes,
    settings: Optional[AlgorithmSettings] = None,
) -> str:
    """
    Derive the password for a service from a passphrase.
    
    Args:
        passphrase: Secret bytes, used as the salt
        service: Service label bytes
        settings: Algorithm settings; defaults when omitted
        
    Returns:
        Derived password string
        
    Raises:
        CustomAlphabetTooShortError: If the custom alphabet is too short
        InvalidSettingsError: If settings carry an unusable parameter
        TypeError: If passphrase or service are not bytes
    """
    passphrase = _require_bytes('passphrase', passphrase)
    service = _require_bytes('service', service)
    if settings is None:
        settings = AlgorithmSettings()
    
    salting_passes = effective_iterations(settings.salting_iterations)
    hashing_passes = effective_iterations(settings.hashing_iterations)
    
    logger.debug(
        "Deriving with %s, %d salting pass(es), %d hashing pass(es)",
        settings.hashing.value, salting_passes, hashing_passes,
    )
    
    # First pass salts the service; later passes re-salt the previous output
    salted = salt(settings.salting, service, passphrase)
    for _ in range(1, salting_passes):
        salted = salt(settings.salting, salted, passphrase)
    
    hashed = hash_repeatedly(settings.hashing, salted, hashing_passes)
    
    digested = encode_digest(settings.digest, hashed)
    
    result = truncate(digested, settings.max_length)
    if len(result) != len(digested):
        logger.debug("Truncated output from %d to %d characters", len(digested), len(result))
    
    return result


# Name used by the original library
encode = derive


class PasstoEngine:
    """
    Derivation engine bound to one set of settings.
    
    Front ends keep an engine per settings selection and call
    :meth:`derive` once per interaction.
    """
    
    def __init__(self, settings: Optional[AlgorithmSettings] = None):
        """
        Initialize engine.
        
        Args:
            settings: Algorithm settings; defaults when omitted
        """
        self.settings = settings if settings is not None else AlgorithmSettings()
    
    @classmethod
    def from_settings_string(cls, text: str) -> 'PasstoEngine':
        """
        Create an engine from serialized settings.
        
        Raises:
            SettingsDeserializationError: If text is not valid settings
        """
        return cls(AlgorithmSettings.from_string(text))
    
    def derive(self, passphrase: bytes, service: bytes) -> str:
        """Derive the password for a service with this engine's settings."""
        return derive(passphrase, service, self.settings)
    
    def settings_string(self) -> str:
        """Serialized settings, for saving and restoring."""
        return self.settings.to_string()
