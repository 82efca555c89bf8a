"""
Settings (de)serialization.

Settings travel as a JSON object whose algorithm fields are either a plain
tag string or, for variants with a parameter, a single-key object mapping
the tag to that parameter::

    {"digest":{"custom-alphabet":"0123456789abcdef"},"hashing":"sha512",
     "hashing_iterations":1,"max_length":null,"salting":{"zip":4},
     "salting_iterations":1}
"""

from typing import Any, Dict, Tuple, Union

from ..config import (
    DEFAULT_HASHING_ITERATIONS,
    DEFAULT_SALTING_ITERATIONS,
    DIGEST_BASE64,
    DIGEST_BASE64_URL,
    DIGEST_CUSTOM_ALPHABET,
    DIGEST_HEX,
    LEGACY_TAGS,
    SALTING_APPEND,
    SALTING_PREPEND,
    SALTING_ZIP,
)
from ..errors import InvalidSettingsError, SettingsDeserializationError
from ..utils.canonical_json import canonicalize, parse
from .model import (
    AlgorithmSettings,
    Append,
    Base64,
    Base64Url,
    CustomAlphabet,
    DigestAlgorithm,
    HashingAlgorithm,
    Hex,
    Prepend,
    SaltingAlgorithm,
    Zip,
)


# ==================== Encoding ====================


def _digest_to_value(digest: DigestAlgorithm) -> Any:
    if isinstance(digest, Hex):
        return DIGEST_HEX
    if isinstance(digest, Base64):
        return DIGEST_BASE64
    if isinstance(digest, Base64Url):
        return DIGEST_BASE64_URL
    if isinstance(digest, CustomAlphabet):
        return {DIGEST_CUSTOM_ALPHABET: digest.alphabet}
    raise InvalidSettingsError(f"Unknown digest algorithm: {digest!r}")


def _salting_to_value(salting: SaltingAlgorithm) -> Any:
    if isinstance(salting, Prepend):
        return SALTING_PREPEND
    if isinstance(salting, Append):
        return SALTING_APPEND
    if isinstance(salting, Zip):
        return {SALTING_ZIP: salting.chunk_size}
    raise InvalidSettingsError(f"Unknown salting algorithm: {salting!r}")


def settings_to_dict(settings: AlgorithmSettings) -> Dict[str, Any]:
    """Convert settings to a JSON-compatible dictionary."""
    return {
        'hashing': settings.hashing.value,
        'digest': _digest_to_value(settings.digest),
        'salting': _salting_to_value(settings.salting),
        'max_length': settings.max_length,
        'hashing_iterations': settings.hashing_iterations,
        'salting_iterations': settings.salting_iterations,
    }


def serialize(settings: AlgorithmSettings) -> str:
    """
    Serialize settings to canonical JSON text.
    
    Args:
        settings: Settings to serialize
        
    Returns:
        JSON string with sorted keys and no whitespace
    """
    return canonicalize(settings_to_dict(settings))


# ==================== Decoding ====================


def _normalize_tag(tag: str) -> str:
    return LEGACY_TAGS.get(tag, tag)


def _split_variant(field: str, value: Any) -> Tuple[str, Any]:
    """
    Split a serialized variant into (tag, parameter).
    Plain strings carry no parameter.
    """
    if isinstance(value, str):
        return _normalize_tag(value), None
    
    if isinstance(value, dict) and len(value) == 1:
        (tag, parameter), = value.items()
        if isinstance(tag, str):
            return _normalize_tag(tag), parameter
    
    raise InvalidSettingsError(
        f"Field {field} must be a tag string or a single-key object, got {value!r}"
    )


def _hashing_from_value(value: Any) -> HashingAlgorithm:
    if not isinstance(value, str):
        raise InvalidSettingsError(f"Field hashing must be a string, got {value!r}")
    
    try:
        return HashingAlgorithm(_normalize_tag(value))
    except ValueError:
        raise InvalidSettingsError(f"Unknown hashing algorithm: {value!r}")


def _digest_from_value(value: Any) -> DigestAlgorithm:
    tag, parameter = _split_variant('digest', value)
    
    if tag == DIGEST_CUSTOM_ALPHABET:
        if parameter is None:
            raise InvalidSettingsError("Digest custom-alphabet requires an alphabet")
        return CustomAlphabet(parameter)
    
    simple = {
        DIGEST_HEX: Hex,
        DIGEST_BASE64: Base64,
        DIGEST_BASE64_URL: Base64Url,
    }
    if tag in simple and parameter is None:
        return simple[tag]()
    
    raise InvalidSettingsError(f"Unknown digest algorithm: {value!r}")


def _salting_from_value(value: Any) -> SaltingAlgorithm:
    tag, parameter = _split_variant('salting', value)
    
    if tag == SALTING_ZIP:
        if parameter is None:
            raise InvalidSettingsError("Salting zip requires a chunk size")
        return Zip(parameter)
    
    simple = {
        SALTING_PREPEND: Prepend,
        SALTING_APPEND: Append,
    }
    if tag in simple and parameter is None:
        return simple[tag]()
    
    raise InvalidSettingsError(f"Unknown salting algorithm: {value!r}")


def settings_from_dict(data: Dict[str, Any]) -> AlgorithmSettings:
    """
    Build settings from a parsed dictionary.
    Missing fields take their defaults; unknown fields are ignored.
    
    Raises:
        InvalidSettingsError: If a field is malformed
    """
    if not isinstance(data, dict):
        raise InvalidSettingsError(
            f"Settings must be a JSON object, got {type(data).__name__}"
        )
    
    fields: Dict[str, Any] = {}
    
    if data.get('hashing') is not None:
        fields['hashing'] = _hashing_from_value(data['hashing'])
    if data.get('digest') is not None:
        fields['digest'] = _digest_from_value(data['digest'])
    if data.get('salting') is not None:
        fields['salting'] = _salting_from_value(data['salting'])
    
    fields['max_length'] = data.get('max_length')
    fields['hashing_iterations'] = data.get('hashing_iterations', DEFAULT_HASHING_ITERATIONS)
    fields['salting_iterations'] = data.get('salting_iterations', DEFAULT_SALTING_ITERATIONS)
    
    return AlgorithmSettings(**fields)


def deserialize(text: Union[str, bytes]) -> AlgorithmSettings:
    """
    Parse settings text.
    
    Args:
        text: JSON settings text, or its UTF-8 bytes
        
    Returns:
        AlgorithmSettings
        
    Raises:
        SettingsDeserializationError: If text is malformed or describes
            invalid settings; the underlying failure is chained
    """
    try:
        return settings_from_dict(parse(text))
    except (ValueError, TypeError) as e:
        raise SettingsDeserializationError(f"Cannot deserialize settings: {e}") from e
