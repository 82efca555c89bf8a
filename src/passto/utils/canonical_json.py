"""
Canonical JSON for settings text.
Equal settings always serialize to the same string, so saved settings files
can be compared byte for byte.
"""

import json
from typing import Any, Union

from ..config import JSON_SEPARATORS, JSON_SORT_KEYS, JSON_ENSURE_ASCII


def canonicalize(obj: Any) -> str:
    """
    Render a settings dictionary as canonical JSON.
    
    Keys are sorted and no whitespace is emitted. Custom alphabets keep
    non-ASCII characters as they are instead of ``\\u`` escapes.
    
    Raises:
        TypeError: If a value has no JSON form
    """
    try:
        return json.dumps(
            obj,
            separators=JSON_SEPARATORS,
            sort_keys=JSON_SORT_KEYS,
            ensure_ascii=JSON_ENSURE_ASCII,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise TypeError(f"Settings value not JSON-serializable: {e}")


def parse(text: Union[str, bytes]) -> Any:
    """
    Parse settings text, given as a string or as UTF-8 bytes read from a file.
    
    Raises:
        ValueError: If the text is not UTF-8 or not JSON, or nests too deeply
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode('utf-8')
        except UnicodeDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
    
    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ValueError(f"Invalid JSON: {e}")
