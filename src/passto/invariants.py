"""
Parameter validation for settings and pipeline inputs.
These checks reject values that have no defined derivation semantics.
"""

from typing import Optional

from .errors import InvalidSettingsError


def _is_int(value) -> bool:
    # bool is an int subclass but never a meaningful count
    return isinstance(value, int) and not isinstance(value, bool)


def validate_chunk_size(chunk_size: int):
    """
    Validate a Zip salting chunk size.
    
    Args:
        chunk_size: Number of bytes per interleaved chunk
        
    Raises:
        InvalidSettingsError: If chunk size is not a positive integer
    """
    if not _is_int(chunk_size):
        raise InvalidSettingsError(
            f"Zip chunk size must be an integer, got {type(chunk_size).__name__}"
        )
    
    if chunk_size < 1:
        raise InvalidSettingsError(f"Zip chunk size must be at least 1, got {chunk_size}")


def validate_iterations(name: str, iterations: int):
    """
    Validate an iteration count.
    Zero is accepted and behaves like a single pass.
    
    Args:
        name: Field name, used in the error message
        iterations: Iteration count
        
    Raises:
        InvalidSettingsError: If count is negative or not an integer
    """
    if not _is_int(iterations):
        raise InvalidSettingsError(
            f"{name} must be an integer, got {type(iterations).__name__}"
        )
    
    if iterations < 0:
        raise InvalidSettingsError(f"{name} must not be negative, got {iterations}")


def validate_max_length(max_length: Optional[int]):
    """
    Validate the optional output length cap.
    
    Args:
        max_length: Maximum output length or None
        
    Raises:
        InvalidSettingsError: If set and not a positive integer
    """
    if max_length is None:
        return
    
    if not _is_int(max_length):
        raise InvalidSettingsError(
            f"max_length must be an integer, got {type(max_length).__name__}"
        )
    
    if max_length < 1:
        raise InvalidSettingsError(f"max_length must be at least 1, got {max_length}")


def validate_alphabet(alphabet: str):
    """
    Validate the type of a custom alphabet.
    Length is checked at encoding time.
    
    Raises:
        InvalidSettingsError: If alphabet is not a string
    """
    if not isinstance(alphabet, str):
        raise InvalidSettingsError(
            f"Custom alphabet must be a string, got {type(alphabet).__name__}"
        )


def effective_iterations(iterations: int) -> int:
    """Number of passes actually performed; the pipeline always runs once."""
    return max(iterations, 1)
