"""
Configuration constants for Passto.
These are immutable system constants, not runtime configuration.
"""

# Hashing
HASHING_SHA256 = "sha256"
HASHING_SHA512 = "sha512"
DIGEST_SIZES = {
    HASHING_SHA256: 32,
    HASHING_SHA512: 64,
}

# Digest (output encoding) tags
DIGEST_HEX = "hex"
DIGEST_BASE64 = "base64"
DIGEST_BASE64_URL = "base64-url"
DIGEST_CUSTOM_ALPHABET = "custom-alphabet"
MIN_ALPHABET_LENGTH = 16

# Salting tags
SALTING_PREPEND = "prepend"
SALTING_APPEND = "append"
SALTING_ZIP = "zip"
DEFAULT_ZIP_CHUNK_SIZE = 1

# Tag spellings written by the original settings format
LEGACY_TAGS = {
    "Sha256": HASHING_SHA256,
    "Sha512": HASHING_SHA512,
    "Hex": DIGEST_HEX,
    "Base64": DIGEST_BASE64,
    "Base64Url": DIGEST_BASE64_URL,
    "CustomAlphabet": DIGEST_CUSTOM_ALPHABET,
    "Prepend": SALTING_PREPEND,
    "Append": SALTING_APPEND,
    "Zip": SALTING_ZIP,
}

# Iteration defaults
DEFAULT_HASHING_ITERATIONS = 1
DEFAULT_SALTING_ITERATIONS = 1

# Canonical JSON settings
JSON_SEPARATORS = (',', ':')  # No whitespace
JSON_SORT_KEYS = True
JSON_ENSURE_ASCII = False

# CLI
RANDOM_SALT_BYTES = 32
