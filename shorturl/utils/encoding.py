import secrets
import string

# Base62 alphabet, case-sensitive
ALPHABET = string.ascii_letters + string.digits
SHORT_CODE_LENGTH = 7
MIN_CODE_LENGTH = 4
MAX_CODE_LENGTH = 16


def generate_short_code(length: int = SHORT_CODE_LENGTH) -> str:
    """Generate a cryptographically random base62 code.

    Uniqueness is not guaranteed here; the store rejects collisions and the
    service retries with a fresh code.
    """
    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


def is_valid_short_code(code: str) -> bool:
    """True if ``code`` could have been produced by ``generate_short_code``."""
    if not MIN_CODE_LENGTH <= len(code) <= MAX_CODE_LENGTH:
        return False
    return all(ch in ALPHABET for ch in code)
