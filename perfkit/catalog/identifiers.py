"""Random string and identifier helpers.

Used to keep variant SKUs and product handles unique across generation
runs. Two families of helpers live here:

- non-cryptographic helpers (``generate_random_string``,
  ``generate_custom_random_string``, ``generate_unique_slug``) which draw
  from a ``random.Random`` and accept an injected ``rng`` for reproducible
  tests;
- secure helpers (``generate_secure_random_string``, ``generate_hex_string``,
  ``generate_base64_string``) which always read from ``secrets``.
"""

import base64
import math
import random
import secrets
import time
import uuid

from perfkit.domain.exceptions import InvalidArgumentError


# ============================================================================
# Character Sets
# ============================================================================


class CHARSET:
    """Character sets used by the generators."""

    UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
    NUMBERS = "0123456789"
    ALPHANUMERIC = UPPERCASE + LOWERCASE + NUMBERS
    HEX = "0123456789ABCDEF"
    URL_SAFE = ALPHANUMERIC + "-_"
    SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


_rng = random.Random()


def _now_millis() -> int:
    return int(time.time() * 1000)


# ============================================================================
# Non-cryptographic Helpers
# ============================================================================


def generate_random_string(
    length: int,
    include_uppercase: bool = True,
    include_lowercase: bool = True,
    include_numbers: bool = True,
    rng: random.Random | None = None,
) -> str:
    """Generate a random alphanumeric string.

    Args:
        length: Number of characters to produce.
        include_uppercase: Include A-Z.
        include_lowercase: Include a-z.
        include_numbers: Include 0-9.
        rng: Random source (module default if not provided).

    Returns:
        String of exactly ``length`` characters from the enabled classes.

    Raises:
        InvalidArgumentError: If no character class is enabled.

    Example:
        generate_random_string(8)  # "aB3xY9k2"
        generate_random_string(6, True, False, True)  # "A7B9C2"
    """
    charset = ""
    if include_uppercase:
        charset += CHARSET.UPPERCASE
    if include_lowercase:
        charset += CHARSET.LOWERCASE
    if include_numbers:
        charset += CHARSET.NUMBERS

    if not charset:
        raise InvalidArgumentError(
            "charset", "at least one character type must be included"
        )

    return generate_custom_random_string(length, charset, rng=rng)


def generate_custom_random_string(
    length: int,
    charset: str,
    rng: random.Random | None = None,
) -> str:
    """Generate a random string over a caller-supplied character set.

    Args:
        length: Number of characters to produce.
        charset: Characters to sample from (uniformly, with repetition).
        rng: Random source (module default if not provided).

    Returns:
        Random string of ``length`` characters.

    Raises:
        InvalidArgumentError: If ``charset`` is empty.
    """
    if not charset:
        raise InvalidArgumentError("charset", "charset cannot be empty")

    rng = rng or _rng
    return "".join(rng.choice(charset) for _ in range(length))


def generate_unique_slug(
    prefix: str = "item",
    length: int = 8,
    rng: random.Random | None = None,
) -> str:
    """Generate a URL-friendly slug qualified by the current time.

    Args:
        prefix: Leading slug segment.
        length: Length of the random part (lowercase letters and digits).
        rng: Random source (module default if not provided).

    Returns:
        Slug such as ``"product-1729123456789-ab3xy9k2"``.
    """
    random_part = generate_random_string(length, False, True, True, rng=rng)
    return f"{prefix}-{_now_millis()}-{random_part}"


# ============================================================================
# Secure Helpers
# ============================================================================


def generate_secure_random_string(length: int) -> str:
    """Generate a random alphanumeric string from a secure byte source.

    Each byte is reduced modulo 62 onto ``CHARSET.ALPHANUMERIC``. Since 256
    is not a multiple of 62, the first 8 symbols are slightly more likely
    than the rest. This skew is accepted.

    Args:
        length: Number of characters to produce.

    Returns:
        Random string of ``length`` characters.
    """
    charset = CHARSET.ALPHANUMERIC
    return "".join(charset[b % len(charset)] for b in secrets.token_bytes(length))


def generate_unique_id() -> str:
    """Generate a UUID v4 string (36 characters with dashes)."""
    return str(uuid.uuid4())


def generate_short_unique_id(length: int = 6) -> str:
    """Generate a short identifier of the form ``<unix millis>_<random>``.

    Args:
        length: Length of the random part.

    Returns:
        Identifier such as ``"1729123456789_aB3xY9"``.
    """
    return f"{_now_millis()}_{generate_secure_random_string(length)}"


def generate_hex_string(length: int) -> str:
    """Generate a lowercase hex string.

    Args:
        length: Number of hex characters (must be even).

    Returns:
        Hex string built from ``length / 2`` random bytes.

    Raises:
        InvalidArgumentError: If ``length`` is odd.
    """
    if length % 2 != 0:
        raise InvalidArgumentError("length", "hex string length must be even")
    return secrets.token_hex(length // 2)


def generate_base64_string(length: int) -> str:
    """Generate a base64-alphabet string of ``length`` characters.

    Encodes ``ceil(length * 3 / 4)`` random bytes and truncates. The last
    characters may come from a partial base64 group, so only the length is
    guaranteed, not group alignment.
    """
    raw = secrets.token_bytes(math.ceil(length * 3 / 4))
    return base64.b64encode(raw).decode("ascii")[:length]


# ============================================================================
# Session Unique Strings
# ============================================================================


# Digits in a millisecond timestamp until the year 2286.
TIMESTAMP_LENGTH = 13


class UniqueStringGenerator:
    """Issues strings that were not issued before by the same instance.

    The set of issued strings grows for the lifetime of the instance and
    is only cleared by ``reset()``. Instances are not thread-safe; share
    one between threads only behind a lock owned by the caller.

    Example usage:
        generator = UniqueStringGenerator()
        sku_suffix = generator.generate(8)
    """

    def __init__(self) -> None:
        self._used: set[str] = set()

    def generate(self, length: int, max_attempts: int = 100) -> str:
        """Generate a string unique for this generator.

        Args:
            length: Length of the random string.
            max_attempts: Candidates to try before falling back.

        Returns:
            A string never returned before by this instance. After
            ``max_attempts`` collisions, a timestamp-qualified id from
            ``generate_short_unique_id`` is returned instead, with a random
            part of ``length - 13`` characters (clamped to zero).
        """
        for _ in range(max_attempts):
            candidate = generate_secure_random_string(length)
            if candidate not in self._used:
                self._used.add(candidate)
                return candidate

        fallback = generate_short_unique_id(max(length - TIMESTAMP_LENGTH, 0))
        self._used.add(fallback)
        return fallback

    def reset(self) -> None:
        """Forget all issued strings."""
        self._used.clear()

    def count(self) -> int:
        """Get number of issued strings."""
        return len(self._used)


def generate_multiple_unique_strings(
    count: int,
    length: int,
    generator: UniqueStringGenerator | None = None,
) -> list[str]:
    """Generate several strings from one unique-string generator.

    Args:
        count: Number of strings.
        length: Length of each string.
        generator: Generator that tracks issued strings. A fresh one,
            owned by this call, is used if not provided.

    Returns:
        List of ``count`` strings.
    """
    if generator is None:
        generator = UniqueStringGenerator()
    return [generator.generate(length) for _ in range(count)]
