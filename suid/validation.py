"""
Input normalization and validation for the encoder and decoder.

Every option is resolved here, once, before any encoding happens:
dates become integer milliseconds, byte counts become fresh random bytes
and defaults are read from settings at call time.
"""
import secrets
import time
from datetime import date, datetime, timezone
from typing import Optional

from suid import codec
from suid.config import settings
from suid.errors import (
    InvalidAlphabet,
    InvalidInput,
    InvalidRandomSource,
    InvalidSeparator,
    InvalidTimestamp,
)
from suid.models import EPOCH, ONE_MS, Alphabet, SUIDOptions

TIMESTAMP_BYTES = 6
MIN_RANDOM_BYTES = 2

# Last millisecond a datetime can hold; below 2**48 so it always fits TIMESTAMP_BYTES
MAX_TIMESTAMP = (datetime.max.replace(tzinfo=timezone.utc) - EPOCH) // ONE_MS


def to_milliseconds(value: date) -> int:
    """Milliseconds since the Unix epoch. Naive values are taken as UTC."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // ONE_MS


def to_datetime(milliseconds: int) -> datetime:
    return EPOCH + milliseconds * ONE_MS


def normalize_timestamp(value=None) -> int:
    if value is None:
        return int(time.time() * 1000)
    if isinstance(value, date):
        value = to_milliseconds(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTimestamp(
            f"Timestamp must be a datetime or positive integer, got {type(value).__name__}."
        )
    if not 1 <= value <= MAX_TIMESTAMP:
        raise InvalidTimestamp(f"Timestamp must be between 1 and {MAX_TIMESTAMP}, got {value}.")
    return value


def normalize_random_source(value=None) -> bytes:
    """
    Resolve the random source to bytes.
    An integer N means N bytes from the secrets module.
    """
    if value is None:
        value = settings.SUID_RANDOM_BYTES
    if isinstance(value, int) and not isinstance(value, bool):
        if value < MIN_RANDOM_BYTES:
            raise InvalidRandomSource(
                f"Random byte count must be at least {MIN_RANDOM_BYTES}, got {value}."
            )
        value = secrets.token_bytes(value)
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidRandomSource(
            f"Random source must be bytes or a byte count, got {type(value).__name__}."
        )
    value = bytes(value)
    if len(value) < MIN_RANDOM_BYTES:
        raise InvalidRandomSource(
            f"Random source must hold at least {MIN_RANDOM_BYTES} bytes, got {len(value)}."
        )
    return value


def normalize_alphabet(value=None) -> Alphabet:
    if value is None:
        value = settings.SUID_ALPHABET
    try:
        return Alphabet(value)
    except ValueError as e:
        raise InvalidAlphabet(f"Unknown alphabet: {value!r}") from e


def check_separator(separator: Optional[str], alphabet: Alphabet) -> str:
    if separator is None:
        separator = settings.SUID_SEPARATOR
    if not isinstance(separator, str) or len(separator) != 1:
        raise InvalidSeparator(f"Separator must be a single character, got {separator!r}.")
    if alphabet is Alphabet.URL_SAFE and separator == "-":
        raise InvalidSeparator('"-" is not an allowed separator for the url-safe alphabet.')
    if separator == codec.PADDING or separator in codec.charset(alphabet):
        raise InvalidSeparator(
            f"{separator!r} is part of the {alphabet.value} alphabet and cannot separate segments."
        )
    return separator


def check_input(suid) -> str:
    if not isinstance(suid, str) or not suid:
        raise InvalidInput("suid must be a non-empty string.")
    return suid


def resolve_options(
    timestamp=None,
    random_source=None,
    alphabet=None,
    separator: Optional[str] = None,
) -> SUIDOptions:
    """Normalize and validate all encoder options."""
    resolved_timestamp = normalize_timestamp(timestamp)
    random_bits = normalize_random_source(random_source)
    resolved_alphabet = normalize_alphabet(alphabet)
    return SUIDOptions(
        timestamp=resolved_timestamp,
        random_bits=random_bits,
        alphabet=resolved_alphabet,
        separator=check_separator(separator, resolved_alphabet),
    )
