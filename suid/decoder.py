"""
SUID parsing.
"""
import logging
from typing import Optional

from suid import codec
from suid.errors import InvalidInput
from suid.models import ParsedSUID
from suid.validation import (
    MAX_TIMESTAMP,
    MIN_RANDOM_BYTES,
    TIMESTAMP_BYTES,
    check_input,
    check_separator,
    normalize_alphabet,
    to_datetime,
)

logger = logging.getLogger(__name__)

SEGMENT_COUNT = 3


def parse_suid(suid, alphabet=None, separator: Optional[str] = None) -> ParsedSUID:
    """
    Parse a SUID back into the values used to generate it.

    alphabet and separator must match the ones used at generation time;
    they default to the same settings as generate_suid().
    Any structural mismatch raises InvalidInput, so the result always
    re-encodes to the identical string.
    """
    suid = check_input(suid)
    alphabet = normalize_alphabet(alphabet)
    separator = check_separator(separator, alphabet)

    segments = suid.split(separator)
    if len(segments) != SEGMENT_COUNT:
        raise InvalidInput(
            f"Expected {SEGMENT_COUNT} segments separated by {separator!r}, got {len(segments)}."
        )

    try:
        time_bits, bits_a, bits_b = [codec.decode(seg, alphabet) for seg in segments]
    except ValueError as e:
        logger.debug(f"Undecodable SUID {suid!r}: {e}", extra={"suid": suid, "alphabet": alphabet.value})
        raise InvalidInput(f"Malformed {alphabet.value} base64 segment: {e}") from e

    if len(time_bits) != TIMESTAMP_BYTES:
        raise InvalidInput(
            f"Timestamp segment must decode to {TIMESTAMP_BYTES} bytes, got {len(time_bits)}."
        )
    milliseconds = int.from_bytes(time_bits, byteorder="big")
    if not 1 <= milliseconds <= MAX_TIMESTAMP:
        raise InvalidInput(f"Timestamp {milliseconds} is out of range.")

    random_bits = bits_a + bits_b
    if len(random_bits) < MIN_RANDOM_BYTES:
        raise InvalidInput(
            f"Random bits must hold at least {MIN_RANDOM_BYTES} bytes, got {len(random_bits)}."
        )
    if len(bits_a) != len(random_bits) // 2:
        raise InvalidInput(
            f"Random bits split {len(bits_a)}/{len(bits_b)} does not match a generated SUID."
        )

    return ParsedSUID(
        timestamp=to_datetime(milliseconds),
        random_bits=random_bits,
        alphabet=alphabet,
        separator=separator,
    )
