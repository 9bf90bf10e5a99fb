"""
SUID generation.

A SUID is three unpadded base64 segments joined by a separator:
the 6-byte big-endian millisecond timestamp, then the two halves of the
random bits, split at len // 2.
"""
import logging
from typing import Optional

from suid import codec
from suid.models import SUIDOptions
from suid.validation import TIMESTAMP_BYTES, resolve_options

logger = logging.getLogger(__name__)


def encode_timestamp(milliseconds: int) -> bytes:
    return milliseconds.to_bytes(TIMESTAMP_BYTES, byteorder="big")


def encode_options(options: SUIDOptions) -> str:
    """Encode already-resolved options."""
    mid = options.mid
    segments = (
        encode_timestamp(options.timestamp),
        options.random_bits[:mid],
        options.random_bits[mid:],
    )
    suid = options.separator.join(codec.encode(seg, options.alphabet) for seg in segments)
    logger.debug(
        f"Generated SUID {suid}",
        extra={"suid": suid, "alphabet": options.alphabet.value},
    )
    return suid


def generate_suid(
    timestamp=None,
    random_source=None,
    alphabet=None,
    separator: Optional[str] = None,
) -> str:
    """
    Generate a SUID.

    Args:
        timestamp: datetime/date or positive integer milliseconds. Defaults to now.
        random_source: bytes (at least 2) or a byte count to draw from the
            secrets module. Defaults to settings.SUID_RANDOM_BYTES fresh bytes.
        alphabet: "standard" or "url-safe". Defaults to settings.SUID_ALPHABET.
        separator: single character. Defaults to settings.SUID_SEPARATOR.

    Raises:
        InvalidTimestamp, InvalidRandomSource, InvalidAlphabet, InvalidSeparator
    """
    options = resolve_options(
        timestamp=timestamp,
        random_source=random_source,
        alphabet=alphabet,
        separator=separator,
    )
    return encode_options(options)
