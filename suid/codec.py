"""
Unpadded base64 codec over the standard library, in two alphabets.
"""
import base64
import string

from suid.models import Alphabet

PADDING = "="

_COMMON_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits
_CHARSETS = {
    Alphabet.STANDARD: _COMMON_CHARS + "+/",
    Alphabet.URL_SAFE: _COMMON_CHARS + "-_",
}


def charset(alphabet: Alphabet) -> str:
    """Characters a segment may contain in the given alphabet."""
    return _CHARSETS[alphabet]


def encode(data: bytes, alphabet: Alphabet = Alphabet.STANDARD) -> str:
    if alphabet is Alphabet.URL_SAFE:
        encoded = base64.urlsafe_b64encode(data)
    else:
        encoded = base64.b64encode(data)
    return encoded.decode("ascii").rstrip(PADDING)


def decode(text: str, alphabet: Alphabet = Alphabet.STANDARD) -> bytes:
    """
    Decode unpadded base64 text.

    Raises ValueError (binascii.Error for malformed lengths) when the text
    holds characters outside the alphabet or is not the canonical encoding
    of its bytes, e.g. non-zero trailing bits.
    """
    allowed = charset(alphabet)
    bad = sorted({c for c in text if c not in allowed})
    if bad:
        raise ValueError(f"Characters not in {alphabet.value} alphabet: {''.join(bad)!r}")

    padded = text + PADDING * (-len(text) % 4)
    altchars = b"-_" if alphabet is Alphabet.URL_SAFE else None
    data = base64.b64decode(padded, altchars=altchars, validate=True)

    if encode(data, alphabet) != text:
        raise ValueError(f"Non-canonical base64 segment: {text!r}")
    return data
