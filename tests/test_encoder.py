"""
Tests for SUID generation.
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from suid import validation
from suid.config import settings
from suid.decoder import parse_suid
from suid.encoder import encode_timestamp, generate_suid
from suid.errors import (
    InvalidAlphabet,
    InvalidRandomSource,
    InvalidSeparator,
    InvalidTimestamp,
)
from suid.models import Alphabet

KNOWN_TIMESTAMP = 1734076800000  # 2024-12-13T08:00:00.000Z
KNOWN_BITS = bytes([236, 229, 72, 197, 74, 155, 111, 0, 144, 245, 43, 1])
KNOWN_SUID = "AZO/CBwA.7OVIxUqb.bwCQ9SsB"


def test_known_vector():
    """Fixed input should have known output."""
    assert generate_suid(timestamp=KNOWN_TIMESTAMP, random_source=KNOWN_BITS) == KNOWN_SUID


def test_known_vector_is_stable():
    """Repeated calls with the same input give the same string."""
    first = generate_suid(timestamp=KNOWN_TIMESTAMP, random_source=KNOWN_BITS)
    second = generate_suid(timestamp=KNOWN_TIMESTAMP, random_source=bytearray(KNOWN_BITS))
    assert first == second == KNOWN_SUID


def test_datetime_timestamp():
    """Aware and naive datetimes are converted to UTC milliseconds."""
    aware = datetime(2024, 12, 13, 8, tzinfo=timezone.utc)
    naive = datetime(2024, 12, 13, 8)
    shifted = datetime(2024, 12, 13, 10, tzinfo=timezone(timedelta(hours=2)))

    for value in (aware, naive, shifted):
        assert generate_suid(timestamp=value, random_source=KNOWN_BITS) == KNOWN_SUID


def test_date_timestamp_is_midnight_utc():
    midnight = int(datetime(2024, 12, 13, tzinfo=timezone.utc).timestamp() * 1000)
    assert generate_suid(timestamp=date(2024, 12, 13), random_source=KNOWN_BITS) == generate_suid(
        timestamp=midnight, random_source=KNOWN_BITS
    )


def test_encode_timestamp_is_six_bytes_big_endian():
    assert encode_timestamp(1) == b"\x00\x00\x00\x00\x00\x01"
    assert encode_timestamp(KNOWN_TIMESTAMP).hex() == "0193bf081c00"


def test_odd_length_split():
    """The first half gets the smaller share."""
    assert generate_suid(timestamp=1, random_source=b"\x01\x02\x03") == "AAAAAAAB.AQ.AgM"


def test_default_generation():
    """No arguments yields a parseable SUID with two separators."""
    suid = generate_suid()
    assert isinstance(suid, str)
    assert suid.count(".") == 2

    parsed = parse_suid(suid)
    assert len(parsed.random_bits) == 12
    assert parsed.alphabet is Alphabet.STANDARD
    assert parsed.separator == "."


def test_default_random_bits_are_fresh():
    """Default entropy is drawn per call."""
    suids = {generate_suid(timestamp=KNOWN_TIMESTAMP) for _ in range(20)}
    assert len(suids) == 20


def test_integer_random_source():
    """An integer random source generates that many random bytes."""
    parsed = parse_suid(generate_suid(random_source=8))
    assert len(parsed.random_bits) == 8


def test_integer_random_source_uses_secrets(monkeypatch):
    calls = []

    def fake_token_bytes(n):
        calls.append(n)
        return bytes(range(n))

    monkeypatch.setattr(validation.secrets, "token_bytes", fake_token_bytes)

    suid = generate_suid(timestamp=1, random_source=4)
    assert calls == [4]
    assert suid == "AAAAAAAB.AAE.AgM"


def test_url_safe_alphabet():
    """URL-safe output uses - and _ instead of + and /."""
    standard = generate_suid(timestamp=KNOWN_TIMESTAMP, random_source=b"\xfb\xff\xfb\xff")
    url_safe = generate_suid(
        timestamp=KNOWN_TIMESTAMP, random_source=b"\xfb\xff\xfb\xff", alphabet="url-safe"
    )
    assert standard == "AZO/CBwA.+/8.+/8"
    assert url_safe == "AZO_CBwA.-_8.-_8"


def test_alphabet_aliases():
    assert generate_suid(
        timestamp=KNOWN_TIMESTAMP, random_source=KNOWN_BITS, alphabet="base64url"
    ) == generate_suid(
        timestamp=KNOWN_TIMESTAMP, random_source=KNOWN_BITS, alphabet=Alphabet.URL_SAFE
    )


def test_custom_separator():
    suid = generate_suid(timestamp=KNOWN_TIMESTAMP, random_source=KNOWN_BITS, separator="~")
    assert suid == KNOWN_SUID.replace(".", "~")


def test_defaults_come_from_settings(monkeypatch):
    """Defaults are read from settings at call time."""
    monkeypatch.setattr(settings, "SUID_SEPARATOR", ":")
    monkeypatch.setattr(settings, "SUID_ALPHABET", "url-safe")
    monkeypatch.setattr(settings, "SUID_RANDOM_BYTES", 6)

    suid = generate_suid(timestamp=KNOWN_TIMESTAMP)
    assert suid.startswith("AZO_CBwA:")
    assert suid.count(":") == 2

    parsed = parse_suid(suid)
    assert len(parsed.random_bits) == 6
    assert parsed.alphabet is Alphabet.URL_SAFE


@pytest.mark.parametrize("timestamp", [-1, 0, True, 1.5, "1734076800000", validation.MAX_TIMESTAMP + 1])
def test_invalid_timestamp(timestamp):
    with pytest.raises(InvalidTimestamp):
        generate_suid(timestamp=timestamp)


def test_pre_epoch_datetime_is_invalid():
    with pytest.raises(InvalidTimestamp, match="between 1 and"):
        generate_suid(timestamp=datetime(1969, 12, 31, tzinfo=timezone.utc))


@pytest.mark.parametrize("random_source", [b"", b"\x01", 1, 0, -5, "abcd", [1, 2, 3]])
def test_invalid_random_source(random_source):
    with pytest.raises(InvalidRandomSource):
        generate_suid(random_source=random_source)


def test_dash_separator_with_url_safe():
    with pytest.raises(InvalidSeparator, match="url-safe"):
        generate_suid(alphabet="url-safe", separator="-")


def test_dash_separator_with_standard_is_allowed():
    suid = generate_suid(timestamp=KNOWN_TIMESTAMP, random_source=KNOWN_BITS, separator="-")
    assert suid == KNOWN_SUID.replace(".", "-")


@pytest.mark.parametrize("separator", ["", "..", "A", "9", "+", "/", "="])
def test_invalid_separator(separator):
    with pytest.raises(InvalidSeparator):
        generate_suid(separator=separator)


def test_invalid_alphabet():
    with pytest.raises(InvalidAlphabet, match="base32"):
        generate_suid(alphabet="base32")


def test_errors_are_value_errors():
    """All SUID errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        generate_suid(timestamp=-1)
