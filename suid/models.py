"""
Pydantic models for SUID options and parsed results.
"""
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)


class Alphabet(str, Enum):
    """Base64 alphabet variant."""
    STANDARD = "standard"
    URL_SAFE = "url-safe"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Alphabet"]:
        # RFC 4648 names
        aliases = {"base64": cls.STANDARD, "base64url": cls.URL_SAFE}
        if isinstance(value, str):
            return aliases.get(value.strip().lower())
        return None


class SUIDOptions(BaseModel):
    """Encoder input after normalization and validation."""
    model_config = ConfigDict(frozen=True)

    timestamp: int  # milliseconds since EPOCH
    random_bits: bytes
    alphabet: Alphabet = Alphabet.STANDARD
    separator: str = "."

    @property
    def mid(self) -> int:
        """Split point of the random bits; first half gets the smaller share."""
        return len(self.random_bits) // 2


class ParsedSUID(BaseModel):
    """Decoded SUID, suitable for feeding back into the encoder."""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    random_bits: bytes
    alphabet: Alphabet = Alphabet.STANDARD
    separator: str = "."

    @property
    def milliseconds(self) -> int:
        timestamp = self.timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=EPOCH.tzinfo)
        return (timestamp - EPOCH) // ONE_MS

    def as_options(self) -> Dict[str, Any]:
        """Keyword arguments for generate_suid()."""
        return {
            "timestamp": self.timestamp,
            "random_source": self.random_bits,
            "alphabet": self.alphabet,
            "separator": self.separator,
        }

    def to_suid(self) -> str:
        from suid.encoder import generate_suid

        return generate_suid(**self.as_options())
