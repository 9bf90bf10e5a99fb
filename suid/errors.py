"""
Errors raised while generating or parsing SUIDs.
"""


class SUIDError(ValueError):
    """Base exception for SUID errors."""
    code = "suid_error"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        if code:
            self.code = code
        super().__init__(message)


class InvalidTimestamp(SUIDError):
    """Timestamp is not a positive integer or a convertible date."""
    code = "invalid_timestamp"


class InvalidRandomSource(SUIDError):
    """Random source is not a byte sequence of at least 2 bytes."""
    code = "invalid_random_source"


class InvalidSeparator(SUIDError):
    """Separator collides with the alphabet or is not a single character."""
    code = "invalid_separator"


class InvalidAlphabet(SUIDError):
    """Unknown base64 alphabet name."""
    code = "invalid_alphabet"


class InvalidInput(SUIDError, TypeError):
    """SUID string is missing, empty or malformed."""
    code = "invalid_input"
