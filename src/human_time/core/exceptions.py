"""Custom exceptions for human-time."""


class HumanTimeError(Exception):
    """Base exception for human-time."""


class ParseError(HumanTimeError, ValueError):
    """An expression could not be turned into an instant.

    Attributes:
        value: The original input string.
        error: The underlying error when a subfield failed, else None.
    """

    def __init__(self, value: str, message: str | None = None, error: Exception | None = None):
        self.value = value
        self.error = error
        super().__init__(message or f"cannot parse {value!r}")


class UnrecognizedInputError(ParseError):
    """No recognizer matched the input."""


class MalformedSubfieldError(ParseError):
    """A recognizer matched but one of its fields (integer, duration) failed."""

    def __init__(self, value: str, field: str, error: Exception):
        self.field = field
        super().__init__(value, f"cannot parse {value!r}: invalid {field}: {error}", error)


class DurationError(HumanTimeError, ValueError):
    """Invalid duration literal (e.g. ``1x`` or ``h``)."""


class ConfigError(HumanTimeError):
    """Error in configuration."""
