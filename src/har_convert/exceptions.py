"""
Errors raised while reading HAR documents.
"""


class HarConvertError(Exception):
    """Base class for all errors raised by har_convert."""


class InvalidArgumentError(HarConvertError, ValueError):
    """The input passed to a deserialize function is null, empty or blank."""


class MalformedInputError(HarConvertError, ValueError):
    """The input is not valid JSON or does not have the shape of a HAR document."""


class HarIOError(HarConvertError, OSError):
    """The HAR file or stream could not be opened or read."""
