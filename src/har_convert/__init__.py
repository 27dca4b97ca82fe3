"""
HAR (HTTP Archive) deserialization with redirect URL normalization.
"""

from .convert import (
    HarConvert,
    deserialize,
    deserialize_from_file,
    deserialize_from_stream,
)
from .entities import (
    Content,
    Entry,
    Har,
    Header,
    Log,
    Request,
    Response,
)
from .exceptions import (
    HarConvertError,
    HarIOError,
    InvalidArgumentError,
    MalformedInputError,
)
from .mapping import DEFAULT_OPTIONS, MappingOptions, from_json, to_dict
from .normalization import normalize_redirect_urls
from .version import get_package_version

__version__ = get_package_version()

__all__ = [
    "HarConvert",
    "deserialize",
    "deserialize_from_file",
    "deserialize_from_stream",
    "normalize_redirect_urls",
    "Har",
    "Log",
    "Entry",
    "Request",
    "Response",
    "Header",
    "Content",
    "HarConvertError",
    "InvalidArgumentError",
    "MalformedInputError",
    "HarIOError",
    "MappingOptions",
    "DEFAULT_OPTIONS",
    "from_json",
    "to_dict",
]
