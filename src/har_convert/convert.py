"""
Entry points turning HAR documents into normalized entity graphs.
"""

import json
import logging
import os
from typing import IO, Any, Union

from .entities import Har
from .exceptions import HarIOError, InvalidArgumentError, MalformedInputError
from .mapping import DEFAULT_OPTIONS, from_json
from .normalization import normalize_redirect_urls

logger = logging.getLogger(__name__)


class HarConvert:
    """Converts HAR (HTTP Archive) content to HAR entities."""

    @staticmethod
    def deserialize(har_json: Union[str, bytes]) -> Har:
        """
        Deserialize HAR content to a HAR entity.

        Args:
            har_json: The HAR document as text, or as UTF-8 encoded bytes.

        Returns:
            The HAR entity, with partial redirect URLs made absolute.

        Raises:
            InvalidArgumentError: If ``har_json`` is None, empty or whitespace only.
            MalformedInputError: If the content is not valid JSON or not a HAR structure.
        """
        if isinstance(har_json, (bytes, bytearray)):
            try:
                har_json = har_json.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise MalformedInputError(f"HAR content is not valid UTF-8: {e}") from e
        if not isinstance(har_json, str) or not har_json.strip():
            raise InvalidArgumentError("har_json must be a non-empty string")

        logger.debug("Deserializing HAR content (%d characters)", len(har_json))
        try:
            raw_har = json.loads(har_json)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"Invalid JSON in HAR content - {e}") from e
        return HarConvert._build(raw_har)

    @staticmethod
    def deserialize_from_stream(stream: IO[Any]) -> Har:
        """
        Deserialize HAR content read from an open stream.

        The stream is read to the end but not closed.

        Args:
            stream: A binary or text file-like object.

        Raises:
            InvalidArgumentError: If ``stream`` is None.
            HarIOError: If reading the stream fails.
            MalformedInputError: If the content is not valid JSON or not a HAR structure.
        """
        if stream is None:
            raise InvalidArgumentError("stream must not be None")

        try:
            raw_har = json.load(stream)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"Invalid JSON in HAR stream - {e}") from e
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"HAR stream is not valid text: {e}") from e
        except OSError as e:
            raise HarIOError(f"Could not read HAR stream: {e}") from e
        return HarConvert._build(raw_har)

    @staticmethod
    def deserialize_from_file(file_name: Union[str, os.PathLike]) -> Har:
        """
        Deserialize a HAR file to a HAR entity.

        The file is closed before this returns or raises.

        Args:
            file_name: Path of the .har file.

        Raises:
            InvalidArgumentError: If ``file_name`` is None.
            HarIOError: If the file cannot be opened or read.
            MalformedInputError: If the content is not valid JSON or not a HAR structure.
        """
        if file_name is None:
            raise InvalidArgumentError("file_name must not be None")

        logger.debug("Deserializing HAR file %s", file_name)
        try:
            f = open(file_name, "rb")
        except OSError as e:
            raise HarIOError(f"Could not open HAR file {file_name}: {e}") from e
        with f:
            return HarConvert.deserialize_from_stream(f)

    @staticmethod
    def _build(raw_har: Any) -> Har:
        # json.loads also accepts arrays and scalars at the root
        if not isinstance(raw_har, dict):
            raise MalformedInputError(
                "Invalid JSON structure: Root is not an object."
            )
        har = from_json(Har, raw_har, DEFAULT_OPTIONS)
        if har.log is not None and har.log.entries is not None:
            logger.debug("Mapped %d HAR entries", len(har.log.entries))
        return normalize_redirect_urls(har)


deserialize = HarConvert.deserialize
deserialize_from_stream = HarConvert.deserialize_from_stream
deserialize_from_file = HarConvert.deserialize_from_file
