"""
Declarative mapping between HAR JSON objects and entity dataclasses.

Each entity field declares its canonical JSON property name with ``har_field``.
Incoming keys are matched against a lookup table built once per entity type,
case-insensitively by default, since HAR producers do not agree on casing
(``redirectURL`` vs ``redirectUrl``, ``Log`` vs ``log``).
"""

import dataclasses
import functools
import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Type, TypeVar

from .entities.base import JSON_NAME, KIND, HarEntity, ListOf
from .exceptions import MalformedInputError

logger = logging.getLogger(__name__)

CUSTOM_FIELD_PREFIX = "_"

E = TypeVar("E", bound=HarEntity)


@dataclasses.dataclass(frozen=True)
class MappingOptions:
    """Options controlling how JSON is mapped onto entities and back."""

    case_insensitive: bool = True
    omit_none: bool = True
    keep_custom_fields: bool = True


DEFAULT_OPTIONS = MappingOptions()


@functools.lru_cache(maxsize=None)
def lookup_table(
    entity_type: Type[HarEntity], case_insensitive: bool = True
) -> Dict[str, dataclasses.Field]:
    """Map (optionally lower-cased) JSON property names to the fields of ``entity_type``."""
    table: Dict[str, dataclasses.Field] = {}
    for f in dataclasses.fields(entity_type):
        json_name = f.metadata.get(JSON_NAME)
        if json_name is None:
            continue
        table[json_name.lower() if case_insensitive else json_name] = f
    return table


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _is_entity_kind(kind: Any) -> bool:
    return isinstance(kind, type) and issubclass(kind, HarEntity)


def _unexpected(expected: str, value: Any, path: str) -> MalformedInputError:
    return MalformedInputError(
        f"Expected {expected} at {path}, got {_json_type(value)}"
    )


def _convert(kind: Any, value: Any, options: MappingOptions, path: str) -> Any:
    if isinstance(kind, ListOf):
        if not isinstance(value, list):
            raise _unexpected("an array", value, path)
        return [
            None if item is None else _convert(kind.item, item, options, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]
    if _is_entity_kind(kind):
        return from_json(kind, value, options, path)
    if kind is datetime:
        if not isinstance(value, str):
            raise _unexpected("a date string", value, path)
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise MalformedInputError(f"Invalid ISO 8601 date at {path}: {value!r}") from e
    if kind is bool:
        if not isinstance(value, bool):
            raise _unexpected("a boolean", value, path)
        return value
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _unexpected("an integer", value, path)
        return value
    if kind is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _unexpected("a number", value, path)
        return float(value)
    if kind is str:
        if not isinstance(value, str):
            raise _unexpected("a string", value, path)
        return value
    raise TypeError(f"Unsupported field kind {kind!r} at {path}")


def from_json(
    entity_type: Type[E],
    data: Any,
    options: MappingOptions = DEFAULT_OPTIONS,
    path: str = "$",
) -> E:
    """
    Build an entity from a decoded JSON object.

    Keys are matched to fields through ``lookup_table``. JSON ``null`` and
    missing keys both leave the field as ``None``. Keys that match no field
    are dropped, except custom (``_``-prefixed) keys which are kept in
    ``custom_fields`` when ``options.keep_custom_fields`` is set.

    Args:
        entity_type: The ``HarEntity`` subclass to build.
        data: The decoded JSON value, expected to be an object.
        options: Mapping options.
        path: JSON path of ``data``, used in error messages.

    Raises:
        MalformedInputError: If ``data`` or one of its values has a JSON type
            that cannot populate the corresponding field.
    """
    if not isinstance(data, Mapping):
        raise _unexpected("an object", data, path)

    table = lookup_table(entity_type, options.case_insensitive)
    values: Dict[str, Any] = {}
    custom: Dict[str, Any] = {}
    for key, value in data.items():
        f = table.get(key.lower() if options.case_insensitive else key)
        if f is None:
            if options.keep_custom_fields and key.startswith(CUSTOM_FIELD_PREFIX):
                custom[key] = value
            else:
                logger.debug("Ignoring unknown property %s.%s", path, key)
            continue
        if value is None:
            continue
        values[f.name] = _convert(
            f.metadata[KIND], value, options, f"{path}.{f.metadata[JSON_NAME]}"
        )
    return entity_type(**values, custom_fields=custom)


def _emit(value: Any, options: MappingOptions) -> Any:
    if isinstance(value, HarEntity):
        return to_dict(value, options)
    if isinstance(value, list):
        return [_emit(item, options) for item in value]
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def to_dict(entity: HarEntity, options: MappingOptions = DEFAULT_OPTIONS) -> Dict[str, Any]:
    """
    Re-emit an entity as a JSON-compatible dictionary using canonical HAR names.

    Fields that are ``None`` are left out when ``options.omit_none`` is set,
    so absent values never show up as explicit ``null``.
    """
    result: Dict[str, Any] = {}
    for f in dataclasses.fields(entity):
        json_name = f.metadata.get(JSON_NAME)
        if json_name is None:
            continue
        value = getattr(entity, f.name)
        if value is None and options.omit_none:
            continue
        result[json_name] = _emit(value, options)
    if options.keep_custom_fields:
        result.update(entity.custom_fields)
    return result
