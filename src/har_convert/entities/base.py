from dataclasses import dataclass, field
from typing import Any, Dict

# Metadata keys attached to every mapped dataclass field
JSON_NAME = "json_name"
KIND = "kind"


@dataclass(frozen=True)
class ListOf:
    """Field kind for a JSON array whose items map to ``item``."""

    item: Any


def har_field(json_name: str, kind: Any = str) -> Any:
    """
    Declare an entity field mapped to a HAR JSON property.

    Args:
        json_name: The canonical (HAR 1.2) property name.
        kind: What the JSON value maps to: ``str``, ``int``, ``float``,
            ``bool``, ``datetime``, a ``HarEntity`` subclass
            or a ``ListOf`` one of those.

    Returns:
        A dataclass field defaulting to ``None`` (absent).
    """
    return field(default=None, metadata={JSON_NAME: json_name, KIND: kind})


@dataclass(kw_only=True)
class HarEntity:
    """Base class of all HAR entities.

    Producer-specific properties (keys starting with ``_``) are kept in
    ``custom_fields`` exactly as they appeared in the document.
    """

    custom_fields: Dict[str, Any] = field(default_factory=dict, repr=False)
