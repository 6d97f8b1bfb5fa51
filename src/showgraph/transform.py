"""
Normalization of upstream TVmaze payloads into GraphQL Show records
"""

from collections.abc import Mapping, Sequence
from typing import Any

from .graphql.types.show import CastMember, Show


class InvalidShowDataError(TypeError):
    """Raised when a show payload is not a JSON object."""

    pass


def dig(data: Any, *path: str | int) -> Any:
    """Follow ``path`` through nested JSON, returning None on the first gap.

    String keys index mappings and integer keys index sequences. A missing
    key, an out-of-range index, a null node or a node of the wrong type all
    yield None instead of raising.

    Example:
        >>> dig({"schedule": {"days": ["Monday"]}}, "schedule", "days", 0)
        'Monday'
        >>> dig({"schedule": None}, "schedule", "days", 0) is None
        True
    """
    node = data
    for key in path:
        if isinstance(key, str):
            if not isinstance(node, Mapping):
                return None
            node = node.get(key)
        else:
            if not _is_json_array(node) or not 0 <= key < len(node):
                return None
            node = node[key]
        if node is None:
            return None
    return node


def _is_json_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def transform_cast_member(entry: Any) -> CastMember:
    """Map one upstream cast entry (``{person, character}``) to a CastMember."""
    return CastMember(
        name=dig(entry, "person", "name"),
        character_name=dig(entry, "character", "name"),
        character_image=dig(entry, "person", "image", "medium"),
    )


def transform_show_data(show_data: Any, cast_data: Any = None) -> Show:
    """Build a Show from an upstream show payload and an optional cast payload.

    Nested optional fields that are absent upstream come out as None. Only a
    JSON array ``cast_data`` contributes cast members; any other value
    (None, an error object, a string) gives an empty cast. Inputs are never
    modified.

    Raises:
        InvalidShowDataError: If ``show_data`` is not a JSON object
    """
    if not isinstance(show_data, Mapping):
        raise InvalidShowDataError(
            f"Show data must be a JSON object, got {type(show_data).__name__}"
        )

    if _is_json_array(cast_data):
        cast = [transform_cast_member(entry) for entry in cast_data]
    else:
        cast = []

    genres = show_data.get("genres")
    if _is_json_array(genres):
        genres = list(genres)

    return Show(
        id=show_data.get("id"),
        name=show_data.get("name"),
        rating=dig(show_data, "rating", "average"),
        image=dig(show_data, "image", "medium"),
        summary=show_data.get("summary"),
        network=dig(show_data, "network", "name"),
        air_day=dig(show_data, "schedule", "days", 0),
        status=show_data.get("status"),
        genres=genres,
        cast=cast,
    )
