"""
Data models for the Instagram API client using Pydantic.
"""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

from .config import SELF_USER
from .errors import InvalidArgumentError


class SelfUser(BaseModel):
    """The authenticated user."""
    model_config = ConfigDict(frozen=True)

    @property
    def path_segment(self) -> str:
        return SELF_USER


class UserId(BaseModel):
    """A user addressed by numeric Instagram ID."""
    model_config = ConfigDict(frozen=True)

    id: StrictInt

    @property
    def path_segment(self) -> str:
        return str(self.id)


class Username(BaseModel):
    """A user addressed by username; resolved through search."""
    model_config = ConfigDict(frozen=True)

    username: StrictStr


UserRef = Union[SelfUser, UserId, Username]


def to_user_ref(value: Union[UserRef, int, str, None]) -> UserRef:
    """
    Wrap a plain identifier in its UserRef variant.

    None -> SelfUser, int -> UserId, str -> Username.

    Raises:
        InvalidArgumentError: For any other kind of value (bools and
            empty strings included)
    """
    if value is None:
        return SelfUser()
    if isinstance(value, (SelfUser, UserId, Username)):
        return value
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Unsupported user identifier: {value!r}")
    if isinstance(value, int):
        return UserId(id=value)
    if isinstance(value, str) and value:
        return Username(username=value)
    raise InvalidArgumentError(f"Unsupported user identifier: {value!r}")


def merge_params(*mappings: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge query parameter mappings left to right.

    Later mappings win on key collisions and a None value removes the key,
    so merging the same options twice gives the same result.
    """
    merged: Dict[str, Any] = {}
    for mapping in mappings:
        if not mapping:
            continue
        for key, value in mapping.items():
            if value is None:
                merged.pop(key, None)
            else:
                merged[key] = value
    return merged


class ApiResponse(BaseModel):
    """
    Parsed JSON body of an API response.

    The body is kept exactly as received: `meta`, `data` and `pagination`
    hold whatever the API returned and unknown top-level keys are kept as
    extra fields.
    """
    model_config = ConfigDict(extra="allow")

    meta: Any = None
    data: Any = None
    pagination: Any = None

    def items(self) -> list:
        """Return `data` as a list (empty when absent, wrapped when an object)."""
        if self.data is None:
            return []
        if isinstance(self.data, list):
            return self.data
        return [self.data]

    def first(self) -> Optional[Any]:
        """Return the first item of `data`, or None when there is none."""
        items = self.items()
        return items[0] if items else None

    def get(self, *path: Union[str, int], default: Any = None) -> Any:
        """
        Look up a nested value, e.g. `response.get("data", 0, "id")`.

        Returns `default` as soon as a key or index is missing.
        """
        node: Any = self.to_dict()
        for key in path:
            if isinstance(node, dict) and key in node:
                node = node[key]
            elif (
                isinstance(node, list)
                and isinstance(key, int)
                and not isinstance(key, bool)
                and -len(node) <= key < len(node)
            ):
                node = node[key]
            else:
                return default
        return node

    @property
    def next_cursor(self) -> Any:
        """Opaque cursor for the next page, passed back verbatim."""
        return self.get("pagination", "next_cursor")

    @property
    def next_url(self) -> Any:
        return self.get("pagination", "next_url")

    def to_dict(self) -> Dict[str, Any]:
        """Return the body as plain JSON-compatible data."""
        return self.model_dump(exclude_unset=True)
