"""
Users endpoints of the Instagram API.

@see http://instagram.com/developer/endpoints/users/
"""

from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

from .config import SELF_USER
from .errors import InvalidArgumentError, NotFoundError
from .models import (
    ApiResponse,
    SelfUser,
    UserId,
    Username,
    UserRef,
    merge_params,
    to_user_ref,
)
from .transport import ApiTransport

QueryOptions = Mapping[str, Any]
UserIdentifier = Union[int, str, SelfUser, UserId, None]


def _user_segment(user_id: UserIdentifier) -> str:
    """Percent-encoded path segment for a user ID, `self` when absent."""
    if user_id is None:
        return SELF_USER
    if isinstance(user_id, (SelfUser, UserId)):
        return user_id.path_segment
    if isinstance(user_id, bool):
        raise InvalidArgumentError(f"Unsupported user identifier: {user_id!r}")
    if isinstance(user_id, int):
        return str(user_id)
    if isinstance(user_id, str) and user_id:
        return quote(user_id, safe="")
    raise InvalidArgumentError(f"Unsupported user identifier: {user_id!r}")


class UsersEndpoint:
    """
    One method per users endpoint.

    Each call builds the path, merges the caller's options with the
    transport's auth params and performs a single GET. Responses come
    back unmodified; transport errors propagate unchanged.
    """

    def __init__(self, transport: ApiTransport):
        self.transport = transport

    def _get(self, path: str, options: Optional[QueryOptions] = None) -> ApiResponse:
        # Auth params go last so options can never replace credentials
        params = merge_params(options, self.transport.auth_params)
        return self.transport.get(path, params)

    def user_follows(
        self,
        user_id: Union[UserIdentifier, QueryOptions] = None,
        options: Optional[QueryOptions] = None,
    ) -> ApiResponse:
        """
        Users whom a given user follows.

        Args:
            user_id: Instagram user ID (default: the authenticated user).
                A mapping passed here alone is taken as `options`.
            options: `cursor` to page forward, `count` to limit page size

        Example:
            users.user_follows(4, {"count": 10})
        """
        if isinstance(user_id, Mapping) and options is None:
            user_id, options = None, user_id
        return self._get(f"users/{_user_segment(user_id)}/follows", options)

    def user_followed_by(
        self,
        user_id: Union[UserIdentifier, QueryOptions] = None,
        options: Optional[QueryOptions] = None,
    ) -> ApiResponse:
        """Users whom a given user is followed by. Same arguments as `user_follows`."""
        if isinstance(user_id, Mapping) and options is None:
            user_id, options = None, user_id
        return self._get(f"users/{_user_segment(user_id)}/followed-by", options)

    def user(self, ref: Union[UserRef, int, str, None] = None) -> ApiResponse:
        """
        Extended information about a user.

        Args:
            ref: None for the authenticated user, an int ID, a username,
                or a UserRef variant

        Raises:
            NotFoundError: A username matched no user
            InvalidArgumentError: `ref` is of an unsupported kind
        """
        ref = to_user_ref(ref)
        if isinstance(ref, Username):
            return self.user_by_name(ref.username)
        if isinstance(ref, UserId):
            return self.user_by_id(ref.id)
        return self.current_user()

    def current_user(self) -> ApiResponse:
        return self._get(f"users/{SELF_USER}")

    def user_by_id(self, user_id: int) -> ApiResponse:
        return self._get(f"users/{_user_segment(user_id)}")

    def user_by_name(self, username: str) -> ApiResponse:
        """Resolve `username` through search, then fetch the first match."""
        match = self.search(username).first()
        if not isinstance(match, dict) or match.get("id") is None:
            raise NotFoundError(username)
        return self._get(f"users/{_user_segment(str(match['id']))}")

    def search(
        self,
        query: Optional[str] = None,
        options: Optional[QueryOptions] = None,
    ) -> ApiResponse:
        """
        Search for users by name.

        Args:
            query: Search query; a `q` in `options` is used when None
            options: Extra parameters such as `count`
        """
        if query is not None:
            options = merge_params(options, {"q": query})
        return self._get("users/search", options)

    def feed(self, options: Optional[QueryOptions] = None) -> ApiResponse:
        """Feed of the authenticated user (`count`, `min_id`, `max_id`)."""
        return self._get(f"users/{SELF_USER}/feed", options)

    def recent(
        self,
        user_id: UserIdentifier = None,
        options: Optional[QueryOptions] = None,
    ) -> ApiResponse:
        """Most recent media published by a user (default: the authenticated user)."""
        return self._get(f"users/{_user_segment(user_id)}/media/recent", options)

    def liked(self, options: Optional[QueryOptions] = None) -> ApiResponse:
        """Media liked by the authenticated user (`count`, `max_like_id`)."""
        return self._get(f"users/{SELF_USER}/media/liked", options)
