"""
Instagram API client - bindings for the users endpoints.

This client:
- Looks up profiles by ID, by username or for the authenticated user
- Lists follows, followers, feed, recent and liked media
- Passes pagination cursors through untouched (no automatic paging)
"""

from .client import InstagramClient
from .config import ClientConfig
from .errors import (
    ApiError,
    InstagramError,
    InvalidArgumentError,
    NotFoundError,
    TransportError,
)
from .models import ApiResponse, SelfUser, UserId, Username, UserRef
from .transport import ApiTransport
from .users import UsersEndpoint

__version__ = "1.0.0"
__all__ = [
    "InstagramClient",
    "ClientConfig",
    "ApiTransport",
    "UsersEndpoint",
    "ApiResponse",
    "SelfUser",
    "UserId",
    "Username",
    "UserRef",
    "InstagramError",
    "TransportError",
    "ApiError",
    "NotFoundError",
    "InvalidArgumentError",
]
