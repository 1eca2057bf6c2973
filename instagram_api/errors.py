"""
Exceptions raised by the Instagram API client.
"""

from typing import Optional


class InstagramError(Exception):
    """Base class for all client errors."""
    pass


class TransportError(InstagramError):
    """Raised when a request fails at the HTTP level."""
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ApiError(TransportError):
    """Raised when the API answers with an error envelope in `meta`."""
    def __init__(
        self,
        error_type: str,
        error_message: str = "",
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        super().__init__(
            f"{error_type}: {error_message}" if error_message else error_type,
            status_code=status_code,
            url=url,
        )
        self.error_type = error_type
        self.error_message = error_message


class NotFoundError(InstagramError):
    """Raised when a username does not resolve to any user."""
    def __init__(self, username: str):
        super().__init__(f"User not found: {username}")
        self.username = username


class InvalidArgumentError(InstagramError, ValueError):
    """Raised when a user identifier is of an unsupported kind."""
    pass
