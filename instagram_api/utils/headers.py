"""
Header generation for API requests.
"""

from typing import Optional

from ..config import DEFAULT_USER_AGENT


class HeaderGenerator:
    """
    Generates the headers sent with every API request.
    The user agent stays fixed for the lifetime of a client.
    """

    def __init__(self, user_agent: Optional[str] = None):
        """
        Args:
            user_agent: User agent string, or None for the default
        """
        self._user_agent = user_agent or DEFAULT_USER_AGENT

    def get_base_headers(self) -> dict[str, str]:
        """Get base headers for all requests."""
        return {
            "User-Agent": self._user_agent,
            "Accept": "application/json; charset=utf-8",
            "Accept-Encoding": "gzip, deflate",
        }

    @property
    def user_agent(self) -> str:
        """Get the current user agent string."""
        return self._user_agent
