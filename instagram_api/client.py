"""
Instagram API client.
Owns the HTTP transport and exposes the endpoint groups built on it.
"""

import logging
from typing import Optional

import httpx

from .config import ClientConfig
from .transport import ApiTransport
from .users import UsersEndpoint

logger = logging.getLogger(__name__)


class InstagramClient:
    """
    Entry point for the Instagram API.

    Usage:
        with InstagramClient(ClientConfig(access_token="...")) as client:
            me = client.users.user()
            page = client.users.user_follows(options={"count": 50})
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the Instagram client.

        Args:
            config: Client configuration (uses defaults if not provided)
            http_client: Pre-built httpx client handed to the transport
        """
        self.config = config or ClientConfig()
        self.transport = ApiTransport(self.config, http_client=http_client)
        self.users = UsersEndpoint(self.transport)

        if not self.transport.auth_params:
            logger.warning("No access_token or client_id configured; requests will be unauthenticated")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self):
        """Close the underlying transport."""
        self.transport.close()
