"""
Configuration settings for the Instagram API client.
"""

from dataclasses import dataclass
from typing import Optional


# Default Instagram endpoints
INSTAGRAM_BASE_URL = "https://api.instagram.com"
INSTAGRAM_API_URL = f"{INSTAGRAM_BASE_URL}/v1"

# Path segment the API resolves to the authenticated user
SELF_USER = "self"

DEFAULT_USER_AGENT = "Instagram Python Client 1.0.0"


@dataclass
class ClientConfig:
    """Main configuration for the client."""

    # Credentials (access_token takes precedence over client_id)
    access_token: Optional[str] = None
    client_id: Optional[str] = None

    # Request settings
    api_url: str = INSTAGRAM_API_URL
    request_timeout: float = 30.0

    # Proxy settings
    proxy_url: Optional[str] = None

    # User agent sent with every request
    user_agent: str = DEFAULT_USER_AGENT
