"""
HTTP transport for the Instagram API.
Performs GET requests, attaches credentials and maps failures to client errors.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from .config import ClientConfig
from .errors import ApiError, TransportError
from .models import ApiResponse
from .utils.headers import HeaderGenerator

logger = logging.getLogger(__name__)


class ApiTransport:
    """
    Synchronous transport over an `httpx.Client`.

    The transport knows the API root and the credentials; endpoint
    classes only hand it a relative path and the query parameters.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the transport.

        Args:
            config: Client configuration (uses defaults if not provided)
            http_client: Pre-built httpx client, mainly for tests
        """
        self.config = config or ClientConfig()
        self.header_gen = HeaderGenerator(self.config.user_agent)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=httpx.Timeout(self.config.request_timeout),
            follow_redirects=True,
            proxy=self.config.proxy_url,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    @property
    def auth_params(self) -> Dict[str, str]:
        """Credential query parameters attached to authenticated calls."""
        if self.config.access_token:
            return {"access_token": self.config.access_token}
        if self.config.client_id:
            return {"client_id": self.config.client_id}
        return {}

    def build_url(self, path: str) -> str:
        """Join a relative endpoint path (leading slash optional) onto the API root."""
        return f"{self.config.api_url.rstrip('/')}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        """
        Issue a GET request and parse the JSON body.

        Args:
            path: Endpoint path relative to the API root
            params: Query parameters, sent as given

        Returns:
            ApiResponse wrapping the response body

        Raises:
            ApiError: The API answered with an error envelope
            TransportError: Network failure, non-2xx status or unparseable body
        """
        url = self.build_url(path)
        params = dict(params or {})

        logger.debug(f"GET {url} params={sorted(params)}")

        try:
            response = self._client.get(
                url,
                params=params,
                headers=self.header_gen.get_base_headers(),
            )
        except httpx.HTTPError as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise TransportError(f"Request failed: {e}", url=url) from e

        return self._parse_response(response, url)

    def _parse_response(self, response: httpx.Response, url: str) -> ApiResponse:
        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            logger.warning(f"GET {url} returned HTTP {response.status_code}")
            meta = body.get("meta") if isinstance(body, dict) else None
            if isinstance(meta, dict) and meta.get("error_type"):
                raise ApiError(
                    str(meta["error_type"]),
                    str(meta.get("error_message") or ""),
                    status_code=response.status_code,
                    url=url,
                )
            raise TransportError(
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
                url=url,
            )

        if not isinstance(body, dict):
            raise TransportError(
                "Invalid JSON response",
                status_code=response.status_code,
                url=url,
            )

        return ApiResponse.model_validate(body)
