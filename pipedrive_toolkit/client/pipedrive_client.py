"""
Pipedrive Request Builder

Builds authenticated URLs against a tenant subdomain, routes each call to
the v1 or v2 API surface and raises on non-2xx responses.
"""

import logging
from typing import Any

import httpx

from ..core.models import ApiVersion, PipedriveConfig

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Raised when a Pipedrive request fails."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class PipedriveClient:
    """
    Thin client issuing one request per call.

    Features:
    - Tenant host and API version resolved from immutable config
    - api_token attached as a query parameter
    - JSON content type merged with caller-supplied headers
    - No retries; non-2xx responses raise APIError
    """

    def __init__(
        self,
        config: PipedriveConfig,
        http_client: httpx.Client | None = None,
        timeout_seconds: float = 30.0,
    ):
        """
        Initialize the client.

        Args:
            config: Pipedrive credentials and tenant domain
            http_client: Optional httpx client (created if None)
            timeout_seconds: Request timeout for a created client
        """
        self.config = config
        self.timeout_seconds = timeout_seconds

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.Client(timeout=timeout_seconds)
        else:
            self.http_client = http_client

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _build_url(self, path: str, version: ApiVersion = ApiVersion.V2) -> str:
        """
        Build the full URL for a path on the given API version.

        Args:
            path: Endpoint path (e.g., "/deals/42")
            version: API surface to target

        Returns:
            Full URL
        """
        base_url = self.config.base_url(version).rstrip("/")
        path = path.lstrip("/")
        return f"{base_url}/{path}"

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        version: ApiVersion = ApiVersion.V2,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Make a single authenticated request.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: Endpoint path relative to the version base
            params: Query parameters
            json_body: JSON request body
            version: API surface to target
            headers: Extra headers, merged over the JSON content type

        Returns:
            Parsed JSON response, unchanged ({} for an empty body)

        Raises:
            APIError: On non-2xx response or transport failure
        """
        url = self._build_url(path, version)

        query = dict(params or {})
        query["api_token"] = self.config.api_key

        request_headers = {"Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)

        logger.debug(f"{method.upper()} {version.base_path}/{path.lstrip('/')}")

        try:
            response = self.http_client.request(
                method=method.upper(),
                url=url,
                headers=request_headers,
                params=query,
                json=json_body,
            )
        except httpx.RequestError as e:
            raise APIError(f"Pipedrive request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise APIError(
                f"Pipedrive API error ({response.status_code}): {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        return response.json() if response.content else {}

    def get(self, path: str, params: dict[str, Any] | None = None, version: ApiVersion = ApiVersion.V2) -> Any:
        return self.request("GET", path, params=params, version=version)

    def post(self, path: str, json_body: dict[str, Any], version: ApiVersion = ApiVersion.V2) -> Any:
        return self.request("POST", path, json_body=json_body, version=version)

    def put(self, path: str, json_body: dict[str, Any], version: ApiVersion = ApiVersion.V1) -> Any:
        return self.request("PUT", path, json_body=json_body, version=version)

    def patch(self, path: str, json_body: dict[str, Any], version: ApiVersion = ApiVersion.V2) -> Any:
        return self.request("PATCH", path, json_body=json_body, version=version)

    def delete(self, path: str, version: ApiVersion = ApiVersion.V2) -> Any:
        return self.request("DELETE", path, version=version)
