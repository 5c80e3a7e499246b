"""Async HTTP client wrapper.

Wraps httpx with RequestPolicy enforcement:
- Configurable timeouts
- Auth and default headers on every request
- Error mapping to ConnectorError hierarchy

Exactly one attempt is made per request. Tests inject an
``httpx.MockTransport`` through the ``transport`` argument.
"""

import json as json_module
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .base import (
    AuthStrategy,
    ConnectionError,
    ConnectorError,
    RequestPolicy,
    TimeoutError,
    error_for_status,
)


@dataclass
class HTTPResponse:
    """Simplified HTTP response wrapper."""

    status_code: int
    headers: Dict[str, str]
    body: bytes
    json_data: Optional[Any] = None

    @property
    def ok(self) -> bool:
        """Check if status code indicates success (2xx)."""
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Get JSON data (parsed body)."""
        if self.json_data is not None:
            return self.json_data
        self.json_data = json_module.loads(self.body)
        return self.json_data


class AsyncHTTPClient:
    """Async HTTP client bound to one base URL and auth strategy."""

    def __init__(
        self,
        auth: Optional[AuthStrategy] = None,
        policy: Optional[RequestPolicy] = None,
        base_url: str = "",
        service_name: str = "HTTP",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize async HTTP client.

        Args:
            auth: Authentication strategy for requests
            policy: Request policy (timeouts, headers)
            base_url: Base URL for all requests
            service_name: Label used in error messages (e.g. "HubSpot")
            transport: Optional httpx transport override
        """
        self.auth = auth
        self.policy = policy or RequestPolicy()
        self.base_url = base_url.rstrip("/")
        self.service_name = service_name
        self._transport = transport

    def _build_headers(self) -> Dict[str, str]:
        """Build request headers including auth and defaults."""
        headers = {"User-Agent": self.policy.user_agent}
        headers.update(self.policy.default_headers)

        if self.auth:
            headers.update(self.auth.get_headers())

        return headers

    def _get_url(self, path: str) -> str:
        """Build full URL from path."""
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.policy.connect_timeout,
            read=self.policy.read_timeout,
            write=self.policy.read_timeout,
            pool=self.policy.total_timeout,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Any] = None,
        params: Optional[Any] = None,
    ) -> HTTPResponse:
        """Make a single async HTTP request.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: URL path (relative to base_url)
            json: JSON body to send
            params: Query parameters (mapping or list of pairs)

        Returns:
            HTTPResponse with status, headers, and body

        Raises:
            RemoteError: On non-2xx status
            TimeoutError: On request timeout
            ConnectionError: On connection failure
        """
        url = self._get_url(path)
        request_headers = self._build_headers()

        try:
            async with httpx.AsyncClient(timeout=self._timeout(), transport=self._transport) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    json=json,
                    params=params,
                    headers=request_headers,
                )
        except httpx.TimeoutException:
            raise TimeoutError(
                f"Request timed out after {self.policy.read_timeout}s",
                connector_name=self.service_name,
                timeout_seconds=self.policy.read_timeout,
            )
        except httpx.ConnectError as e:
            raise ConnectionError(f"Failed to connect to {url}: {e}", connector_name=self.service_name)
        except httpx.HTTPError as e:
            raise ConnectorError(f"HTTP error: {e}", connector_name=self.service_name)

        result = HTTPResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

        if not result.ok:
            raise error_for_status(
                result.status_code,
                f"{self.service_name} API {result.status_code}: {result.text}",
                result.text,
                connector_name=self.service_name,
            )

        return result
