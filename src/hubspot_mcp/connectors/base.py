"""Core connector abstractions.

Defines the foundation shared by remote CRM connectors:
- AuthStrategy: Authentication method abstraction (static bearer token)
- RequestPolicy: Timeouts and default headers
- ConnectorError hierarchy: Typed exceptions

Requests are never retried and never rate limited here; a failure is
raised to the caller as soon as it happens.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# =============================================================================
# Authentication Strategies
# =============================================================================


@dataclass
class AuthStrategy:
    """Base authentication strategy (data holder)."""

    def is_configured(self) -> bool:
        """Check if authentication is properly configured."""
        return True

    def get_headers(self) -> Dict[str, str]:
        """Get authentication headers for requests."""
        return {}


@dataclass
class ApiKeyAuth(AuthStrategy):
    """API key authentication.

    Typical usage: Authorization: Bearer <key> (HubSpot private app token).
    """

    api_key: str = ""
    header_name: str = "Authorization"
    header_prefix: str = "Bearer"

    def is_configured(self) -> bool:
        """Check if API key is set."""
        return bool(self.api_key)

    def get_headers(self) -> Dict[str, str]:
        """Get authorization header."""
        if not self.api_key:
            return {}
        if self.header_prefix:
            return {self.header_name: f"{self.header_prefix} {self.api_key}"}
        return {self.header_name: self.api_key}


# =============================================================================
# Request Policy
# =============================================================================


@dataclass
class RequestPolicy:
    """Policy for HTTP requests: timeouts and default headers."""

    # Timeouts
    connect_timeout: float = 10.0  # seconds
    read_timeout: float = 30.0  # seconds
    total_timeout: float = 60.0  # seconds

    # Headers
    user_agent: str = "hubspot-mcp/1.3"
    default_headers: Dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )


DEFAULT_POLICY = RequestPolicy()


# =============================================================================
# Connector Error Hierarchy
# =============================================================================


class ConnectorError(Exception):
    """Base exception for connector errors."""

    def __init__(self, message: str, connector_name: str = "", details: Optional[Dict[str, Any]] = None):
        self.connector_name = connector_name
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(ConnectorError):
    """Connector is missing required configuration (e.g. the access token)."""

    pass


class ConnectionError(ConnectorError):
    """Failed to connect to the service."""

    pass


class TimeoutError(ConnectorError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        connector_name: str = "",
        timeout_seconds: Optional[float] = None,
    ):
        super().__init__(message, connector_name, {"timeout_seconds": timeout_seconds})
        self.timeout_seconds = timeout_seconds


class RemoteError(ConnectorError):
    """The remote service answered with a non-success status."""

    def __init__(
        self,
        message: str,
        connector_name: str = "",
        status_code: int = 0,
        body: str = "",
    ):
        super().__init__(message, connector_name, {"status_code": status_code, "body": body})
        self.status_code = status_code
        self.body = body


class AuthenticationError(RemoteError):
    """Authentication failed (invalid credentials, expired token, etc.)."""

    pass


class ResourceNotFoundError(RemoteError):
    """Requested resource not found."""

    pass


class ConflictError(RemoteError):
    """Resource conflict (duplicate, version mismatch, etc.)."""

    pass


class ValidationError(RemoteError):
    """The remote service rejected the request payload."""

    pass


class RateLimitError(RemoteError):
    """Rate limit exceeded. Surfaced as-is; nothing waits or retries."""

    pass


class ServiceUnavailableError(RemoteError):
    """Service returned a 5xx status."""

    pass


def error_for_status(
    status_code: int,
    message: str,
    body: str,
    connector_name: str = "",
) -> RemoteError:
    """Map an HTTP status code to the matching RemoteError subclass."""
    if status_code in (401, 403):
        return AuthenticationError(message, connector_name, status_code, body)
    if status_code == 404:
        return ResourceNotFoundError(message, connector_name, status_code, body)
    if status_code == 409:
        return ConflictError(message, connector_name, status_code, body)
    if status_code == 422:
        return ValidationError(message, connector_name, status_code, body)
    if status_code == 429:
        return RateLimitError(message, connector_name, status_code, body)
    if status_code >= 500:
        return ServiceUnavailableError(message, connector_name, status_code, body)
    return RemoteError(message, connector_name, status_code, body)


# =============================================================================
# Connector base class
# =============================================================================


class BaseConnector(ABC):
    """Abstract base class for connectors.

    Provides common functionality and enforces the interface.
    """

    _name: str = "base"

    def __init__(
        self,
        auth: AuthStrategy,
        policy: Optional[RequestPolicy] = None,
    ):
        """Initialize the connector.

        Args:
            auth: Authentication strategy
            policy: Request policy (timeouts, headers)
        """
        self.auth = auth
        self.policy = policy or DEFAULT_POLICY

    @property
    def name(self) -> str:
        """Connector name."""
        return self._name

    @abstractmethod
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Any] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """Issue one request against the remote service and decode the reply."""
        pass
