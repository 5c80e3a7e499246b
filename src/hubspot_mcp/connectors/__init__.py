"""Connector layer for the remote CRM.

Key components:
- AuthStrategy: Authentication abstraction (ApiKeyAuth bearer token)
- RequestPolicy: Timeouts and default headers
- AsyncHTTPClient: httpx wrapper with policy enforcement
- HubSpotConnector: Remote object client for the HubSpot CRM API
- DummyHubSpotConnector: Offline connector for tests
"""

from .base import (
    DEFAULT_POLICY,
    ApiKeyAuth,
    AuthenticationError,
    AuthStrategy,
    BaseConnector,
    ConfigurationError,
    ConflictError,
    ConnectionError,
    ConnectorError,
    RateLimitError,
    RemoteError,
    RequestPolicy,
    ResourceNotFoundError,
    ServiceUnavailableError,
    TimeoutError,
    ValidationError,
    error_for_status,
)
from .dummy import DummyHubSpotConnector, DummyResponse
from .http_client import AsyncHTTPClient, HTTPResponse
from .hubspot import HUBSPOT_API, HubSpotConnector, build_query

__all__ = [
    # Base
    "BaseConnector",
    # Auth
    "AuthStrategy",
    "ApiKeyAuth",
    # Policy
    "RequestPolicy",
    "DEFAULT_POLICY",
    # Errors
    "ConnectorError",
    "ConfigurationError",
    "ConnectionError",
    "TimeoutError",
    "RemoteError",
    "AuthenticationError",
    "RateLimitError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConflictError",
    "ServiceUnavailableError",
    "error_for_status",
    # HTTP
    "AsyncHTTPClient",
    "HTTPResponse",
    # HubSpot
    "HUBSPOT_API",
    "HubSpotConnector",
    "build_query",
    "DummyHubSpotConnector",
    "DummyResponse",
]
