"""HubSpot connector (remote object client).

Thin async client over the HubSpot CRM REST API. Every method issues
exactly one HTTP call and returns the decoded JSON body. Failures are
raised as ConnectorError subclasses and never retried.

Endpoints used:
- /crm/v3/objects/{type}[/{id}]                      CRUD
- /crm/v3/objects/{type}/search                      search
- /crm/v3/objects/{type}/batch/read                  batch read
- /crm/v3/objects/{type}/{id}/associations/...       association create (PUT)
- /crm/v4/objects/{type}/{id}/associations/{to}      association lookup
- /crm/v3/properties/{type}                          property schema
- /crm/v3/pipelines/{type}                           pipelines
- /crm/v3/owners[/{id}]                              owners
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import httpx

from .base import (
    ApiKeyAuth,
    BaseConnector,
    ConfigurationError,
    RequestPolicy,
)
from .http_client import AsyncHTTPClient

logger = logging.getLogger(__name__)

HUBSPOT_API = "https://api.hubapi.com"

QueryParams = List[Tuple[str, str]]


def build_query(
    limit: Optional[int] = None,
    after: Optional[str] = None,
    properties: Optional[Iterable[str]] = None,
    **extra: Optional[str],
) -> QueryParams:
    """Build query params; ``properties`` is sent as a repeated key."""
    params: QueryParams = []
    if limit is not None:
        params.append(("limit", str(limit)))
    if after:
        params.append(("after", str(after)))
    for prop in properties or []:
        params.append(("properties", str(prop)))
    for key, value in extra.items():
        if value is not None:
            params.append((key, value))
    return params


class HubSpotConnector(BaseConnector):
    """Async client for the HubSpot CRM object model."""

    _name = "hubspot"

    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: str = HUBSPOT_API,
        policy: Optional[RequestPolicy] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the connector.

        Args:
            access_token: Private app token forwarded as a bearer credential
            base_url: API root (overridable for tests and proxies)
            policy: Request policy (timeouts, headers)
            transport: Optional httpx transport override
        """
        super().__init__(ApiKeyAuth(api_key=access_token or ""), policy)
        self.base_url = base_url
        self.http = AsyncHTTPClient(
            auth=self.auth,
            policy=self.policy,
            base_url=base_url,
            service_name="HubSpot",
            transport=transport,
        )

    @classmethod
    def from_config(cls, cfg: Any = None, **kwargs: Any) -> "HubSpotConnector":
        """Create a connector from the process configuration."""
        if cfg is None:
            from hubspot_mcp.config import config as cfg

        policy = RequestPolicy(read_timeout=cfg.hubspot.timeout_s)
        return cls(
            access_token=cfg.hubspot.access_token,
            base_url=cfg.hubspot.api_base,
            policy=policy,
            **kwargs,
        )

    # =========================================================================
    # Core request
    # =========================================================================

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Any] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """Issue one authenticated call and decode the JSON reply.

        DELETE replies are not decoded; ``{"success": True}`` is returned.

        Raises:
            ConfigurationError: If no access token is configured
            RemoteError: On a non-2xx reply ("HubSpot API <status>: <body>")
        """
        if not self.auth.is_configured():
            raise ConfigurationError("HUBSPOT_ACCESS_TOKEN not configured", connector_name=self.name)

        logger.debug(f"{method} {path}")
        response = await self.http.request(method, path, params=params, json=json)

        if method.upper() == "DELETE":
            return {"success": True}
        if not response.body:
            return {}
        return response.json()

    # =========================================================================
    # Objects
    # =========================================================================

    async def list_objects(
        self,
        object_type: str,
        limit: int,
        after: Optional[str] = None,
        properties: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """List one page of objects of a type."""
        params = build_query(limit=limit, after=after, properties=properties)
        return await self.request("GET", f"/crm/v3/objects/{object_type}", params=params)

    async def get_object(
        self,
        object_type: str,
        object_id: str,
        properties: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Get a single object by id."""
        params = build_query(properties=properties)
        return await self.request("GET", f"/crm/v3/objects/{object_type}/{object_id}", params=params)

    async def create_object(self, object_type: str, properties: Dict[str, Any]) -> Dict[str, Any]:
        """Create an object and return it as stored remotely."""
        return await self.request("POST", f"/crm/v3/objects/{object_type}", json={"properties": properties})

    async def update_object(
        self,
        object_type: str,
        object_id: str,
        properties: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Patch the given properties of an object."""
        return await self.request(
            "PATCH",
            f"/crm/v3/objects/{object_type}/{object_id}",
            json={"properties": properties},
        )

    async def delete_object(self, object_type: str, object_id: str) -> Dict[str, Any]:
        """Delete (archive) an object."""
        return await self.request("DELETE", f"/crm/v3/objects/{object_type}/{object_id}")

    async def search_objects(self, object_type: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """Run a search request; the body is sent verbatim."""
        return await self.request("POST", f"/crm/v3/objects/{object_type}/search", json=body)

    async def batch_read(
        self,
        object_type: str,
        object_ids: List[str],
        properties: List[str],
    ) -> Dict[str, Any]:
        """Read many objects of one type by id."""
        body = {
            "inputs": [{"id": object_id} for object_id in object_ids],
            "properties": properties,
        }
        return await self.request("POST", f"/crm/v3/objects/{object_type}/batch/read", json=body)

    # =========================================================================
    # Associations
    # =========================================================================

    async def associate(
        self,
        object_type: str,
        object_id: str,
        to_object_type: str,
        to_object_id: str,
        association_type: str,
    ) -> Dict[str, Any]:
        """Link two objects with a labelled association (e.g. ``deal_to_contact``)."""
        path = (
            f"/crm/v3/objects/{object_type}/{object_id}"
            f"/associations/{to_object_type}/{to_object_id}/{association_type}"
        )
        return await self.request("PUT", path)

    async def list_associations(
        self,
        object_type: str,
        object_id: str,
        to_object_type: str,
    ) -> Dict[str, Any]:
        """List objects of ``to_object_type`` associated with an object."""
        return await self.request(
            "GET", f"/crm/v4/objects/{object_type}/{object_id}/associations/{to_object_type}"
        )

    # =========================================================================
    # Schema, pipelines, owners
    # =========================================================================

    async def list_properties(self, object_type: str) -> Dict[str, Any]:
        """List the property schema of an object type."""
        return await self.request("GET", f"/crm/v3/properties/{object_type}")

    async def list_pipelines(self, object_type: str = "deals") -> Dict[str, Any]:
        """List pipelines (and their stages) of an object type."""
        return await self.request("GET", f"/crm/v3/pipelines/{object_type}")

    async def list_owners(
        self,
        limit: int,
        after: Optional[str] = None,
        archived: bool = False,
    ) -> Dict[str, Any]:
        """List account owners (users)."""
        params = build_query(limit=limit, after=after, archived="true" if archived else None)
        return await self.request("GET", "/crm/v3/owners", params=params)

    async def get_owner(self, owner_id: str) -> Dict[str, Any]:
        """Get a single owner by id."""
        return await self.request("GET", f"/crm/v3/owners/{owner_id}")
