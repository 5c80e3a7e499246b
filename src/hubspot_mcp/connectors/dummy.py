"""Dummy HubSpot connector for offline testing.

DummyHubSpotConnector keeps all of HubSpotConnector's path and body
building but replaces the network call with canned responses keyed by
``(METHOD, path)``. Every call is logged so tests can assert ordering
and count of remote calls.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .base import ConnectorError
from .hubspot import HubSpotConnector


@dataclass
class DummyResponse:
    """Canned response for DummyHubSpotConnector."""

    data: Any = None
    error: Optional[ConnectorError] = None
    delay_seconds: float = 0.0


class DummyHubSpotConnector(HubSpotConnector):
    """HubSpot connector that never touches the network.

    Unconfigured calls return ``{}`` (or ``{"success": True}`` for DELETE).
    """

    _name = "dummy"

    def __init__(self, access_token: str = "test-token"):
        super().__init__(access_token=access_token)
        self._responses: Dict[Tuple[str, str], DummyResponse] = {}
        self._call_log: List[Dict[str, Any]] = []

    def set_response(self, method: str, path: str, response: Any) -> None:
        """Set canned response for a call.

        Args:
            method: HTTP method (e.g. "GET")
            path: Request path without query string
            response: DummyResponse, or plain data to return
        """
        if not isinstance(response, DummyResponse):
            response = DummyResponse(data=response)
        self._responses[(method.upper(), path)] = response

    def clear_responses(self) -> None:
        """Clear all canned responses."""
        self._responses.clear()

    def get_call_log(self) -> List[Dict[str, Any]]:
        """Get log of all calls, in issue order."""
        return self._call_log.copy()

    def clear_call_log(self) -> None:
        """Clear the call log."""
        self._call_log.clear()

    def calls(self) -> List[Tuple[str, str]]:
        """(method, path) pairs in issue order."""
        return [(call["method"], call["path"]) for call in self._call_log]

    def was_called(self, method: str, path: str) -> bool:
        """Check if a call was issued."""
        return (method.upper(), path) in self.calls()

    def call_count(self) -> int:
        """Total number of calls issued."""
        return len(self._call_log)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Any] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """Return the canned response for ``(method, path)``."""
        method = method.upper()
        self._call_log.append({"method": method, "path": path, "params": params, "json": json})

        response = self._responses.get((method, path))
        if response is None:
            return {"success": True} if method == "DELETE" else {}

        if response.delay_seconds > 0:
            await asyncio.sleep(response.delay_seconds)

        if response.error is not None:
            raise response.error

        return response.data
