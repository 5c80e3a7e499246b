"""Test configuration and fixtures."""

import asyncio
from typing import Any, Dict, Optional

import pytest

from hubspot_mcp.connectors import DummyHubSpotConnector
from hubspot_mcp.protocol import ProtocolRouter
from hubspot_mcp.tools import ToolDispatcher


@pytest.fixture
def connector() -> DummyHubSpotConnector:
    """Offline connector with an empty response table."""
    return DummyHubSpotConnector()


@pytest.fixture
def dispatcher(connector) -> ToolDispatcher:
    """Dispatcher bound to the offline connector."""
    return ToolDispatcher(connector=connector)


@pytest.fixture
def router(dispatcher) -> ProtocolRouter:
    """Router bound to the offline dispatcher."""
    return ProtocolRouter(dispatcher=dispatcher)


@pytest.fixture
def call_tool(dispatcher):
    """Run one tool synchronously: ``call_tool(name, **args)``."""

    def _call(name: str, args: Optional[Dict[str, Any]] = None, **kwargs: Any) -> Any:
        return asyncio.run(dispatcher.dispatch(name, {**(args or {}), **kwargs}))

    return _call


@pytest.fixture
def make_contact():
    """Factory for raw remote contact objects."""

    def _make(contact_id: str, **properties: Any) -> Dict[str, Any]:
        return {
            "id": contact_id,
            "properties": properties,
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-02-01T00:00:00Z",
            "archived": False,
        }

    return _make
