"""JSON-RPC protocol router.

Maps one JSON-RPC 2.0 request object to one response envelope. The
router is stateless and never raises: every failure while handling a
request becomes an error envelope with the request id echoed.
"""

import json
import logging
from typing import Any, Dict, Optional

from hubspot_mcp import PROTOCOL_VERSION, SERVER_NAME, __version__
from hubspot_mcp.tools import ToolDispatcher, list_tools

logger = logging.getLogger(__name__)

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603

NOTIFICATION_PREFIX = "notifications/"


def rpc_result(request_id: Any, result: Any) -> Dict[str, Any]:
    """Build a success envelope."""
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def rpc_error(request_id: Any, code: int, message: str) -> Dict[str, Any]:
    """Build an error envelope."""
    return {"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}}


def text_content(result: Any) -> Dict[str, Any]:
    """Wrap a tool result as a single pretty-printed text content item."""
    return {"content": [{"type": "text", "text": json.dumps(result, indent=2, default=str)}]}


class ProtocolRouter:
    """Routes ``initialize``, ``tools/list`` and ``tools/call``.

    Example:
        >>> router = ProtocolRouter()
        >>> await router.handle({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
        {"jsonrpc": "2.0", "id": 1, "result": {"tools": [...]}}
    """

    def __init__(self, dispatcher: Optional[ToolDispatcher] = None):
        self.dispatcher = dispatcher or ToolDispatcher()

    async def handle(self, request: Any) -> Optional[Dict[str, Any]]:
        """Handle one request.

        Returns:
            The response envelope, or None for notifications (no reply).
        """
        if not isinstance(request, dict):
            return rpc_error(None, INVALID_REQUEST, "Invalid Request")

        request_id = request.get("id")
        method = request.get("method")

        if isinstance(method, str) and method.startswith(NOTIFICATION_PREFIX) and "id" not in request:
            logger.debug(f"Notification {method}")
            return None

        try:
            if method == "initialize":
                return rpc_result(request_id, self.initialize())
            if method == "tools/list":
                return rpc_result(request_id, {"tools": list_tools()})
            if method == "tools/call":
                result = await self.call_tool(request.get("params"))
                return rpc_result(request_id, result)
            return rpc_error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")
        except Exception as e:
            logger.exception(f"Error handling {method}")
            return rpc_error(request_id, INTERNAL_ERROR, str(e) or "Internal error")

    def initialize(self) -> Dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": SERVER_NAME, "version": __version__},
        }

    async def call_tool(self, params: Any) -> Dict[str, Any]:
        """Dispatch ``tools/call`` params and wrap the result as text content."""
        if params is None:
            params = {}
        if not isinstance(params, dict):
            raise ValueError("Invalid params: expected an object")

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise ValueError("Invalid params: arguments must be an object")

        result = await self.dispatcher.dispatch(params.get("name"), arguments)
        return text_content(result)
