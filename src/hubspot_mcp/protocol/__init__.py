"""JSON-RPC protocol layer."""

from hubspot_mcp.protocol.router import (
    INTERNAL_ERROR,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    ProtocolRouter,
    rpc_error,
    rpc_result,
    text_content,
)

__all__ = [
    "ProtocolRouter",
    "rpc_error",
    "rpc_result",
    "text_content",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INTERNAL_ERROR",
]
