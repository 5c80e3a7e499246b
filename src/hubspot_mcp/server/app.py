"""HTTP front door.

A FastAPI app that accepts JSON-RPC over ``POST`` and hands each body to
the protocol router. RPC-level failures are reported inside the
envelope with HTTP 200; only a wrong HTTP method gets a non-2xx status.
"""

import json
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from hubspot_mcp import SERVER_NAME, __version__
from hubspot_mcp.protocol import PARSE_ERROR, ProtocolRouter, rpc_error

logger = logging.getLogger(__name__)

MCP_PATHS = ("/mcp", "/", "/api/mcp")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def create_app(router: Optional[ProtocolRouter] = None) -> FastAPI:
    """Build the app around a router (a default one when not given)."""
    router = router or ProtocolRouter()
    app = FastAPI(title=SERVER_NAME, version=__version__)
    app.state.router = router

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    async def mcp_endpoint(request: Request) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200)
        if request.method != "POST":
            return JSONResponse({"error": "Method not allowed"}, status_code=405)

        raw = await request.body()
        try:
            payload = json.loads(raw)
        except ValueError:
            logger.warning("Rejected request with unparseable JSON body")
            return JSONResponse(rpc_error(None, PARSE_ERROR, "Parse error"))

        envelope = await router.handle(payload)
        if envelope is None:
            return Response(status_code=202)
        return JSONResponse(envelope)

    for path in MCP_PATHS:
        app.add_api_route(path, mcp_endpoint, methods=ALL_METHODS, include_in_schema=path == "/mcp")

    return app


app = create_app()
