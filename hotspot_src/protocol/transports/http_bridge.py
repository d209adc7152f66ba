"""HTTP Bridge.

FastAPI application exposing both transports:
- GET  /mcp                         - open a streaming session (SSE)
- POST /mcp/messages?sessionId=<id> - post a message to an open session
- POST /mcp                         - single-shot JSON-RPC exchange
- OPTIONS on the paths above        - CORS preflight (204)

Anything else is answered with 404. All responses allow any origin.
"""

import asyncio
import json
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response, StreamingResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotspot_src.config import (
    DIRECT_PATH,
    HEARTBEAT_INTERVAL,
    MESSAGE_PATH,
    STREAM_PATH,
    VERSION,
)
from hotspot_src.core.errors import TransportError, UnknownSession
from hotspot_src.core.registry import WidgetRegistry
from hotspot_src.protocol.sessions import SessionManager
from hotspot_src.protocol.transports.direct import handle_direct_request
from hotspot_src.protocol.transports.stream import event_stream
from hotspot_src.widget_utils.logging_config import get_logger

logger = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "content-type",
}

PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


def create_app(
    registry: WidgetRegistry,
    sessions: Optional[SessionManager] = None,
    heartbeat_interval: float = HEARTBEAT_INTERVAL,
) -> FastAPI:
    """Build the HTTP application.

    Args:
        registry: Widget registry shared by every connection.
        sessions: Session manager; a new one is created when omitted.
        heartbeat_interval: Seconds of silence before a stream keep-alive.

    Returns:
        The FastAPI app. `app.state.registry` and `app.state.sessions` hold
        the objects it serves.
    """
    sessions = sessions if sessions is not None else SessionManager(registry)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"Widget server '{registry.server_name}' started with {len(registry)} widgets"
        )
        yield
        closed = sessions.close_all()
        logger.info(f"Widget server shutting down, {closed} sessions closed")

    app = FastAPI(
        title="Hotspot Widget Server",
        description="MCP widget catalog over SSE and single-shot HTTP",
        version=VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.registry = registry
    app.state.sessions = sessions

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> Response:
        # Unknown paths and unsupported methods are both plain 404s
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not Found", status_code=404, headers=CORS_HEADERS)
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=CORS_HEADERS
        )

    @app.get(STREAM_PATH)
    async def open_stream() -> StreamingResponse:
        """Open a streaming session.

        The first event names the message endpoint for this session; replies
        follow as `message` events until either side closes the stream.
        """
        return StreamingResponse(
            event_stream(sessions, MESSAGE_PATH, heartbeat_interval),
            media_type="text/event-stream",
            headers={
                **CORS_HEADERS,
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "X-Accel-Buffering": "no",  # Disable nginx buffering
            },
        )

    @app.post(MESSAGE_PATH)
    async def post_message(request: Request) -> Response:
        """Forward a JSON-RPC message to an open session.

        Returns 202 once the message is routed; the reply arrives on the
        session's stream.
        """
        session_id = request.query_params.get("sessionId")
        if not session_id:
            return PlainTextResponse(
                "Missing sessionId query parameter", status_code=400, headers=CORS_HEADERS
            )
        if session_id not in sessions:
            return PlainTextResponse("Unknown session", status_code=404, headers=CORS_HEADERS)

        body = await request.body()
        try:
            message = json.loads(body)
        except ValueError as e:
            logger.warning(f"[{session_id}] Invalid message body: {e}")
            return PlainTextResponse("Invalid message", status_code=400, headers=CORS_HEADERS)

        try:
            await sessions.route(session_id, message)
        except UnknownSession:
            return PlainTextResponse("Unknown session", status_code=404, headers=CORS_HEADERS)
        except TransportError as e:
            logger.error(f"[{session_id}] SSE transport error: {e}")
            sessions.close(session_id)
            return PlainTextResponse(
                "Failed to process message", status_code=500, headers=CORS_HEADERS
            )

        return PlainTextResponse("Accepted", status_code=202, headers=CORS_HEADERS)

    @app.post(DIRECT_PATH)
    async def direct_request(request: Request) -> JSONResponse:
        """Answer one JSON-RPC request without a session.

        Request Body:
            {"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": {...}}

        Returns:
            {"jsonrpc": "2.0", "id": 1, "result": {...}} or an error reply.
        """
        body = await request.body()
        status, reply = await asyncio.to_thread(handle_direct_request, registry, body)
        return JSONResponse(reply, status_code=status, headers=CORS_HEADERS)

    async def preflight() -> Response:
        return Response(status_code=204, headers=PREFLIGHT_HEADERS)

    for path in sorted({STREAM_PATH, MESSAGE_PATH, DIRECT_PATH}):
        app.add_api_route(path, preflight, methods=["OPTIONS"], include_in_schema=False)

    return app


def run_server(registry: WidgetRegistry, host: str, port: int) -> None:
    """Serve the widget catalog over HTTP until interrupted.

    Args:
        registry: Widget registry to serve.
        host: Bind address.
        port: Listen port.
    """
    app = create_app(registry)

    logger.info(f"Widget server listening on http://{host}:{port}")
    logger.info(f"  SSE stream: GET http://{host}:{port}{STREAM_PATH}")
    logger.info(f"  Message post endpoint: POST http://{host}:{port}{MESSAGE_PATH}?sessionId=...")
    logger.info(f"  Direct endpoint: POST http://{host}:{port}{DIRECT_PATH}")
    uvicorn.run(app, host=host, port=port, log_config=None)
