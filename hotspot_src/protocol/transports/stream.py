"""Streaming (SSE) Transport.

A client opens a long-lived GET stream; the first event tells it where to
POST its messages, and every reply is pushed back as a `message` event on
the same stream. Closing the stream, from either side, closes the session.

Wire format (text/event-stream):
    event: endpoint
    data: /mcp/messages?sessionId=<id>

    event: message
    data: {"jsonrpc": "2.0", "id": 1, "result": {...}}
"""

import asyncio
import json
from typing import Any, AsyncIterator, Optional

from hotspot_src.config import HEARTBEAT_INTERVAL, SINK_QUEUE_SIZE
from hotspot_src.core.errors import TransportError
from hotspot_src.protocol.sessions import SessionManager
from hotspot_src.widget_utils.logging_config import get_logger

logger = get_logger(__name__)

# Queued after the last message to end the stream
_END_OF_STREAM = object()


def format_sse(event: str, data: str) -> str:
    return f"event: {event}\ndata: {data}\n\n"


class QueueSink:
    """Session sink backed by an asyncio.Queue drained by event_stream().

    Must be used from the event loop thread.
    """

    def __init__(self, max_pending: int = SINK_QUEUE_SIZE):
        self.max_pending = max_pending
        self.queue: asyncio.Queue = asyncio.Queue()
        self.closed = False

    def send(self, message: dict[str, Any]) -> None:
        if self.closed:
            raise TransportError("Stream already closed")
        if self.queue.qsize() >= self.max_pending:
            raise TransportError(
                f"Stream stalled: {self.max_pending} messages pending, client not reading"
            )
        self.queue.put_nowait(message)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.queue.put_nowait(_END_OF_STREAM)


async def event_stream(
    sessions: SessionManager,
    message_path: str,
    heartbeat_interval: float = HEARTBEAT_INTERVAL,
    sink: Optional[QueueSink] = None,
) -> AsyncIterator[str]:
    """Open a session and generate its SSE events.

    Sends the endpoint event, then each queued reply. A keep-alive comment is
    written after `heartbeat_interval` seconds of silence. The session is
    closed when the generator finishes for any reason, including the client
    disconnecting (generator cancelled).
    """
    sink = sink if sink is not None else QueueSink()
    session_id = sessions.open(sink)
    try:
        yield format_sse("endpoint", f"{message_path}?sessionId={session_id}")

        while True:
            try:
                item = await asyncio.wait_for(sink.queue.get(), timeout=heartbeat_interval)
            except asyncio.TimeoutError:
                yield ": keep-alive\n\n"
                continue

            if item is _END_OF_STREAM:
                break

            try:
                data = json.dumps(item, allow_nan=False)
            except (TypeError, ValueError) as e:
                logger.error(f"[{session_id}] SSE transport error, reply not serializable: {e}")
                break
            yield format_sse("message", data)
    finally:
        sessions.close(session_id)
