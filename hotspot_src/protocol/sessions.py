"""Session Manager.

Demultiplexes concurrent streaming clients: each open stream gets a session
id and its own ProtocolHandler. The session map is the only mutable state
shared between connections; its lock is held for dict updates only, never
across an await or while a handler runs.

Lifecycle:
    OPEN    stream established, nothing routed yet
    ACTIVE  at least one message routed
    CLOSED  stream ended, errored, or closed explicitly (terminal)
"""

import asyncio
import threading
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Protocol

from hotspot_src.core.errors import TransportError, UnknownSession
from hotspot_src.core.registry import WidgetRegistry
from hotspot_src.protocol.handler import ProtocolHandler
from hotspot_src.widget_utils.logging_config import get_logger

logger = get_logger(__name__)


class SessionState(Enum):
    OPEN = "open"
    ACTIVE = "active"
    CLOSED = "closed"


class MessageSink(Protocol):
    """Output side of a session stream."""

    def send(self, message: dict[str, Any]) -> None:
        """Queue a reply for the client. Raises TransportError if the stream is unusable."""
        ...

    def close(self) -> None:
        """Signal end of stream."""
        ...


@dataclass
class Session:
    session_id: str
    handler: ProtocolHandler
    sink: MessageSink
    state: SessionState = SessionState.OPEN
    opened_at: float = field(default_factory=time.time)


HandlerFactory = Callable[[WidgetRegistry, str], ProtocolHandler]


class SessionManager:
    """Tracks open streaming sessions keyed by session id."""

    def __init__(
        self,
        registry: WidgetRegistry,
        handler_factory: Optional[HandlerFactory] = None,
    ):
        self._registry = registry
        self._handler_factory: HandlerFactory = handler_factory or ProtocolHandler
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _new_session_id() -> str:
        return str(uuid.uuid4())

    def open(self, sink: MessageSink) -> str:
        """Register a new stream.

        Args:
            sink: Where replies for this session are written.

        Returns:
            A random session id not used by any open session.
        """
        with self._lock:
            session_id = self._new_session_id()
            while session_id in self._sessions:
                session_id = self._new_session_id()

            handler = self._handler_factory(self._registry, session_id)
            self._sessions[session_id] = Session(session_id, handler, sink)
            count = len(self._sessions)

        logger.info(f"Session opened: {session_id} ({count} open)")
        return session_id

    def get(self, session_id: str) -> Optional[Session]:
        with self._lock:
            return self._sessions.get(session_id)

    async def route(self, session_id: str, message: Any) -> None:
        """Deliver a decoded message to the session's handler.

        The handler runs in a worker thread; its reply (if any) is written to
        the session sink.

        Raises:
            UnknownSession: If the id is not currently open.
            TransportError: If the sink can no longer accept messages.
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise UnknownSession(f"Unknown session: {session_id}")
            if session.state is SessionState.OPEN:
                session.state = SessionState.ACTIVE

        reply = await asyncio.to_thread(session.handler.handle, message)
        if reply is None:
            return

        with self._lock:
            closed = session.state is SessionState.CLOSED
        if closed:
            logger.debug(f"[{session_id}] Reply dropped, session closed meanwhile")
            return

        session.sink.send(reply)

    def close(self, session_id: str) -> bool:
        """Release a session. Closing an unknown or closed id is a no-op.

        Returns:
            True if this call closed the session.
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
            if session is None:
                return False
            session.state = SessionState.CLOSED
            count = len(self._sessions)

        session.handler.close()
        try:
            session.sink.close()
        except TransportError as e:
            logger.debug(f"[{session_id}] Sink already unusable at close: {e}")

        lifetime = time.time() - session.opened_at
        logger.info(f"Session closed: {session_id} after {lifetime:.0f}s ({count} open)")
        return True

    def close_all(self) -> int:
        """Close every open session (server shutdown).

        Returns:
            Number of sessions closed.
        """
        return sum(1 for session_id in self.session_ids() if self.close(session_id))

    def session_ids(self) -> list[str]:
        with self._lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions
