"""Tests for protocol/handler.py - per-session protocol state."""

from unittest.mock import patch

from hotspot_src.protocol.handler import ProtocolHandler


class TestProtocolHandler:
    """Tests for ProtocolHandler.handle()."""

    def test_request_gets_reply(self, registry):
        handler = ProtocolHandler(registry, "s1")

        reply = handler.handle({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})

        assert reply["id"] == 1
        assert handler.requests_handled == 1

    def test_initialize_records_client(self, registry):
        """Client info from the handshake is kept on the handler."""
        handler = ProtocolHandler(registry, "s1")

        handler.handle(
            {
                "jsonrpc": "2.0",
                "id": 1,
                "method": "initialize",
                "params": {
                    "protocolVersion": "2024-11-05",
                    "clientInfo": {"name": "inspector", "version": "1.2.0"},
                },
            }
        )

        assert handler.client_info.name == "inspector"
        assert handler.client_info.version == "1.2.0"

    def test_initialize_with_malformed_params(self, registry):
        """A bad clientInfo does not stop the handshake."""
        handler = ProtocolHandler(registry, "s1")

        reply = handler.handle(
            {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {"clientInfo": 5}}
        )

        assert "result" in reply
        assert handler.client_info.name == "unknown"

    def test_initialized_notification(self, registry):
        """Notifications get no reply and mark the handshake complete."""
        handler = ProtocolHandler(registry, "s1")

        reply = handler.handle({"jsonrpc": "2.0", "method": "notifications/initialized"})

        assert reply is None
        assert handler.initialized is True
        assert handler.requests_handled == 0

    def test_unknown_notification_ignored(self, registry):
        handler = ProtocolHandler(registry, "s1")

        assert handler.handle({"jsonrpc": "2.0", "method": "notifications/cancelled"}) is None

    def test_client_response_ignored(self, registry):
        """Responses from the client are not treated as requests."""
        handler = ProtocolHandler(registry, "s1")

        assert handler.handle({"jsonrpc": "2.0", "id": 4, "result": {}}) is None

    def test_invalid_request(self, registry):
        handler = ProtocolHandler(registry, "s1")

        reply = handler.handle({"jsonrpc": "2.0", "id": 2, "method": ""})

        assert reply["error"]["code"] == -32600
        assert reply["id"] == 2

    def test_closed_handler_drops_messages(self, registry):
        handler = ProtocolHandler(registry, "s1")
        handler.close()

        assert handler.closed is True
        assert handler.handle({"jsonrpc": "2.0", "id": 1, "method": "ping"}) is None

    def test_requests_go_through_shared_dispatcher(self, registry):
        """Session handling reuses dispatch_request rather than its own routing."""
        handler = ProtocolHandler(registry, "s1")

        with patch(
            "hotspot_src.protocol.handler.dispatch_request", return_value={"id": 1}
        ) as mock_dispatch:
            reply = handler.handle({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})

        assert reply == {"id": 1}
        (called_registry, request), _ = mock_dispatch.call_args
        assert called_registry is registry
        assert request.method == "tools/list"
