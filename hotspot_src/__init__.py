"""Hotspot widget server: an MCP widget catalog served over SSE and HTTP."""
