"""Tests for protocol/lifecycle.py - process startup."""

import logging
import sys
from unittest.mock import patch

import pytest

from hotspot_src.core.errors import AssetNotFound
from hotspot_src.protocol.lifecycle import build_registry, setup_process


class TestSetupProcess:
    """Tests for setup_process()."""

    def test_configures_logging_level(self):
        with patch("hotspot_src.protocol.lifecycle.configure_root_logger") as mock_configure:
            setup_process("DEBUG")

        mock_configure.assert_called_once_with(level="DEBUG")


class TestBuildRegistry:
    """Tests for build_registry()."""

    def test_builds_post_catalog(self, tmp_path):
        """A complete asset directory yields the full catalog."""
        assets = tmp_path / "assets"
        assets.mkdir()
        (assets / "post.html").write_text("<div>post</div>")
        (assets / "post-scraping-abc.html").write_text("<div>scraping</div>")

        registry = build_registry("post", assets, tmp_path / "mock_data")

        assert registry.server_name == "post-node"
        assert registry.ids() == ["post", "post-scraping"]

    def test_missing_assets_is_fatal(self, tmp_path):
        with pytest.raises(AssetNotFound):
            build_registry("hotspot", tmp_path / "missing", tmp_path)

    def test_unknown_catalog(self, tmp_path):
        with pytest.raises(ValueError):
            build_registry("nope", tmp_path, tmp_path)


class TestLoggingConfig:
    """Tests for widget_utils/logging_config.py."""

    def test_redaction(self):
        from hotspot_src.widget_utils.logging_config import RedactionFilter

        record = logging.LogRecord(
            "test", logging.INFO, __file__, 1, "token Bearer abc.def for a@b.com", None, None
        )
        RedactionFilter().filter(record)

        assert "abc.def" not in record.msg
        assert "a@b.com" not in record.msg

    def test_plain_handler_when_not_a_terminal(self):
        from rich.logging import RichHandler

        from hotspot_src.widget_utils.logging_config import configure_root_logger

        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_root_logger(level="WARNING", use_rich=False)

            assert root.level == logging.WARNING
            assert len(root.handlers) == 1
            assert not isinstance(root.handlers[0], RichHandler)
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_formatter_plain_line(self):
        """Without color the level tag is plain text, padded to five characters."""
        from hotspot_src.widget_utils.logging_config import HotspotFormatter

        record = logging.LogRecord(
            "hotspot_src.core.registry", logging.WARNING, __file__, 1, "no %s", ("assets",), None
        )

        line = HotspotFormatter(color=False).format(record)

        assert line.endswith(" WARN  hotspot_src.core.registry: no assets")
        assert "\033[" not in line

    def test_formatter_colors_level_tag(self):
        from hotspot_src.widget_utils.logging_config import HotspotFormatter

        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)

        assert "\033[31mERROR\033[0m" in HotspotFormatter(color=True).format(record)

    def test_formatter_appends_traceback(self):
        from hotspot_src.widget_utils.logging_config import HotspotFormatter

        try:
            raise RuntimeError("kaput")
        except RuntimeError:
            record = logging.LogRecord(
                "x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )

        line = HotspotFormatter(color=False).format(record)

        assert line.splitlines()[0].endswith("x: failed")
        assert "RuntimeError: kaput" in line
