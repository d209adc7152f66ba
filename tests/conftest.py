"""
Pytest fixtures for the widget server tests.

Builds a small throwaway catalog on disk (assets + canned datasets) so the
registry, dispatcher and transports can be exercised without the real
front-end build.
"""

import json
from pathlib import Path
from typing import Any

import pytest

from hotspot_src.core.registry import WidgetRegistry, load_registry
from hotspot_src.models.widgets import FieldSpec, InputSchema, WidgetSpec


# === Fake sink ===


class RecordingSink:
    """MessageSink that keeps every reply in memory."""

    def __init__(self, fail_with: Exception = None):
        self.messages: list[dict[str, Any]] = []
        self.close_count = 0
        self._fail_with = fail_with

    def send(self, message: dict[str, Any]) -> None:
        if self._fail_with is not None:
            raise self._fail_with
        self.messages.append(message)

    def close(self) -> None:
        self.close_count += 1


# === Catalog on disk ===

HOTSPOT_DATA = {
    "Topic": "default topic",
    "items": [{"title": "First", "score": 3}],
}

DRAFT_DATA = {
    "title": "Draft",
    "content": "Body",
    "image_list": [],
}


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def assets_dir(tmp_path) -> Path:
    """Built widget HTML: one plain file and one hashed family."""
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "hotspot.html").write_text("<div id='hotspot-root'></div>", encoding="utf-8")
    (assets / "post-draft-1a2b.html").write_text("<div>old build</div>", encoding="utf-8")
    (assets / "post-draft-9f8e.html").write_text("<div>new build</div>", encoding="utf-8")
    return assets


@pytest.fixture
def data_dir(tmp_path) -> Path:
    data = tmp_path / "mock_data"
    write_json(data / "hotspot" / "mock-data.json", HOTSPOT_DATA)
    write_json(data / "post-draft" / "mock-data.json", DRAFT_DATA)
    return data


@pytest.fixture
def widget_specs() -> list[WidgetSpec]:
    return [
        WidgetSpec(
            id="hotspot",
            title="Show Hotspot",
            template_uri="ui://widget/hotspot.html",
            invoking="Creating a hotspot",
            invoked="Hotspot created",
            response_text="Rendered a hotspot!",
            input_schema=InputSchema(
                properties={"Topic": FieldSpec(type="string")},
                required=["Topic"],
            ),
            dataset="hotspot/mock-data.json",
        ),
        WidgetSpec(
            id="post-draft",
            title="Post Draft",
            template_uri="ui://widget/post-draft.html",
            invoking="Creating a post draft",
            invoked="Post draft created",
            response_text="Rendered post draft!",
            input_schema=InputSchema(
                properties={
                    "title": FieldSpec(type="string"),
                    "content": FieldSpec(type="string"),
                    "image_list": FieldSpec(type="array", items=FieldSpec(type="string")),
                },
            ),
            dataset="post-draft/mock-data.json",
        ),
    ]


@pytest.fixture
def registry(widget_specs, assets_dir, data_dir) -> WidgetRegistry:
    return load_registry(widget_specs, assets_dir, data_dir, server_name="test-node")


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink():
    """Factory for sinks whose send() raises the given error."""
    return lambda error: RecordingSink(fail_with=error)
