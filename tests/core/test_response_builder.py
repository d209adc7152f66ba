"""Tests for core/response_builder.py - dataset merge and result shape."""

import json

import pytest

from hotspot_src.core.errors import DatasetError, ErrorCode
from hotspot_src.core.response_builder import build_response, load_dataset, merge_arguments


class TestMergeArguments:
    """Tests for merge_arguments()."""

    def test_caller_value_wins(self):
        """Caller keys override canned keys; other canned keys survive."""
        assert merge_arguments({"a": 0, "b": 2}, {"a": 1}) == {"a": 1, "b": 2}

    def test_new_caller_keys_included(self):
        assert merge_arguments({"a": 0}, {"c": 3}) == {"a": 0, "c": 3}

    def test_empty_arguments_return_dataset_unchanged(self):
        dataset = {"a": 0}

        assert merge_arguments(dataset, {}) is dataset

    def test_merge_is_shallow(self):
        """Nested objects are replaced, not merged."""
        result = merge_arguments({"meta": {"x": 1, "y": 2}}, {"meta": {"x": 9}})

        assert result == {"meta": {"x": 9}}

    def test_dataset_not_mutated(self):
        dataset = {"a": 0}

        merge_arguments(dataset, {"a": 1})

        assert dataset == {"a": 0}


class TestLoadDataset:
    """Tests for load_dataset()."""

    def test_reads_object(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text('{"a": 1}')

        assert load_dataset(path) == {"a": 1}

    def test_missing_file(self, tmp_path):
        """Unreadable file is a DatasetError (internal error code)."""
        with pytest.raises(DatasetError, match="unreadable") as exc_info:
            load_dataset(tmp_path / "missing.json")

        assert exc_info.value.code == ErrorCode.INTERNAL_ERROR

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{not json")

        with pytest.raises(DatasetError, match="not valid JSON"):
            load_dataset(path)

    def test_non_object_json(self, tmp_path):
        """A top-level array cannot be merged into."""
        path = tmp_path / "data.json"
        path.write_text("[1, 2]")

        with pytest.raises(DatasetError, match="must be a JSON object"):
            load_dataset(path)

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_rejected(self, tmp_path, constant):
        """NaN and Infinity are not JSON; replies built from them could not be sent."""
        path = tmp_path / "data.json"
        path.write_text(f'{{"Topic": "x", "score": {constant}}}')

        with pytest.raises(DatasetError, match="not valid JSON"):
            load_dataset(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_bytes(b'{"Topic": "\xff"}')

        with pytest.raises(DatasetError):
            load_dataset(path)


class TestBuildResponse:
    """Tests for build_response()."""

    def test_no_arguments_returns_canned_dataset(self, registry):
        """structuredContent deep-equals the dataset when nothing is supplied."""
        widget = registry.by_id("hotspot")
        canned = json.loads(widget.dataset_path.read_text())

        assert build_response(widget, {})["structuredContent"] == canned

    def test_arguments_overlay_dataset(self, registry):
        widget = registry.by_id("hotspot")
        canned = json.loads(widget.dataset_path.read_text())

        result = build_response(widget, {"Topic": "AI"})

        assert result["structuredContent"] == {**canned, "Topic": "AI"}

    def test_text_and_meta_attached(self, registry):
        """Static response text and widget metadata are attached unmodified."""
        widget = registry.by_id("hotspot")

        result = build_response(widget, {})

        assert result["content"] == [{"type": "text", "text": "Rendered a hotspot!"}]
        assert result["_meta"] == widget.meta()

    def test_dataset_read_fresh_each_call(self, registry):
        """Edits to the dataset file are visible without a restart."""
        widget = registry.by_id("hotspot")
        build_response(widget, {})

        widget.dataset_path.write_text(json.dumps({"Topic": "edited"}))

        assert build_response(widget, {})["structuredContent"] == {"Topic": "edited"}

    def test_malformed_dataset_raises(self, registry):
        widget = registry.by_id("hotspot")
        widget.dataset_path.write_text("oops")

        with pytest.raises(DatasetError):
            build_response(widget, {})
