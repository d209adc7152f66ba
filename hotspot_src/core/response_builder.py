"""
Response Builder.

Merges a widget's canned dataset with validated caller arguments into a
tools/call result. The dataset is read on every call so it can be edited
while the server runs.
"""

import json
from pathlib import Path
from typing import Any

from hotspot_src.core.errors import DatasetError
from hotspot_src.models.widgets import WidgetDescriptor
from hotspot_src.widget_utils.logging_config import get_logger

logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON value")


def load_dataset(path: Path) -> dict[str, Any]:
    """Read a canned dataset.

    Raises:
        DatasetError: If the file cannot be read, is not valid JSON, or does
            not hold a JSON object.
    """
    try:
        data = json.loads(
            Path(path).read_text(encoding="utf-8"), parse_constant=_reject_constant
        )
    except OSError as e:
        raise DatasetError(f"Dataset unreadable: {path} ({e.strerror or e})") from e
    except ValueError as e:
        raise DatasetError(f"Dataset is not valid JSON: {path} ({e})") from e

    if not isinstance(data, dict):
        raise DatasetError(
            f"Dataset must be a JSON object, got {type(data).__name__}: {path}"
        )
    return data


def merge_arguments(dataset: dict[str, Any], arguments: dict[str, Any]) -> dict[str, Any]:
    """Overlay caller arguments onto a dataset (shallow, caller wins)."""
    if not arguments:
        return dataset
    return {**dataset, **arguments}


def build_response(widget: WidgetDescriptor, validated_args: dict[str, Any]) -> dict[str, Any]:
    """Build the tools/call result for a widget.

    Args:
        widget: Target widget.
        validated_args: Arguments already checked by validate_arguments().

    Returns:
        Result with a text content block, the merged structuredContent and
        the widget's capability metadata.

    Raises:
        DatasetError: If the widget's dataset is unreadable or malformed.
    """
    dataset = load_dataset(widget.dataset_path)
    structured_content = merge_arguments(dataset, validated_args)

    logger.debug(
        f"Built response for {widget.id}: {len(structured_content)} keys, "
        f"{len(validated_args)} from caller"
    )

    return {
        "content": [
            {
                "type": "text",
                "text": widget.response_text,
            }
        ],
        "structuredContent": structured_content,
        "_meta": widget.meta(),
    }
