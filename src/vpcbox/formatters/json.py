"""JSON output formatter."""

import json
from typing import Any

from vpcbox.boxes import VpcCBox


def to_dict(box: VpcCBox) -> dict[str, Any]:
    """Convert a vpcC box to a JSON-ready dictionary.

    Args:
        box: VpcCBox object

    Returns:
        Dictionary with type, size, offset and record fields
    """
    return {
        "type": box.box_type,
        "size": box.size(),
        "offset": box.offset,
        "record": box.record.model_dump(mode="json"),
    }


def format_json(box: VpcCBox, indent: int = 2) -> str:
    """Format a box as JSON string."""
    return json.dumps(to_dict(box), indent=indent, ensure_ascii=False)


def format_json_list(boxes: list[VpcCBox], indent: int = 2) -> str:
    """Format multiple boxes as JSON array.

    Args:
        boxes: List of VpcCBox objects
        indent: JSON indentation level

    Returns:
        JSON array formatted string
    """
    data = [to_dict(b) for b in boxes]
    return json.dumps(data, indent=indent, ensure_ascii=False)
