"""Default output formatter - labeled box fields."""

from vpcbox.boxes import Box, VpcCBox
from vpcbox.models import BoxInfo


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_info(box: Box) -> str:
    """Format a box as a header line followed by its labeled fields.

    Example:
        [vpcC] size=20 offset=1234
         - Profile: 0
         - Level: 50
    """
    header = f"[{box.box_type}] size={box.size()}"
    offset = getattr(box, "offset", None)
    if offset is not None:
        header += f" offset={offset}"

    lines = [header]
    for label, value in box.describe():
        lines.append(f" - {label}: {_format_value(value)}")

    # Trailing codec-specific data
    if isinstance(box, VpcCBox) and box.record.codec_initialization_data:
        lines.append(f" - CodecInitializationData: {box.record.codec_initialization_data.hex()}")

    return "\n".join(lines)


def format_box_tree(boxes: list[BoxInfo]) -> str:
    """Format walked boxes as an indented tree, one box per line."""
    lines = []
    for box in boxes:
        indent = "  " * box.depth
        line = f"{indent}{box.type} [{box.size} bytes] @ {box.offset}"
        if box.data_preview:
            line += f"  {box.data_preview}"
        lines.append(line)
    return "\n".join(lines)
