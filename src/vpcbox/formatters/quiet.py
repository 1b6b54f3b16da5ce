"""Quiet output formatter - one-line summary."""

from vpcbox.boxes import VpcCBox
from vpcbox.models import CodecConfigRecord


def codec_string(record: CodecConfigRecord, fourcc: str = "vp09") -> str:
    """Return the short codec string, e.g. ``vp09.00.50.08``."""
    return f"{fourcc}.{record.profile:02d}.{record.level:02d}.{record.bit_depth:02d}"


def format_quiet(box: VpcCBox) -> str:
    """Format a vpcC box as one-line summary.

    Format: codec string | chroma | range | colour primaries/transfer/matrix
    """
    record = box.record
    parts = [codec_string(record)]

    # Chroma
    parts.append(f"chroma {record.chroma_subsampling_label}")

    # Range
    parts.append("full range" if record.video_full_range_flag else "limited range")

    # Colour description
    parts.append(
        f"colour {record.colour_primaries}/{record.transfer_characteristics}"
        f"/{record.matrix_coefficients}"
    )

    return " | ".join(parts)


def format_quiet_list(boxes: list[VpcCBox]) -> str:
    """Format multiple boxes as one-line summaries, one per line."""
    return "\n".join(format_quiet(b) for b in boxes)
