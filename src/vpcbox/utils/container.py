"""Container format walking utilities."""

import struct
import warnings
from collections.abc import Iterator
from typing import BinaryIO

from vpcbox.boxes import BoxHeader, VpcCBox, fourcc_to_str
from vpcbox.config import get_config
from vpcbox.errors import FormatError
from vpcbox.models import BoxInfo, RecordLayout

# MP4/MOV container boxes that can contain child boxes
CONTAINER_BOXES = [
    "moov",
    "trak",
    "mdia",
    "minf",
    "stbl",
    "stsd",
    "udta",
    "meta",
    "edts",
    "dinf",
    "mvex",
    "moof",
    "traf",
    "sinf",
    "schi",
    # VP8/VP9 visual sample entries carry vpcC as a child
    "vp08",
    "vp09",
    "encv",
]

# Bytes between a container's header and its first child
CHILD_OFFSETS = {
    "meta": 4,  # version/flags
    "stsd": 8,  # version/flags + entry_count
    "vp08": 78,  # VisualSampleEntry fields
    "vp09": 78,
    "encv": 78,
}

# MP4/MOV file extensions
MP4_EXTENSIONS = [".mp4", ".m4v", ".mov", ".3gp", ".3g2", ".cmfv", ".m4s", ".mp4v"]


def iter_boxes(
    f: BinaryIO, start: int, end: int, depth: int = 0, max_depth: int = 8
) -> Iterator[BoxInfo]:
    """Walk the boxes between ``start`` and ``end`` depth first.

    Positions are tracked explicitly, so the caller may read from ``f``
    between items.

    Args:
        f: Seekable binary file
        start: Offset of the first box header
        end: Offset just past the last box
        depth: Depth reported for boxes at this level
        max_depth: Maximum depth to recurse into container boxes

    Yields:
        BoxInfo for every box, parents before children
    """
    pos = start
    while pos + 8 <= end:
        f.seek(pos)
        header = f.read(8)
        if len(header) < 8:
            break

        size, box_type_bytes = struct.unpack(">I4s", header)
        box_type = fourcc_to_str(box_type_bytes)
        header_size = 8

        # Handle extended size
        if size == 1:
            ext_size = f.read(8)
            if len(ext_size) < 8:
                break
            size = struct.unpack(">Q", ext_size)[0]
            header_size = 16
        elif size == 0:
            size = end - pos

        if size < header_size or pos + size > end:
            break

        yield BoxInfo(
            type=box_type,
            size=size,
            offset=pos,
            depth=depth,
            header_size=header_size,
        )

        # Recurse into container boxes
        if box_type in CONTAINER_BOXES and depth < max_depth:
            child_start = pos + header_size + CHILD_OFFSETS.get(box_type, 0)
            yield from iter_boxes(f, child_start, pos + size, depth + 1, max_depth)

        pos += size


def _file_size(f: BinaryIO) -> int:
    f.seek(0, 2)
    return f.tell()


def parse_mp4_boxes(file_path: str, max_depth: int = 8) -> list[BoxInfo]:
    """Parse MP4/MOV box structure.

    Args:
        file_path: Path to the media file
        max_depth: Maximum depth to recurse into container boxes

    Returns:
        List of BoxInfo objects representing the box structure
    """
    boxes: list[BoxInfo] = []
    with open(file_path, "rb") as f:
        for box_info in iter_boxes(f, 0, _file_size(f), max_depth=max_depth):
            # Keep a preview of vpcC bodies
            if box_info.type == VpcCBox.box_type:
                f.seek(box_info.payload_offset)
                box_info.data_preview = f.read(min(box_info.payload_size, 50)).hex()
            boxes.append(box_info)
    return boxes


def scan_vpcc_boxes(
    f: BinaryIO,
    layout: RecordLayout | str | None = None,
    strict: bool | None = None,
) -> list[VpcCBox]:
    """Decode every vpcC box in a seekable stream.

    Args:
        f: Seekable binary stream positioned anywhere
        layout: Wire layout of the vpcC bodies; defaults to the configured layout
        strict: Re-raise the first decode error instead of skipping the box;
            defaults to the configured value

    Returns:
        Decoded boxes in file order, with ``offset`` set

    Raises:
        FormatError: A vpcC box failed to decode and ``strict`` is set
    """
    config = get_config()
    if layout is None:
        layout = config.decode.layout
    if strict is None:
        strict = config.decode.strict

    found: list[VpcCBox] = []
    for box_info in iter_boxes(f, 0, _file_size(f)):
        if box_info.type != VpcCBox.box_type:
            continue
        f.seek(box_info.payload_offset)
        body = f.read(box_info.payload_size)
        header = BoxHeader(type=box_info.type, size=box_info.size, header_size=box_info.header_size)
        try:
            box = VpcCBox.decode(header, body, layout=layout)
        except FormatError as e:
            if strict:
                raise
            warnings.warn(f"Skipping vpcC box at offset {box_info.offset}: {e}", stacklevel=2)
            continue
        box.offset = box_info.offset
        found.append(box)
    return found


def find_vpcc_boxes(
    file_path: str,
    layout: RecordLayout | str | None = None,
    strict: bool | None = None,
) -> list[VpcCBox]:
    """Decode every vpcC box in a file.

    Raises:
        FileNotFoundError: If the file does not exist
        FormatError: A vpcC box failed to decode and ``strict`` is set
    """
    with open(file_path, "rb") as f:
        return scan_vpcc_boxes(f, layout=layout, strict=strict)
