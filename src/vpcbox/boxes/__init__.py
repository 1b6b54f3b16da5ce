"""Box codecs for vpcbox."""

from vpcbox.boxes.base import (
    BOX_TYPES,
    Box,
    BoxHeader,
    decode_box,
    fourcc_to_str,
    read_box_header,
    register_box,
    write_box_header,
)
from vpcbox.boxes.vpcc import VpcCBox

__all__ = [
    # Base class
    "Box",
    "BoxHeader",
    # Boxes
    "VpcCBox",
    # Runtime
    "BOX_TYPES",
    "register_box",
    "decode_box",
    "read_box_header",
    "write_box_header",
    "fourcc_to_str",
]
