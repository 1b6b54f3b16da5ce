"""Utility functions for vpcbox."""

from .container import (
    CHILD_OFFSETS,
    CONTAINER_BOXES,
    MP4_EXTENSIONS,
    find_vpcc_boxes,
    iter_boxes,
    parse_mp4_boxes,
    scan_vpcc_boxes,
)

__all__ = [
    # Container walking
    "iter_boxes",
    "parse_mp4_boxes",
    "scan_vpcc_boxes",
    "find_vpcc_boxes",
    "CONTAINER_BOXES",
    "CHILD_OFFSETS",
    "MP4_EXTENSIONS",
]
