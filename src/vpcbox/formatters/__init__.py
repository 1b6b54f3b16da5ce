"""Output formatters for vpcbox."""

from .default import format_box_tree, format_info
from .json import format_json, format_json_list, to_dict
from .quiet import codec_string, format_quiet, format_quiet_list

__all__ = [
    "format_info",
    "format_box_tree",
    "format_json",
    "format_json_list",
    "format_quiet",
    "format_quiet_list",
    "codec_string",
    "to_dict",
]
