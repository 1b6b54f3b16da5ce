"""vpcbox - VP codec configuration (vpcC) box toolkit.

Decode, validate and encode the vpcC box that describes VP8/VP9 streams in
ISO base media files.

Usage:
    from vpcbox import CodecConfigRecord, VpcCBox, decode_record, find_vpcc_boxes

    # Decode a box body
    record = decode_record(bytes.fromhex("010000000032800101010000"))
    print(record.profile, record.level, record.bit_depth)

    # Build a box and serialize it
    box = VpcCBox(CodecConfigRecord(profile=2, level=41, bit_depth=10))
    data = box.encode(validate=True)

    # Find every vpcC box in a file
    for box in find_vpcc_boxes("video.mp4"):
        print(box.describe())
"""

from vpcbox._version import __version__
from vpcbox.boxes import Box, BoxHeader, VpcCBox, decode_box, register_box
from vpcbox.codec import (
    decode_record,
    describe_record,
    encode_record,
    pack_color_config,
    record_size,
    unpack_color_config,
)
from vpcbox.errors import (
    FormatError,
    InitDataTooLongError,
    InvalidChromaSubsamplingError,
    InvalidColorConstraintError,
    SinkFullError,
    TruncatedInputError,
    UnknownBoxTypeError,
    UnsupportedVersionError,
)
from vpcbox.formatters import (
    codec_string,
    format_info,
    format_json,
    format_quiet,
    to_dict,
)
from vpcbox.models import BoxInfo, CodecConfigRecord, RecordLayout, validate_record
from vpcbox.utils import find_vpcc_boxes, parse_mp4_boxes, scan_vpcc_boxes

__all__ = [
    # Version
    "__version__",
    # Record
    "CodecConfigRecord",
    "RecordLayout",
    "decode_record",
    "encode_record",
    "record_size",
    "validate_record",
    "describe_record",
    "pack_color_config",
    "unpack_color_config",
    # Boxes
    "Box",
    "BoxHeader",
    "VpcCBox",
    "BoxInfo",
    "decode_box",
    "register_box",
    # Files
    "find_vpcc_boxes",
    "scan_vpcc_boxes",
    "parse_mp4_boxes",
    # Formatters
    "format_info",
    "format_quiet",
    "format_json",
    "to_dict",
    "codec_string",
    # Errors
    "FormatError",
    "UnsupportedVersionError",
    "InvalidChromaSubsamplingError",
    "InvalidColorConstraintError",
    "TruncatedInputError",
    "InitDataTooLongError",
    "UnknownBoxTypeError",
    "SinkFullError",
]
