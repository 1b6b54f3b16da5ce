"""Encode and decode vpcC box bodies.

Two wire layouts exist for the same record. The versioned layout starts with
a FullBox version/flags prefix and length-prefixes the codec initialization
data; the legacy layout has a single reserved byte and lets the init data run
to the end of the box. Decoding takes the layout explicitly. Encoding always
produces the versioned layout.
"""

from typing import Any

from vpcbox.bits import SliceReader, SliceWriter
from vpcbox.constants import (
    BOX_HEADER_SIZE,
    CHROMA_444,
    LEGACY_FIXED_SIZE,
    LEGACY_FORMAT_VERSION,
    MATRIX_RGB,
    MAX_INIT_DATA_SIZE,
    VPCC_FIXED_SIZE,
    VPCC_VERSION,
)
from vpcbox.errors import (
    InitDataTooLongError,
    InvalidChromaSubsamplingError,
    InvalidColorConstraintError,
    UnsupportedVersionError,
)
from vpcbox.models.record import CodecConfigRecord, RecordLayout, validate_record


def unpack_color_config(value: int) -> tuple[int, int, bool]:
    """Split the packed byte into bit depth, chroma subsampling and full range flag."""
    bit_depth = (value >> 4) & 0x0F
    chroma_subsampling = (value >> 1) & 0x07
    full_range = (value & 0x01) == 1
    return bit_depth, chroma_subsampling, full_range


def pack_color_config(bit_depth: int, chroma_subsampling: int, full_range: bool) -> int:
    """Inverse of unpack_color_config."""
    value = ((bit_depth & 0x0F) << 4) | ((chroma_subsampling & 0x07) << 1)
    if full_range:
        value |= 0x01
    return value


def decode_record(
    data: bytes,
    declared_length: int | None = None,
    layout: RecordLayout | str = RecordLayout.VERSIONED,
) -> CodecConfigRecord:
    """Decode a vpcC body (box header already stripped).

    Args:
        data: Body bytes
        declared_length: Body length declared by the box header; defaults to len(data)
        layout: Wire layout of the body

    Returns:
        Decoded CodecConfigRecord

    Raises:
        UnsupportedVersionError: Versioned layout with version != 1
        InvalidChromaSubsamplingError: Versioned layout with chroma subsampling > 3
        InvalidColorConstraintError: Versioned layout signalling RGB without 4:4:4
        TruncatedInputError: A field or the init data runs past the body
        InitDataTooLongError: Legacy layout init data longer than 65535 bytes
    """
    layout = RecordLayout(layout)
    if declared_length is None:
        declared_length = len(data)
    if layout is RecordLayout.LEGACY:
        return _decode_legacy(data, declared_length)
    return _decode_versioned(SliceReader(data, declared_length))


def _decode_versioned(sr: SliceReader) -> CodecConfigRecord:
    version = sr.read_uint8()
    if version != VPCC_VERSION:
        raise UnsupportedVersionError(version)
    flags = sr.read_uint24()

    profile = sr.read_uint8()
    level = sr.read_uint8()

    bit_depth, chroma_subsampling, full_range = unpack_color_config(sr.read_uint8())
    if chroma_subsampling > CHROMA_444:
        raise InvalidChromaSubsamplingError(chroma_subsampling)

    colour_primaries = sr.read_uint8()
    transfer_characteristics = sr.read_uint8()
    matrix_coefficients = sr.read_uint8()
    if matrix_coefficients == MATRIX_RGB and chroma_subsampling != CHROMA_444:
        raise InvalidColorConstraintError(matrix_coefficients, chroma_subsampling)

    init_data_length = sr.read_uint16()
    init_data = sr.read_bytes(init_data_length)

    return CodecConfigRecord(
        format_version=version,
        flags=flags,
        profile=profile,
        level=level,
        bit_depth=bit_depth,
        chroma_subsampling=chroma_subsampling,
        video_full_range_flag=full_range,
        colour_primaries=colour_primaries,
        transfer_characteristics=transfer_characteristics,
        matrix_coefficients=matrix_coefficients,
        codec_initialization_data=init_data,
    )


def _decode_legacy(data: bytes, declared_length: int) -> CodecConfigRecord:
    sr = SliceReader(data, declared_length)
    sr.skip(1)  # reserved

    profile = sr.read_uint8()
    level = sr.read_uint8()
    bit_depth, chroma_subsampling, full_range = unpack_color_config(sr.read_uint8())

    colour_primaries = sr.read_uint8()
    transfer_characteristics = sr.read_uint8()
    matrix_coefficients = sr.read_uint8()

    remaining = declared_length - LEGACY_FIXED_SIZE
    if remaining > MAX_INIT_DATA_SIZE:
        raise InitDataTooLongError(remaining, MAX_INIT_DATA_SIZE)
    init_data = sr.read_bytes(remaining) if remaining > 0 else b""

    return CodecConfigRecord(
        format_version=LEGACY_FORMAT_VERSION,
        flags=0,
        profile=profile,
        level=level,
        bit_depth=bit_depth,
        chroma_subsampling=chroma_subsampling,
        video_full_range_flag=full_range,
        colour_primaries=colour_primaries,
        transfer_characteristics=transfer_characteristics,
        matrix_coefficients=matrix_coefficients,
        codec_initialization_data=init_data,
    )


def encode_record_to(record: CodecConfigRecord, sw: SliceWriter, validate: bool = False) -> None:
    """Write the versioned layout of a record into ``sw``.

    Version is always written as 1 and flags as 0.

    Raises:
        FormatError: ``validate`` is set and the record breaks a constraint
        SinkFullError: ``sw`` has no room for the body
    """
    if validate:
        errors = validate_record(record)
        if errors:
            raise errors[0]

    init_data = bytes(record.codec_initialization_data)
    if len(init_data) > MAX_INIT_DATA_SIZE:
        raise InitDataTooLongError(len(init_data), MAX_INIT_DATA_SIZE)

    sw.write_uint8(VPCC_VERSION)
    sw.write_uint24(0)

    sw.write_uint8(record.profile)
    sw.write_uint8(record.level)
    sw.write_uint8(
        pack_color_config(
            record.bit_depth, record.chroma_subsampling, record.video_full_range_flag
        )
    )

    sw.write_uint8(record.colour_primaries)
    sw.write_uint8(record.transfer_characteristics)
    sw.write_uint8(record.matrix_coefficients)

    sw.write_uint16(len(init_data))
    if init_data:
        sw.write_bytes(init_data)


def encode_record(record: CodecConfigRecord, validate: bool = False) -> bytes:
    """Encode a record body in the versioned layout."""
    sw = SliceWriter(payload_size(record))
    encode_record_to(record, sw, validate=validate)
    return sw.getvalue()


def payload_size(record: CodecConfigRecord) -> int:
    return VPCC_FIXED_SIZE + len(record.codec_initialization_data)


def record_size(record: CodecConfigRecord, header_size: int = BOX_HEADER_SIZE) -> int:
    """Total box size: header plus the versioned body."""
    return header_size + payload_size(record)


def describe_record(record: CodecConfigRecord) -> list[tuple[str, Any]]:
    """Labeled scalar fields, in display order."""
    return [
        ("Profile", record.profile),
        ("Level", record.level),
        ("BitDepth", record.bit_depth),
        ("ChromaSubsampling", record.chroma_subsampling),
        ("VideoFullRangeFlag", record.video_full_range_flag),
        ("ColourPrimaries", record.colour_primaries),
        ("TransferCharacteristics", record.transfer_characteristics),
        ("MatrixCoefficients", record.matrix_coefficients),
    ]
