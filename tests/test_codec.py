"""Tests for the vpcC record codec."""

import pydantic
import pytest

from vpcbox.codec import (
    decode_record,
    describe_record,
    encode_record,
    pack_color_config,
    record_size,
    unpack_color_config,
)
from vpcbox.constants import BOX_HEADER_SIZE
from vpcbox.errors import (
    InitDataTooLongError,
    InvalidChromaSubsamplingError,
    InvalidColorConstraintError,
    TruncatedInputError,
    UnsupportedVersionError,
)
from vpcbox.models import CodecConfigRecord, RecordLayout, validate_record

PROFILE0_BODY = bytes.fromhex("010000000032800101010000")
HDR_BODY = bytes.fromhex("0100000002 29 a7 09 10 09 0000")


def _body(color_config: int, matrix: int = 1, version: int = 1) -> bytes:
    return bytes([version, 0, 0, 0, 0, 10, color_config, 1, 1, matrix, 0, 0])


class TestEncode:
    """Test versioned layout encoding."""

    def test_profile0_example(self, profile0_record):
        assert encode_record(profile0_record) == PROFILE0_BODY

    def test_hdr_example(self, hdr_record):
        encoded = encode_record(hdr_record)
        assert encoded[6] == 0xA7
        assert encoded == HDR_BODY

    def test_init_data_is_length_prefixed(self, profile0_record):
        profile0_record.codec_initialization_data = b"\xde\xad\xbe"
        encoded = encode_record(profile0_record)
        assert encoded[10:12] == b"\x00\x03"
        assert encoded[12:] == b"\xde\xad\xbe"

    def test_flags_always_zero(self, profile0_record):
        profile0_record.flags = 0xABCDEF
        assert encode_record(profile0_record)[1:4] == b"\x00\x00\x00"

    def test_version_always_one(self, profile0_record):
        profile0_record.format_version = 0
        assert encode_record(profile0_record)[0] == 1

    def test_validate_rejects_invalid_record(self):
        record = CodecConfigRecord(matrix_coefficients=0, chroma_subsampling=1)
        with pytest.raises(InvalidColorConstraintError):
            encode_record(record, validate=True)

    def test_without_validation_invalid_record_encodes(self):
        record = CodecConfigRecord(matrix_coefficients=0, chroma_subsampling=1)
        assert len(encode_record(record)) == 12


class TestDecodeVersioned:
    """Test versioned layout decoding."""

    def test_profile0_example(self, profile0_record):
        assert decode_record(PROFILE0_BODY) == profile0_record

    def test_hdr_example(self, hdr_record):
        record = decode_record(HDR_BODY)
        assert record == hdr_record
        assert record.bit_depth == 10
        assert record.chroma_subsampling == 3
        assert record.video_full_range_flag is True

    def test_flags_preserved(self):
        body = bytearray(PROFILE0_BODY)
        body[1:4] = b"\x00\x01\x02"
        assert decode_record(bytes(body)).flags == 0x000102

    @pytest.mark.parametrize("version", [0, 2, 255])
    def test_unsupported_version(self, version):
        with pytest.raises(UnsupportedVersionError) as exc_info:
            decode_record(_body(0x80, version=version))
        assert exc_info.value.version == version

    @pytest.mark.parametrize("chroma", [4, 5, 6, 7])
    def test_invalid_chroma_subsampling(self, chroma):
        with pytest.raises(InvalidChromaSubsamplingError) as exc_info:
            decode_record(_body((8 << 4) | (chroma << 1)))
        assert exc_info.value.value == chroma

    @pytest.mark.parametrize("chroma", [0, 1, 2])
    def test_rgb_requires_444(self, chroma):
        with pytest.raises(InvalidColorConstraintError) as exc_info:
            decode_record(_body((8 << 4) | (chroma << 1), matrix=0))
        assert exc_info.value.chroma_subsampling == chroma

    def test_rgb_with_444(self):
        record = decode_record(_body((8 << 4) | (3 << 1), matrix=0))
        assert record.is_rgb
        assert record.chroma_subsampling == 3

    def test_truncated_fixed_fields(self):
        with pytest.raises(TruncatedInputError):
            decode_record(PROFILE0_BODY[:7])

    def test_empty_body(self):
        with pytest.raises(TruncatedInputError):
            decode_record(b"")

    def test_truncated_init_data(self):
        body = PROFILE0_BODY[:10] + b"\x00\x04" + b"\x01\x02"
        with pytest.raises(TruncatedInputError) as exc_info:
            decode_record(body)
        assert exc_info.value.needed == 4
        assert exc_info.value.available == 2

    def test_declared_length_bounds_reads(self):
        body = PROFILE0_BODY[:10] + b"\x00\x02" + b"\x01\x02"
        with pytest.raises(TruncatedInputError):
            decode_record(body, declared_length=13)

    def test_trailing_bytes_ignored(self, profile0_record):
        assert decode_record(PROFILE0_BODY + b"\xff\xff") == profile0_record

    def test_init_data_is_copied(self):
        body = bytearray(PROFILE0_BODY[:10] + b"\x00\x02" + b"\x01\x02")
        record = decode_record(body)
        body[12] = 0xFF
        assert record.codec_initialization_data == b"\x01\x02"


class TestDecodeLegacy:
    """Test legacy layout decoding."""

    LEGACY_BODY = bytes.fromhex("00 02 29 a7 09 10 09")

    def test_fixed_fields(self):
        record = decode_record(self.LEGACY_BODY, layout=RecordLayout.LEGACY)
        assert record.format_version == 0
        assert record.flags == 0
        assert record.profile == 2
        assert record.level == 41
        assert record.bit_depth == 10
        assert record.chroma_subsampling == 3
        assert record.video_full_range_flag is True
        assert record.colour_primaries == 9
        assert record.transfer_characteristics == 16
        assert record.matrix_coefficients == 9
        assert record.codec_initialization_data == b""

    def test_layout_by_name(self):
        record = decode_record(self.LEGACY_BODY, layout="legacy")
        assert record.profile == 2

    def test_reserved_byte_not_validated(self):
        record = decode_record(b"\x7f" + self.LEGACY_BODY[1:], layout=RecordLayout.LEGACY)
        assert record.level == 41

    def test_init_data_fills_rest_of_box(self):
        record = decode_record(self.LEGACY_BODY + b"\xaa\xbb", layout=RecordLayout.LEGACY)
        assert record.codec_initialization_data == b"\xaa\xbb"

    def test_init_data_uses_declared_length(self):
        record = decode_record(
            self.LEGACY_BODY + b"\xaa\xbb\xcc", declared_length=8, layout=RecordLayout.LEGACY
        )
        assert record.codec_initialization_data == b"\xaa"

    def test_declared_length_past_data(self):
        with pytest.raises(TruncatedInputError):
            decode_record(self.LEGACY_BODY, declared_length=10, layout=RecordLayout.LEGACY)

    def test_no_chroma_range_check(self):
        body = bytes([0, 1, 10, (8 << 4) | (5 << 1), 1, 1, 1])
        record = decode_record(body, layout=RecordLayout.LEGACY)
        assert record.chroma_subsampling == 5
        errors = validate_record(record)
        assert len(errors) == 1
        assert isinstance(errors[0], InvalidChromaSubsamplingError)

    def test_reencodes_as_versioned(self):
        record = decode_record(self.LEGACY_BODY, layout=RecordLayout.LEGACY)
        assert encode_record(record) == HDR_BODY

    def test_init_data_over_16_bits(self):
        body = self.LEGACY_BODY + b"\x00" * 70000
        with pytest.raises(InitDataTooLongError) as exc_info:
            decode_record(body, layout=RecordLayout.LEGACY)
        assert exc_info.value.length == 70000

    def test_init_data_at_16_bit_limit(self):
        body = self.LEGACY_BODY + b"\x01" * 0xFFFF
        record = decode_record(body, layout=RecordLayout.LEGACY)
        assert len(record.codec_initialization_data) == 0xFFFF


class TestRoundTrip:
    """Test decode(encode(record)) == record."""

    def test_profile0(self, profile0_record):
        assert decode_record(encode_record(profile0_record)) == profile0_record

    def test_hdr(self, hdr_record):
        assert decode_record(encode_record(hdr_record)) == hdr_record

    def test_with_init_data(self, hdr_record):
        hdr_record.codec_initialization_data = bytes(range(40))
        assert decode_record(encode_record(hdr_record)) == hdr_record

    @pytest.mark.parametrize("full_range", [False, True])
    @pytest.mark.parametrize("chroma", [0, 1, 2, 3])
    @pytest.mark.parametrize("bit_depth", range(16))
    def test_color_config_combinations(self, bit_depth, chroma, full_range):
        record = CodecConfigRecord(
            profile=1,
            level=31,
            bit_depth=bit_depth,
            chroma_subsampling=chroma,
            video_full_range_flag=full_range,
        )
        assert decode_record(encode_record(record, validate=True)) == record

    def test_rgb_444(self):
        record = CodecConfigRecord(
            profile=1,
            bit_depth=8,
            chroma_subsampling=3,
            colour_primaries=1,
            transfer_characteristics=13,
            matrix_coefficients=0,
            codec_initialization_data=b"\x05\x06",
        )
        decoded = decode_record(encode_record(record, validate=True))
        assert decoded == record
        assert decoded.is_rgb

    def test_none_and_empty_init_data_compare_equal(self):
        from_none = CodecConfigRecord(codec_initialization_data=None)
        from_empty = CodecConfigRecord(codec_initialization_data=b"")
        assert from_none == from_empty
        assert decode_record(encode_record(from_none)) == from_empty


class TestSize:
    """Test size reporting."""

    @pytest.mark.parametrize("init_size", [0, 1, 300])
    def test_size_matches_encoding(self, hdr_record, init_size):
        hdr_record.codec_initialization_data = b"\x00" * init_size
        assert record_size(hdr_record) == BOX_HEADER_SIZE + len(encode_record(hdr_record))
        assert record_size(hdr_record) == 20 + init_size


class TestValidate:
    """Test cross-field validation."""

    def test_valid_record(self, profile0_record):
        assert validate_record(profile0_record) == []
        assert profile0_record.validate_constraints() == []

    def test_both_violations_reported(self):
        record = CodecConfigRecord(chroma_subsampling=6, matrix_coefficients=0)
        errors = validate_record(record)
        assert [type(e) for e in errors] == [
            InvalidChromaSubsamplingError,
            InvalidColorConstraintError,
        ]

    def test_field_ranges(self):
        with pytest.raises(pydantic.ValidationError):
            CodecConfigRecord(bit_depth=16)
        with pytest.raises(pydantic.ValidationError):
            CodecConfigRecord(flags=1 << 24)

    def test_assignment_is_range_checked(self, profile0_record):
        with pytest.raises(pydantic.ValidationError):
            profile0_record.level = 256
        with pytest.raises(pydantic.ValidationError):
            profile0_record.chroma_subsampling = 8


class TestColorConfig:
    """Test bit packing of the color config byte."""

    def test_pack(self):
        assert pack_color_config(10, 3, True) == 0xA7
        assert pack_color_config(8, 0, False) == 0x80

    def test_unpack(self):
        assert unpack_color_config(0xA7) == (10, 3, True)
        assert unpack_color_config(0x80) == (8, 0, False)
        assert unpack_color_config(0xFF) == (15, 7, True)


def test_describe_order(hdr_record):
    assert describe_record(hdr_record) == [
        ("Profile", 2),
        ("Level", 41),
        ("BitDepth", 10),
        ("ChromaSubsampling", 3),
        ("VideoFullRangeFlag", True),
        ("ColourPrimaries", 9),
        ("TransferCharacteristics", 16),
        ("MatrixCoefficients", 9),
    ]
