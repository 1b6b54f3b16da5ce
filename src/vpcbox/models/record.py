"""VP codec configuration record model."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from vpcbox.constants import (
    CHROMA_444,
    CHROMA_SUBSAMPLING_LABELS,
    MATRIX_RGB,
    MAX_INIT_DATA_SIZE,
    VPCC_VERSION,
)
from vpcbox.errors import FormatError, InvalidChromaSubsamplingError, InvalidColorConstraintError


class RecordLayout(str, Enum):
    """Wire layout of a vpcC body."""

    # version(1) + flags(3) + fields + 16-bit init data length
    VERSIONED = "versioned"
    # reserved(1) + fields; init data fills the rest of the box
    LEGACY = "legacy"


class CodecConfigRecord(BaseModel):
    """Fields of a vpcC box body.

    Range checks follow the bit widths on the wire. The colour description
    values are not checked against the colour standard tables.
    """

    format_version: int = Field(default=VPCC_VERSION, ge=0, le=0xFF)
    flags: int = Field(default=0, ge=0, le=0xFFFFFF)
    profile: int = Field(default=0, ge=0, le=0xFF)
    level: int = Field(default=0, ge=0, le=0xFF)
    bit_depth: int = Field(default=8, ge=0, le=0x0F)
    # 3 bits on the wire; only 0-3 pass validate_record
    chroma_subsampling: int = Field(default=0, ge=0, le=0x07)
    video_full_range_flag: bool = False
    colour_primaries: int = Field(default=1, ge=0, le=0xFF)
    transfer_characteristics: int = Field(default=1, ge=0, le=0xFF)
    matrix_coefficients: int = Field(default=1, ge=0, le=0xFF)
    codec_initialization_data: bytes = Field(default=b"", max_length=MAX_INIT_DATA_SIZE)

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("codec_initialization_data", mode="before")
    @classmethod
    def normalize_init_data(cls, value: Any) -> Any:
        if value is None:
            return b""
        if isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        return value

    @field_serializer("codec_initialization_data", when_used="json")
    def serialize_init_data(self, value: bytes) -> str:
        return value.hex()

    @property
    def is_rgb(self) -> bool:
        """Check if the matrix coefficients signal unconverted RGB."""
        return self.matrix_coefficients == MATRIX_RGB

    @property
    def chroma_subsampling_label(self) -> str:
        return CHROMA_SUBSAMPLING_LABELS.get(self.chroma_subsampling, "reserved")

    def validate_constraints(self) -> list[FormatError]:
        """Return the cross-field violations of this record."""
        return validate_record(self)


def validate_record(record: CodecConfigRecord) -> list[FormatError]:
    """Check the structural constraints of a record.

    Args:
        record: Record to check

    Returns:
        List of errors, empty if the record can be written
    """
    errors: list[FormatError] = []
    if record.chroma_subsampling > CHROMA_444:
        errors.append(InvalidChromaSubsamplingError(record.chroma_subsampling))
    if record.matrix_coefficients == MATRIX_RGB and record.chroma_subsampling != CHROMA_444:
        errors.append(
            InvalidColorConstraintError(record.matrix_coefficients, record.chroma_subsampling)
        )
    return errors
