"""Pydantic models for vpcbox."""

from .box import BoxInfo
from .record import CodecConfigRecord, RecordLayout, validate_record

__all__ = [
    # Record
    "CodecConfigRecord",
    "RecordLayout",
    "validate_record",
    # Box structure
    "BoxInfo",
]
