"""VP codec configuration box (vpcC)."""

from typing import Any, ClassVar

from vpcbox.bits import SliceWriter
from vpcbox.codec import decode_record, describe_record, encode_record_to, record_size
from vpcbox.constants import VPCC_BOX_TYPE
from vpcbox.errors import FormatError
from vpcbox.models.record import CodecConfigRecord, RecordLayout, validate_record

from .base import Box, BoxHeader, register_box


@register_box
class VpcCBox(Box):
    """vpcC box holding a CodecConfigRecord.

    Attributes:
        record: Decoded or caller-built record
        offset: File offset of the box header, when found by the walker
    """

    box_type: ClassVar[str] = VPCC_BOX_TYPE

    def __init__(self, record: CodecConfigRecord | None = None, offset: int | None = None) -> None:
        self.record = record if record is not None else CodecConfigRecord()
        self.offset = offset

    @classmethod
    def decode(
        cls,
        header: BoxHeader,
        body: bytes,
        layout: RecordLayout | str = RecordLayout.VERSIONED,
        **options: Any,
    ) -> "VpcCBox":
        return cls(decode_record(body, header.payload_size, layout=layout))

    def size(self) -> int:
        return record_size(self.record)

    def encode_fields(self, sw: SliceWriter) -> None:
        encode_record_to(self.record, sw)

    def validate(self) -> list[FormatError]:
        return validate_record(self.record)

    def describe(self) -> list[tuple[str, Any]]:
        return describe_record(self.record)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VpcCBox):
            return NotImplemented
        return self.record == other.record
