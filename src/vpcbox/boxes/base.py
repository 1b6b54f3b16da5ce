"""Base box class, box header codec and type registry."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from vpcbox.bits import SliceReader, SliceWriter
from vpcbox.constants import BOX_HEADER_SIZE
from vpcbox.errors import FormatError, UnknownBoxTypeError

# Box classes by fourcc, filled by @register_box
BOX_TYPES: dict[str, type["Box"]] = {}


def fourcc_to_str(raw: bytes) -> str:
    """Decode a fourcc, keeping non-ASCII bytes visible."""
    try:
        return raw.decode("ascii")
    except UnicodeDecodeError:
        return raw.decode("latin-1", errors="replace")


@dataclass(frozen=True)
class BoxHeader:
    """Size and type of a box, as read from its header."""

    type: str
    size: int
    header_size: int = BOX_HEADER_SIZE

    @property
    def payload_size(self) -> int:
        return self.size - self.header_size


def read_box_header(sr: SliceReader) -> BoxHeader:
    """Read a box header at the reader position.

    A size of 1 is followed by a 64-bit size; a size of 0 extends the box to
    the end of the reader.
    """
    start = sr.pos
    size = sr.read_uint32()
    box_type = fourcc_to_str(sr.read_bytes(4))
    if size == 1:
        size = sr.read_uint64()
    elif size == 0:
        size = sr.length - start
    header_size = sr.pos - start
    if size < header_size:
        raise FormatError(f"box {box_type!r}: size {size} smaller than its {header_size}-byte header")
    return BoxHeader(type=box_type, size=size, header_size=header_size)


def write_box_header(box: "Box", sw: SliceWriter) -> None:
    """Write the 8-byte header of ``box``; called before its fields."""
    fourcc = box.box_type.encode("ascii")
    if len(fourcc) != 4:
        raise ValueError(f"box type must be 4 ASCII characters, got {box.box_type!r}")
    sw.write_uint32(box.size())
    sw.write_bytes(fourcc)


class Box(ABC):
    """Abstract base class for box codecs.

    A box class decodes its body from bytes handed over by the container
    walker, reports its total size and writes itself back out. Subclasses
    register with @register_box so decode_box can dispatch on the fourcc.

    Attributes:
        box_type: Four-character box type
    """

    box_type: ClassVar[str] = ""

    @classmethod
    @abstractmethod
    def decode(cls, header: BoxHeader, body: bytes, **options: Any) -> "Box":
        """Build a box from its body.

        Args:
            header: Header the body was read under
            body: Box body, header stripped
            **options: Box-specific decode options
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the encoded size including the box header."""
        pass

    @abstractmethod
    def encode_fields(self, sw: SliceWriter) -> None:
        """Write the box body."""
        pass

    def validate(self) -> list[FormatError]:
        """Return the constraint violations of this box."""
        return []

    def describe(self) -> list[tuple[str, Any]]:
        """Return labeled fields for display."""
        return []

    def encode_to(self, sw: SliceWriter, validate: bool = False) -> None:
        """Write header and body into ``sw``.

        Raises:
            FormatError: ``validate`` is set and the box breaks a constraint
        """
        if validate:
            errors = self.validate()
            if errors:
                raise errors[0]
        write_box_header(self, sw)
        self.encode_fields(sw)

    def encode(self, validate: bool = False) -> bytes:
        sw = SliceWriter(self.size())
        self.encode_to(sw, validate=validate)
        return sw.getvalue()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(box_type={self.box_type!r}, size={self.size()})"


def register_box(cls: type[Box]) -> type[Box]:
    """Class decorator adding a box class to BOX_TYPES."""
    BOX_TYPES[cls.box_type] = cls
    return cls


def decode_box(data: bytes, **options: Any) -> Box:
    """Decode one complete box (header and body) from ``data``.

    Args:
        data: Bytes starting at the box header
        **options: Passed to the box class decode, e.g. ``layout``

    Raises:
        UnknownBoxTypeError: No class registered for the box type
        TruncatedInputError: ``data`` is shorter than the declared box size
    """
    sr = SliceReader(data)
    header = read_box_header(sr)
    box_cls = BOX_TYPES.get(header.type)
    if box_cls is None:
        raise UnknownBoxTypeError(header.type)
    body = sr.read_bytes(header.payload_size)
    return box_cls.decode(header, body, **options)
