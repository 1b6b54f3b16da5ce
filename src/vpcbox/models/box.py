"""Box structure models."""

from pydantic import BaseModel


class BoxInfo(BaseModel):
    """Position and size of a box found while walking a file."""

    type: str
    size: int
    offset: int
    depth: int = 0
    header_size: int = 8
    data_preview: str | None = None

    @property
    def payload_offset(self) -> int:
        return self.offset + self.header_size

    @property
    def payload_size(self) -> int:
        return self.size - self.header_size
