"""Exceptions raised while decoding or encoding boxes."""


class FormatError(ValueError):
    """A box payload does not follow its wire format."""


class UnsupportedVersionError(FormatError):
    """The versioned vpcC layout carried a version other than 1."""

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"unsupported version: vpcC version must be 1, got {version}")


class InvalidChromaSubsamplingError(FormatError):
    """chromaSubsampling is outside 0-3."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"invalid chroma subsampling: {value}")


class InvalidColorConstraintError(FormatError):
    """RGB matrix coefficients signalled without 4:4:4 chroma."""

    def __init__(self, matrix_coefficients: int, chroma_subsampling: int) -> None:
        self.matrix_coefficients = matrix_coefficients
        self.chroma_subsampling = chroma_subsampling
        super().__init__(
            f"RGB requires 4:4:4 chroma: matrixCoefficients={matrix_coefficients}, "
            f"chromaSubsampling={chroma_subsampling}"
        )


class TruncatedInputError(FormatError):
    """A read ran past the end of the bounded input."""

    def __init__(self, needed: int, available: int, offset: int = 0) -> None:
        self.needed = needed
        self.available = available
        self.offset = offset
        super().__init__(
            f"truncated record: need {needed} bytes at offset {offset}, {available} available"
        )


class InitDataTooLongError(FormatError):
    """Codec initialization data does not fit the 16-bit length field."""

    def __init__(self, length: int, limit: int = 0xFFFF) -> None:
        self.length = length
        self.limit = limit
        super().__init__(
            f"codec initialization data too long: {length} bytes, at most {limit} allowed"
        )


class UnknownBoxTypeError(FormatError):
    """No codec is registered for a box type."""

    def __init__(self, box_type: str) -> None:
        self.box_type = box_type
        super().__init__(f"no decoder registered for box type {box_type!r}")


class SinkFullError(IOError):
    """A fixed-size writer has no room left for a write."""

    def __init__(self, needed: int, available: int) -> None:
        self.needed = needed
        self.available = available
        super().__init__(f"output buffer full: need {needed} bytes, {available} left")
