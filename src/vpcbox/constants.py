"""Wire-format constants for vpcC boxes."""

# Box header: 32-bit size + fourcc
BOX_HEADER_SIZE = 8

VPCC_BOX_TYPE = "vpcC"
VPCC_VERSION = 1

# Legacy records carry no version/flags; they are tagged with version 0 in memory
LEGACY_FORMAT_VERSION = 0

# version(1) + flags(3) + profile(1) + level(1) + color config(1)
# + color description(3) + init data length(2)
VPCC_FIXED_SIZE = 12

# reserved(1) + profile(1) + level(1) + color config(1) + color description(3)
LEGACY_FIXED_SIZE = 7

MAX_INIT_DATA_SIZE = 0xFFFF

MATRIX_RGB = 0
CHROMA_444 = 3

CHROMA_SUBSAMPLING_LABELS = {
    0: "4:2:0 vertical",
    1: "4:2:0 colocated",
    2: "4:2:2",
    3: "4:4:4",
}
