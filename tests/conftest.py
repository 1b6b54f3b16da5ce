"""Pytest configuration and fixtures."""

import struct

import pytest

from vpcbox import config
from vpcbox.config import reset_config
from vpcbox.models import CodecConfigRecord


def make_box(box_type: bytes, body: bytes) -> bytes:
    """Wrap a body in an 8-byte box header."""
    return struct.pack(">I4s", 8 + len(body), box_type) + body


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config files and VPCBOX_* variables out of the tests."""
    for key in ("VPCBOX_LAYOUT", "VPCBOX_STRICT", "VPCBOX_OUTPUT_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [tmp_path / "vpcbox-config.yaml"])
    reset_config()
    yield
    reset_config()


@pytest.fixture
def profile0_record() -> CodecConfigRecord:
    """4K VP9 profile 0 (vp09.00.50.08), BT.709."""
    return CodecConfigRecord(
        profile=0,
        level=50,
        bit_depth=8,
        chroma_subsampling=0,
        video_full_range_flag=False,
        colour_primaries=1,
        transfer_characteristics=1,
        matrix_coefficients=1,
    )


@pytest.fixture
def hdr_record() -> CodecConfigRecord:
    """Profile 2, 10-bit 4:4:4, BT.2020 with PQ transfer."""
    return CodecConfigRecord(
        profile=2,
        level=41,
        bit_depth=10,
        chroma_subsampling=3,
        video_full_range_flag=True,
        colour_primaries=9,
        transfer_characteristics=16,
        matrix_coefficients=9,
    )


@pytest.fixture
def build_mp4():
    """Build a minimal MP4 with one VP9 track whose sample entry holds ``vpcc_body``."""

    def _build(vpcc_body: bytes) -> bytes:
        vpcc = make_box(b"vpcC", vpcc_body)
        vp09 = make_box(b"vp09", b"\x00" * 78 + vpcc)
        stsd = make_box(b"stsd", struct.pack(">II", 0, 1) + vp09)
        stbl = make_box(b"stbl", stsd)
        minf = make_box(b"minf", stbl)
        mdia = make_box(b"mdia", minf)
        trak = make_box(b"trak", mdia)
        moov = make_box(b"moov", trak)
        ftyp = make_box(b"ftyp", b"isom" + struct.pack(">I", 512) + b"isomvp09")
        mdat = make_box(b"mdat", b"\x00" * 16)
        return ftyp + moov + mdat

    return _build
