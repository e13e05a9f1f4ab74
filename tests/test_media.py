import struct
from pathlib import Path

import pytest

from ordinals.media import Media, check_mp4_codec, content_type_for_path


def _box(kind: bytes, payload: bytes) -> bytes:
    return struct.pack(">I", 8 + len(payload)) + kind + payload


def _full(kind: bytes, payload: bytes) -> bytes:
    return _box(kind, b"\x00\x00\x00\x00" + payload)


def _mp4(codec: bytes, handler: bytes = b"vide") -> bytes:
    hdlr = _full(b"hdlr", b"\x00\x00\x00\x00" + handler + bytes(13))
    stsd = _full(b"stsd", struct.pack(">I", 1) + _box(codec, bytes(78)))
    stbl = _box(b"stbl", stsd)
    minf = _box(b"minf", stbl)
    mdia = _box(b"mdia", hdlr + minf)
    moov = _box(b"moov", _box(b"trak", mdia))
    return _box(b"ftyp", b"isom\x00\x00\x00\x00") + moov


def test_for_extension():
    assert content_type_for_path(Path("pepe.jpg")) == "image/jpeg"
    assert content_type_for_path(Path("pepe.jpeg")) == "image/jpeg"
    assert content_type_for_path(Path("pepe.JPG")) == "image/jpeg"

    with pytest.raises(
        ValueError, match=r"unsupported file extension `\.foo`, supported extensions: apng .*"
    ):
        content_type_for_path(Path("pepe.foo"))


def test_no_extension():
    with pytest.raises(ValueError, match="file must have extension"):
        content_type_for_path("pepe")


def test_other_extensions():
    assert content_type_for_path("a.yml") == "application/yaml"
    assert content_type_for_path("a.svg") == "image/svg+xml"
    assert content_type_for_path("a.txt") == "text/plain;charset=utf-8"


def test_parse():
    assert Media.parse("image/png") is Media.IMAGE
    assert Media.parse("text/html;charset=utf-8") is Media.IFRAME
    assert Media.parse("video/webm") is Media.VIDEO
    assert Media.parse("model/stl") is Media.UNKNOWN
    with pytest.raises(ValueError, match="unknown content type: foo/bar"):
        Media.parse("foo/bar")


def test_h264_in_mp4_is_allowed(tmp_path):
    path = tmp_path / "h264.mp4"
    path.write_bytes(_mp4(b"avc1"))
    check_mp4_codec(path)
    assert content_type_for_path(path) == "video/mp4"


def test_av1_in_mp4_is_rejected(tmp_path):
    path = tmp_path / "av1.mp4"
    path.write_bytes(_mp4(b"av01"))
    with pytest.raises(ValueError, match="Unsupported video codec"):
        check_mp4_codec(path)
    with pytest.raises(ValueError, match="Unsupported video codec"):
        content_type_for_path(path)


def test_h265_named_in_error(tmp_path):
    path = tmp_path / "h265.mp4"
    path.write_bytes(_mp4(b"hev1"))
    with pytest.raises(ValueError, match="h265"):
        check_mp4_codec(path)


def test_audio_track_is_not_checked(tmp_path):
    path = tmp_path / "audio.MP4"
    path.write_bytes(_mp4(b"mp4a", handler=b"soun"))
    assert content_type_for_path(path) == "video/mp4"


def test_garbage_mp4_is_rejected(tmp_path):
    path = tmp_path / "bad.mp4"
    path.write_bytes(b"not an mp4 file at all")
    with pytest.raises(ValueError):
        check_mp4_codec(path)