"""Content types, the media kinds they render as, and file type checks."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from enum import Enum
from pathlib import Path


class Media(Enum):
    """How an inscription's content is presented."""

    AUDIO = "audio"
    IFRAME = "iframe"
    IMAGE = "image"
    PDF = "pdf"
    TEXT = "text"
    UNKNOWN = "unknown"
    VIDEO = "video"

    @classmethod
    def parse(cls, content_type: str) -> Media:
        """Media kind for a known content type."""
        for known, media, _ in _TABLE:
            if known == content_type:
                return media
        raise ValueError(f"unknown content type: {content_type}")


_TABLE: tuple[tuple[str, Media, tuple[str, ...]], ...] = (
    ("application/json", Media.TEXT, ("json",)),
    ("application/pdf", Media.PDF, ("pdf",)),
    ("application/pgp-signature", Media.TEXT, ("asc",)),
    ("application/yaml", Media.TEXT, ("yaml", "yml")),
    ("audio/flac", Media.AUDIO, ("flac",)),
    ("audio/mpeg", Media.AUDIO, ("mp3",)),
    ("audio/wav", Media.AUDIO, ("wav",)),
    ("image/apng", Media.IMAGE, ("apng",)),
    ("image/avif", Media.IMAGE, ()),
    ("image/gif", Media.IMAGE, ("gif",)),
    ("image/jpeg", Media.IMAGE, ("jpg", "jpeg")),
    ("image/png", Media.IMAGE, ("png",)),
    ("image/svg+xml", Media.IFRAME, ("svg",)),
    ("image/webp", Media.IMAGE, ("webp",)),
    ("model/stl", Media.UNKNOWN, ("stl",)),
    ("text/html;charset=utf-8", Media.IFRAME, ("html",)),
    ("text/plain;charset=utf-8", Media.TEXT, ("txt",)),
    ("video/mp4", Media.VIDEO, ("mp4",)),
    ("video/webm", Media.VIDEO, ("webm",)),
)


def _extension(path: Path) -> str | None:
    before, dot, after = path.name.rpartition(".")
    if not dot or not before:
        return None
    return after


def content_type_for_path(path: str | Path) -> str:
    """Content type for a file, chosen by its extension."""
    path = Path(path)
    extension = _extension(path)
    if extension is None:
        raise ValueError("file must have extension")
    extension = extension.lower()

    if extension == "mp4":
        check_mp4_codec(path)

    for content_type, _, extensions in _TABLE:
        if extension in extensions:
            return content_type

    supported = sorted(extensions[0] for _, _, extensions in _TABLE if extensions)
    raise ValueError(
        f"unsupported file extension `.{extension}`, "
        f"supported extensions: {' '.join(supported)}"
    )


_TRACK_TYPES = {b"vide": "video", b"soun": "audio", b"sbtl": "subtitle"}
_CODEC_NAMES = {
    b"avc1": "h264",
    b"hev1": "h265",
    b"hvc1": "h265",
    b"vp09": "vp9",
    b"mp4a": "aac",
    b"tx3g": "ttxt",
}


def _boxes(data: bytes, start: int, end: int) -> Iterator[tuple[bytes, int, int]]:
    position = start
    while position + 8 <= end:
        size, kind = struct.unpack_from(">I4s", data, position)
        header = 8
        if size == 1:
            if position + 16 > end:
                raise ValueError("truncated box header")
            (size,) = struct.unpack_from(">Q", data, position + 8)
            header = 16
        elif size == 0:
            size = end - position
        if size < header or position + size > end:
            raise ValueError(f"invalid size for box {kind.decode('latin-1')}")
        yield kind, position + header, position + size
        position += size


def _child(data: bytes, start: int, end: int, kind: bytes) -> tuple[int, int]:
    for found, child_start, child_end in _boxes(data, start, end):
        if found == kind:
            return child_start, child_end
    raise ValueError(f"{kind.decode('latin-1')} not found")


def check_mp4_codec(path: str | Path) -> None:
    """Raise ValueError unless every video track of an MP4 file is H.264."""
    data = Path(path).read_bytes()

    _child(data, 0, len(data), b"ftyp")
    moov_start, moov_end = _child(data, 0, len(data), b"moov")

    for kind, trak_start, trak_end in _boxes(data, moov_start, moov_end):
        if kind != b"trak":
            continue
        mdia = _child(data, trak_start, trak_end, b"mdia")
        hdlr_start, hdlr_end = _child(data, *mdia, b"hdlr")
        if hdlr_end - hdlr_start < 12:
            raise ValueError("truncated hdlr box")
        handler = data[hdlr_start + 8 : hdlr_start + 12]
        track_type = _TRACK_TYPES.get(handler)
        if track_type is None:
            raise ValueError(f"unsupported track type: {handler.decode('latin-1')}")
        if track_type != "video":
            continue

        minf = _child(data, *mdia, b"minf")
        stbl = _child(data, *minf, b"stbl")
        stsd_start, stsd_end = _child(data, *stbl, b"stsd")
        entries = list(_boxes(data, stsd_start + 8, stsd_end))
        if not entries:
            raise ValueError("stsd has no sample entries")
        codec = entries[0][0]
        if codec != b"avc1":
            name = _CODEC_NAMES.get(codec, codec.decode("latin-1"))
            raise ValueError(
                f"Unsupported video codec, only H.264 is supported in MP4: {name}"
            )