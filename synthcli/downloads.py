from __future__ import annotations

import logging
import posixpath
import re
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from ._http import HttpClient

logger = logging.getLogger("synthcli")

DEFAULT_VIDEO_EXTENSION = ".mp4"
CAPTIONS_EXTENSION = ".vtt"

_WHITESPACE = re.compile(r"\s+")
_SEPARATORS = re.compile(r"[\\/\x00]")


def extension_from_url(url: str, default: str = DEFAULT_VIDEO_EXTENSION) -> str:
    """Return the file extension of *url*'s path (query string ignored)."""
    ext = posixpath.splitext(urlsplit(url).path)[1]
    return ext or default


def asset_filename(title: str, url: str | None = None, extension: str | None = None) -> str:
    """Derive a local filename from a video title.

    Whitespace is removed from *title* and path separators become ``_``;
    the extension is *extension* when given, otherwise taken from *url*,
    otherwise ``.mp4``. Two titles that only differ in whitespace map to
    the same file.

    >>> asset_filename("My Video", "https://x/rendered_video.mp4?sig=1")
    'MyVideo.mp4'
    """
    stem = _SEPARATORS.sub("_", _WHITESPACE.sub("", title))
    if not stem:
        raise ValueError("title has no usable characters for a filename")
    if extension is None:
        extension = extension_from_url(url) if url else DEFAULT_VIDEO_EXTENSION
    return f"{stem}{extension}"


def ensure_directory(directory: Path) -> Path:
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def download_asset(http: "HttpClient", url: str, directory: Path, filename: str) -> Path:
    """Stream a presigned asset URL to ``directory/filename``.

    The directory is created if absent. Returns the written path; any
    transport or write error propagates and leaves no partial file.
    """
    directory = ensure_directory(directory)
    destination = directory / filename
    if destination.resolve().parent != directory.resolve():
        raise ValueError(f"Refusing to write {filename!r} outside {directory}")
    logger.info("Downloading %s", filename)
    http.download(url, destination)
    logger.info("%s downloaded.", filename)
    return destination
