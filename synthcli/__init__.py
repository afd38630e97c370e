"""synthcli
========

Command-line client for the Synthesia video API: turn a folder of scripts
into rendered avatar videos, and manage the videos already in the account.

A video moves through three stages:

1. **Submit** — a private video is created from a title and script text
   with fixed avatar, voice and background settings.
2. **Poll** — the status is fetched at a fixed interval until the API
   reports ``complete``. Any other status just means "not yet".
3. **Download** — the rendered ``.mp4`` (and optionally the ``.vtt``
   captions) is streamed into the downloads directory.

Library use::

    from pathlib import Path
    from synthcli import Synthesia

    with Synthesia(api_key="...") as client:
        video = client.videos.create("intro", "Hello world.", test=True)
        video.wait_until_complete(poll_interval=120)
        video.download(Path("downloads"))

All errors raised by the package inherit from :class:`SynthCliError`.
"""

from .client import Synthesia
from .config import Settings
from .exceptions import (
    AbortedError,
    ApiError,
    AuthenticationError,
    ConfigError,
    InvalidIndexError,
    MissingApiKeyError,
    MissingArgumentError,
    NoScriptsError,
    NotFoundError,
    SynthCliError,
    VideoNotReadyError,
    WaitTimeout,
)
from .payload import build_payload
from .resources import Video, VideosResource

__version__ = "0.1.0"
__all__ = [
    "Synthesia",
    "Settings",
    "Video",
    "VideosResource",
    "build_payload",
    "SynthCliError",
    "AbortedError",
    "ApiError",
    "AuthenticationError",
    "ConfigError",
    "InvalidIndexError",
    "MissingApiKeyError",
    "MissingArgumentError",
    "NoScriptsError",
    "NotFoundError",
    "VideoNotReadyError",
    "WaitTimeout",
]
