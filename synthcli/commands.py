"""One function per command-line operation.

Every function raises on failure and returns a value on success; turning
errors into exit codes is left to :func:`synthcli.cli.main`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from rich.markup import escape

from . import catalog
from .client import Synthesia
from .config import Settings
from .downloads import DEFAULT_VIDEO_EXTENSION
from .exceptions import AbortedError, VideoNotReadyError
from .logs import console
from .resources.videos import (
    STATUS_COMPLETE,
    STATUS_IN_PROGRESS,
    VISIBILITY_PRIVATE,
    VISIBILITY_PUBLIC,
    Video,
)
from .scripts import read_scripts

logger = logging.getLogger("synthcli")

Confirm = Callable[[str, bool], bool]

DEFAULT_SCRIPT_TEXT = "This is a test video."

EMBED_URL = "https://share.synthesia.io/embeds/videos/{video_id}"
_EMBED_TEMPLATE = (
    '<div style="position: relative; overflow: hidden; aspect-ratio: 1920/1080">'
    '<iframe src="{src}" loading="lazy" title="Synthesia video player - {title}" '
    'allowfullscreen allow="encrypted-media; fullscreen;" '
    'style="position: absolute; width: 100%; height: 100%; top: 0; left: 0; '
    'border: none; padding: 0; margin: 0; overflow:hidden;"></iframe></div>'
)

_LIST_FILTERS = {"/progress": STATUS_IN_PROGRESS, "/complete": STATUS_COMPLETE}


def _render(settings: Settings, video: Video, poll_interval: float) -> Path:
    """Poll *video* until complete, then download it."""
    with console.status(f"Generating video {escape(video.title)}", spinner="dots"):
        video.wait_until_complete(poll_interval=poll_interval, timeout=settings.max_wait)
    return video.download(settings.downloads_dir)


# ----------------------------------------------------------------------
# Submit / poll / download
# ----------------------------------------------------------------------

def process_scripts(client: Synthesia, settings: Settings, confirm: Confirm) -> list[Path]:
    """Render every script in ``settings.scripts_dir``, one after another.

    Asks whether the run is a draft (watermarked test) run, shows a
    TEST/LIVE banner and asks for a go-ahead before anything is submitted.
    Videos are submitted, polled and downloaded strictly in sequence; a
    failure stops the run and nothing already submitted is rolled back.
    """
    test = confirm("Mark this run as drafts?", True)
    if test:
        logger.info("Job queue is marked as a test run.")
    else:
        logger.warning("Job queue is marked as a LIVE run.")

    scripts = read_scripts(settings.scripts_dir)

    if test:
        console.print("[black on green]               TEST RUN               [/]")
    else:
        console.print("[white on red]               LIVE RUN               [/]")

    if not confirm("Ready to process scripts with Synthesia?", False):
        raise AbortedError("Job aborted")
    logger.info("Job is ok to proceed")

    written = []
    for script in scripts:
        logger.info("Title added to payload is %s", script.title)
        video = client.videos.create(script.title, script.text, test=test)
        written.append(_render(settings, video, settings.batch_poll_interval))
    return written


def submit_script(
    client: Synthesia,
    settings: Settings,
    title: str,
    script_text: str = DEFAULT_SCRIPT_TEXT,
) -> Path:
    """Render a single test video from *script_text* and download it."""
    video = client.videos.create(title, script_text, test=True)
    path = _render(settings, video, settings.script_poll_interval)
    console.print(f"[bold green]Video downloaded and saved as {escape(path.name)}[/]")
    return path


# ----------------------------------------------------------------------
# Catalog
# ----------------------------------------------------------------------

def list_videos(client: Synthesia, settings: Settings, arg: str | None = None) -> list[tuple[int, Video]]:
    """List videos with their 1-based positions.

    *arg* may be a number of entries to fetch, or ``/progress`` /
    ``/complete`` to show only videos with that status.
    """
    status_filter = _LIST_FILTERS.get(arg or "")
    limit = settings.list_limit
    if arg and status_filter is None:
        limit = catalog.parse_index(arg) or 0
        if limit < 1:
            raise ValueError(f"List size must be a positive number, got {arg!r}")

    videos = client.videos.list(limit=limit)
    if status_filter is None:
        entries = list(enumerate(videos, start=1))
        for index, video in entries:
            console.print(f'{index}> "{escape(video.title)}" ({video.status})')
        return entries

    logger.info('Filtering by "%s"', status_filter)
    entries = catalog.filter_by_status(videos, status_filter)
    if not entries:
        logger.error("No videos are currently %s", status_filter.replace("_", " "))
    for index, video in entries:
        console.print(f'{index}> {video.id} - "{escape(video.title)}" ({video.status})')
    return entries


def inspect(client: Synthesia, settings: Settings, ref: str) -> Video:
    """Show the main fields of one video, freshly fetched by id."""
    video = catalog.resolve(client.videos, ref, settings.list_limit).refresh()
    console.print(f"({escape(ref)}) {escape(video.title)}")
    rows = [video.id, video.status, video.description, video.visibility]
    if video.is_complete:
        rows.append(video.duration)
    for row in rows:
        if row:
            console.print(escape(str(row)))
    return video


def inspect_raw(client: Synthesia, settings: Settings, ref: str) -> dict[str, Any]:
    """Print the full JSON payload of one video."""
    video = catalog.resolve(client.videos, ref, settings.list_limit).refresh()
    console.print_json(data=video.data)
    return video.data


def rename(client: Synthesia, settings: Settings, ref: str, title: str) -> Video:
    video = catalog.resolve(client.videos, ref, settings.list_limit)
    return video.rename(title)


def delete(client: Synthesia, settings: Settings, ref: str, confirm: Confirm) -> Video:
    """Delete one video after an explicit confirmation."""
    video = catalog.resolve(client.videos, ref, settings.list_limit)
    console.print("[white on red]               DELETE               [/]")
    logger.warning('(%s) "%s" marked for deletion.', ref, video.title)
    if not confirm(f"Are you sure you want to delete {video.id}?", False):
        raise AbortedError("Job aborted")
    video.delete()
    return video


def download(client: Synthesia, settings: Settings, ref: str) -> list[Path]:
    """Download the video (as ``.mp4``) and its WebVTT captions."""
    video = catalog.resolve(client.videos, ref, settings.list_limit).refresh()
    logger.info("%s", video.title)
    if not video.is_complete:
        raise VideoNotReadyError(video.id, video.status or "unknown")
    written = [video.download(settings.downloads_dir, extension=DEFAULT_VIDEO_EXTENSION)]
    captions = video.download_captions(settings.downloads_dir)
    if captions is not None:
        written.append(captions)
    return written


def embed_code(video: Video) -> str:
    return _EMBED_TEMPLATE.format(src=EMBED_URL.format(video_id=video.id), title=video.title)


def embed(client: Synthesia, settings: Settings, ref: str) -> str:
    """Make a video public and print its HTML embed snippet."""
    video = catalog.resolve(client.videos, ref, settings.list_limit)
    logger.info("(%s) %s", ref, video.title)
    video.set_visibility(VISIBILITY_PUBLIC)
    snippet = embed_code(video)
    console.print(snippet, markup=False, highlight=False, soft_wrap=True)
    return snippet


def make_private(client: Synthesia, settings: Settings, ref: str) -> Video:
    video = catalog.resolve(client.videos, ref, settings.list_limit)
    logger.info("(%s) %s", ref, video.title)
    return video.set_visibility(VISIBILITY_PRIVATE)
