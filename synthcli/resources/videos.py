from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from ..downloads import CAPTIONS_EXTENSION, asset_filename, download_asset
from ..exceptions import VideoNotReadyError, WaitTimeout
from ..payload import build_payload

if TYPE_CHECKING:
    from .._http import HttpClient

logger = logging.getLogger("synthcli")

STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETE = "complete"

VISIBILITY_PRIVATE = "private"
VISIBILITY_PUBLIC = "public"
_VISIBILITIES = {VISIBILITY_PRIVATE, VISIBILITY_PUBLIC}


class Video:
    """
    Represents a Synthesia video (a remote render job).

    Obtain via client.videos.create(), client.videos.get() or
    client.videos.list(). Attribute values reflect the last payload fetched
    from the API; call :meth:`refresh` to re-read them.
    """

    def __init__(self, video_id: str, http: "HttpClient", data: dict[str, Any] | None = None):
        self.id = video_id
        self._http = http
        self._data: dict[str, Any] = data or {}

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def data(self) -> dict[str, Any]:
        """The raw JSON payload last returned by the API."""
        return self._data

    @property
    def title(self) -> str:
        return self._data.get("title", "")

    @property
    def status(self) -> str:
        return self._data.get("status", "")

    @property
    def visibility(self) -> str | None:
        return self._data.get("visibility")

    @property
    def created_at(self) -> int | None:
        return self._data.get("createdAt")

    @property
    def duration(self) -> str | None:
        return self._data.get("duration")

    @property
    def description(self) -> str | None:
        return self._data.get("description")

    @property
    def download_url(self) -> str | None:
        """Presigned, time-limited video URL. Only present once complete."""
        return self._data.get("download")

    @property
    def captions_url(self) -> str | None:
        """Presigned WebVTT captions URL. Only present once complete."""
        captions = self._data.get("captions") or {}
        return captions.get("vtt")

    @property
    def is_complete(self) -> bool:
        return self.status == STATUS_COMPLETE

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def refresh(self) -> "Video":
        """Re-fetch this video from the API and update it in place."""
        self._data = self._http.get(f"/videos/{self.id}")
        return self

    def wait_until_complete(
        self,
        poll_interval: float = 120,
        timeout: Optional[float] = None,
    ) -> "Video":
        """Block until the API reports the video as ``complete``.

        The status is fetched immediately, then every *poll_interval*
        seconds. Any status other than ``complete`` (including statuses the
        client does not know about) means "keep waiting".

        Args:
            poll_interval: Seconds between status fetches. Defaults to 120.
            timeout: Maximum seconds to wait. ``None`` (the default) waits
                forever.

        Returns:
            ``self``, refreshed with the complete payload.

        Raises:
            WaitTimeout: if *timeout* is set and elapses first.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        logger.debug("waiting for video=%s (poll=%ss timeout=%s)", self.id, poll_interval, timeout)

        while True:
            self.refresh()
            if self.is_complete:
                logger.info("Synthesia says that the video is complete.")
                return self

            logger.info("Synthesia says video is %s. Please wait.", self.status or "unknown")

            if deadline is not None and time.monotonic() >= deadline:
                raise WaitTimeout(self.id, timeout)

            time.sleep(poll_interval)

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def rename(self, title: str) -> "Video":
        """Change the video title. Returns ``self`` with the updated payload."""
        if not title:
            raise ValueError("title must not be empty")
        logger.info('Update title of video %s to "%s"', self.id, title)
        self._data = self._http.patch(f"/videos/{self.id}", json={"title": title})
        logger.info('%s title changed to "%s"', self.id, self.title)
        return self

    def set_visibility(self, visibility: str) -> "Video":
        """Set the video to ``"public"`` or ``"private"``."""
        if visibility not in _VISIBILITIES:
            raise ValueError(f"visibility must be one of {sorted(_VISIBILITIES)}, got {visibility!r}")
        self._data = self._http.patch(f"/videos/{self.id}", json={"visibility": visibility})
        logger.info('%s visibility set to "%s"', self.id, self.visibility)
        return self

    def delete(self) -> None:
        """Permanently delete the video. There is no undo."""
        logger.warning("Delete video %s", self.id)
        self._http.delete(f"/videos/{self.id}")
        logger.info("Response suggests video has been deleted")

    # ------------------------------------------------------------------
    # Assets
    # ------------------------------------------------------------------

    def download(self, directory: Path, extension: str | None = None) -> Path:
        """Download the rendered video into *directory*.

        The filename is the title with whitespace removed, plus *extension*
        (default: the extension of the download URL).

        Raises:
            VideoNotReadyError: if the video is not complete.
        """
        if not self.is_complete or not self.download_url:
            raise VideoNotReadyError(self.id, self.status or "unknown")
        filename = asset_filename(self.title, self.download_url, extension)
        logger.info("Video filename set as %s", filename)
        return download_asset(self._http, self.download_url, directory, filename)

    def download_captions(self, directory: Path) -> Path | None:
        """Download the WebVTT captions into *directory*, if the API has any."""
        if not self.is_complete:
            raise VideoNotReadyError(self.id, self.status or "unknown")
        if not self.captions_url:
            logger.warning("No captions available for %s", self.id)
            return None
        filename = asset_filename(self.title, extension=CAPTIONS_EXTENSION)
        return download_asset(self._http, self.captions_url, directory, filename)

    def __repr__(self) -> str:
        return f"<Video id={self.id!r} status={self.status!r}>"


class VideosResource:
    """Accessed via client.videos — entry point for video operations."""

    def __init__(self, http: "HttpClient"):
        self._http = http

    def create(self, title: str, script_text: str, test: bool = True) -> Video:
        """Submit a new private video for rendering.

        Args:
            title: Video title.
            script_text: Text for the avatar to read.
            test: Render as a watermarked test video. Defaults to ``True``.

        Returns:
            A :class:`Video` with ``video.id`` populated and the initial
            status reported by the API (normally ``in_progress``).
        """
        body = build_payload(title, script_text, test)
        if test:
            logger.info("Video is a test")
        else:
            logger.warning("Video is NOT a test")
        logger.info("Sending payload to Synthesia.")
        data = self._http.post("/videos", json=body)
        video = Video(video_id=data["id"], http=self._http, data=data)
        logger.info(
            "id: %s  status: %s  title: %s  visibility: %s  createdAt: %s",
            video.id, video.status, video.title, video.visibility, video.created_at,
        )
        return video

    def get(self, video_id: str) -> Video:
        """Fetch an existing video by ID.

        Raises:
            NotFoundError: if no video with *video_id* exists.
        """
        data = self._http.get(f"/videos/{video_id}")
        return Video(video_id=data["id"], http=self._http, data=data)

    def list(self, limit: int = 100, offset: int = 0) -> list[Video]:
        """Return up to *limit* videos starting at *offset*, in API order."""
        data = self._http.get("/videos", limit=limit, offset=offset)
        return [Video(video_id=item["id"], http=self._http, data=item) for item in data.get("videos", [])]
