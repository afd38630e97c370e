"""Resolve the ``<index|id>`` argument of the per-video commands.

A numeric argument is a 1-based position in a freshly fetched list. The
remote order is not guaranteed stable between that list call and the
follow-up action, so an index is best effort; pass the video id when it
matters.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .exceptions import InvalidIndexError

if TYPE_CHECKING:
    from .resources.videos import Video, VideosResource


def parse_index(ref: str) -> Optional[int]:
    """Return *ref* as an int if it is a plain integer, else ``None``."""
    ref = ref.strip()
    if ref.lstrip("-").isdigit():
        return int(ref)
    return None


def select(videos: "list[Video]", index: int) -> "Video":
    """Return the entry at 1-based *index* of *videos*."""
    if index < 1 or index > len(videos):
        raise InvalidIndexError(index, len(videos))
    return videos[index - 1]


def resolve(resource: "VideosResource", ref: str, limit: int = 100) -> "Video":
    """Turn a CLI reference (index or video id) into a :class:`Video`.

    Raises:
        InvalidIndexError: if *ref* is an index outside the fetched list.
        NotFoundError: if *ref* is an id the API does not know.
    """
    index = parse_index(ref)
    if index is None:
        return resource.get(ref.strip())
    return select(resource.list(limit=limit), index)


def filter_by_status(videos: "list[Video]", status: str) -> list[tuple[int, "Video"]]:
    """Return ``(index, video)`` pairs whose status matches, keeping list positions."""
    return [(i, v) for i, v in enumerate(videos, start=1) if v.status == status]
