from .videos import (
    STATUS_COMPLETE,
    STATUS_IN_PROGRESS,
    VISIBILITY_PRIVATE,
    VISIBILITY_PUBLIC,
    Video,
    VideosResource,
)

__all__ = [
    "STATUS_COMPLETE",
    "STATUS_IN_PROGRESS",
    "VISIBILITY_PRIVATE",
    "VISIBILITY_PUBLIC",
    "Video",
    "VideosResource",
]
