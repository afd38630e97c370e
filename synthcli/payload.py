"""Creation request body for ``POST /videos``.

Every video gets the same avatar, voice and background; only the title,
the script text and the ``test`` (watermark) flag vary per submission.
"""
from __future__ import annotations

import copy
from typing import Any

AVATAR_ID = "fb4aeeb6-b8e2-424e-9631-3900ded817f7"
VOICE_ID = "398dc821-2eb9-4d93-9dca-ff6f3165906a"
BACKGROUND_ID = "workspace-media.a0f2bc02-b51f-4d88-8ea6-c42dedc078f1"

_AVATAR_SETTINGS: dict[str, Any] = {
    "horizontalAlign": "center",
    "scale": 1,
    "style": "rectangular",
    "seamless": False,
    "voice": VOICE_ID,
}
_BACKGROUND_SETTINGS: dict[str, Any] = {
    "videoSettings": {
        "shortBackgroundContentMatchMode": "freeze",
        "longBackgroundContentMatchMode": "trim",
    }
}


def build_payload(title: str, script_text: str, test: bool) -> dict[str, Any]:
    """Return the JSON body that creates a private video.

    Args:
        title: Video title, also the local filename stem once downloaded.
        script_text: Text the avatar reads out.
        test: ``True`` renders a watermarked draft that does not consume
            credits.

    Raises:
        ValueError: if *title* or *script_text* is empty.
    """
    if not title:
        raise ValueError("title must not be empty")
    if not script_text:
        raise ValueError("script_text must not be empty")

    return {
        "test": bool(test),
        "visibility": "private",
        "title": title,
        "input": [
            {
                "avatarSettings": copy.deepcopy(_AVATAR_SETTINGS),
                "backgroundSettings": copy.deepcopy(_BACKGROUND_SETTINGS),
                "avatar": AVATAR_ID,
                "background": BACKGROUND_ID,
                "scriptText": script_text,
            }
        ],
    }
