from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from synthcli import Settings, Synthesia

API_HOST = "api.synthesia.io"
ASSET_HOST = "assets.example.com"


class FakeApi:
    """In-memory stand-in for the remote video collection.

    ``polls_before_complete`` is how many status fetches of a newly created
    video answer ``in_progress`` before it turns ``complete``.
    """

    def __init__(self) -> None:
        self.videos: list[dict[str, Any]] = []
        self.requests: list[httpx.Request] = []
        self.remaining_polls: dict[str, int] = {}
        self.polls_before_complete = 0
        self.created: list[dict[str, Any]] = []
        self._next_id = 1

    # -- helpers -------------------------------------------------------

    def add_video(self, title: str, status: str = "complete", **extra: Any) -> dict[str, Any]:
        video_id = f"vid-{self._next_id}"
        self._next_id += 1
        video = {
            "id": video_id,
            "title": title,
            "status": status,
            "visibility": "private",
            "createdAt": 1721993687,
            **extra,
        }
        if status == "complete":
            self._complete(video)
        else:
            self.remaining_polls[video_id] = 10**6
        self.videos.append(video)
        return video

    def _complete(self, video: dict[str, Any]) -> None:
        video["status"] = "complete"
        video["duration"] = "0:00:06.605"
        video["download"] = f"https://{ASSET_HOST}/{video['id']}/rendered_video.mp4?Signature=abc%3D&Expires=1"
        video["captions"] = {"vtt": f"https://{ASSET_HOST}/{video['id']}/captions.vtt?Signature=abc"}

    def find(self, video_id: str) -> dict[str, Any] | None:
        return next((v for v in self.videos if v["id"] == video_id), None)

    def calls(self, method: str, path: str | None = None) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and (path is None or r.url.path == path)
        ]

    # -- transport -----------------------------------------------------

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == ASSET_HOST:
            return self._asset(request)

        if request.headers.get("Authorization") != "test-key":
            return httpx.Response(401, json={"context": "Unauthorized"})

        parts = request.url.path.strip("/").split("/")  # ["v2", "videos", id?]
        if parts[:2] != ["v2", "videos"]:
            return httpx.Response(404, json={"context": "Not found"})

        if len(parts) == 2:
            if request.method == "POST":
                return self._create(json.loads(request.content))
            if request.method == "GET":
                limit = int(request.url.params.get("limit", 20))
                offset = int(request.url.params.get("offset", 0))
                return httpx.Response(200, json={"videos": self.videos[offset:offset + limit]})

        video = self.find(parts[2])
        if video is None:
            return httpx.Response(404, json={"context": f"Video {parts[2]} not found"})
        if request.method == "GET":
            remaining = self.remaining_polls.get(video["id"], 0)
            if remaining > 0:
                self.remaining_polls[video["id"]] = remaining - 1
            elif video["status"] != "complete":
                self._complete(video)
            return httpx.Response(200, json=video)
        if request.method == "PATCH":
            video.update(json.loads(request.content))
            return httpx.Response(200, json=video)
        if request.method == "DELETE":
            self.videos.remove(video)
            return httpx.Response(204)
        return httpx.Response(405)

    def _create(self, body: dict[str, Any]) -> httpx.Response:
        self.created.append(body)
        video = self.add_video(body["title"], status="in_progress", visibility=body["visibility"])
        self.remaining_polls[video["id"]] = self.polls_before_complete
        return httpx.Response(201, json=video)

    def _asset(self, request: httpx.Request) -> httpx.Response:
        if "Authorization" in request.headers:
            return httpx.Response(400, text="presigned URLs take no auth header")
        if request.url.path.endswith(".vtt"):
            return httpx.Response(200, content=b"WEBVTT\n\n00:00.000 --> 00:01.000\nHello world.\n")
        return httpx.Response(200, content=b"\x00\x00\x00\x18ftypmp42" + b"\x00" * 1024)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def transport(fake_api: FakeApi) -> httpx.MockTransport:
    return httpx.MockTransport(fake_api.handler)


@pytest.fixture
def client(transport: httpx.MockTransport):
    with Synthesia(api_key="test-key", transport=transport) as c:
        yield c


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        api_key="test-key",
        env_file=tmp_path / ".env",
        scripts_dir=tmp_path / "scripts",
        downloads_dir=tmp_path / "downloads",
        log_file=tmp_path / "application.log",
        batch_poll_interval=0,
        script_poll_interval=0,
    )


def make_confirm(*answers: bool):
    """Return a confirm callable that replays *answers* and records questions."""
    queue = list(answers)
    asked: list[str] = []

    def confirm(question: str, default: bool) -> bool:
        asked.append(question)
        return queue.pop(0)

    confirm.asked = asked  # type: ignore[attr-defined]
    return confirm


SETTINGS_ENV = (
    "API_KEY",
    "SYNTHESIA_BASE_URL",
    "SYNTHCLI_SCRIPTS_DIR",
    "SYNTHCLI_DOWNLOADS_DIR",
    "SYNTHCLI_LOG_FILE",
    "SYNTHCLI_POLL_INTERVAL",
    "SYNTHCLI_MAX_WAIT",
    "SYNTHCLI_DEBUG",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
