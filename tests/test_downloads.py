import httpx
import pytest

from synthcli._http import HttpClient
from synthcli.downloads import asset_filename, download_asset, ensure_directory, extension_from_url
from synthcli.exceptions import ApiError


def test_asset_filename_strips_whitespace_and_uses_url_extension():
    url = "https://s3.example.com/video_data/x/rendered_video.mp4?response-content-disposition=a%3B&Expires=1"
    assert asset_filename("My Video", url) == "MyVideo.mp4"


def test_asset_filename_explicit_extension_wins():
    assert asset_filename(" Quarterly\tUpdate ", "https://x/y.webm", ".vtt") == "QuarterlyUpdate.vtt"


def test_asset_filename_defaults_to_mp4():
    assert asset_filename("intro") == "intro.mp4"
    assert extension_from_url("https://x/download?id=1") == ".mp4"


def test_asset_filename_collides_on_whitespace_only_differences():
    assert asset_filename("My Video") == asset_filename("MyVideo")


def test_asset_filename_rejects_blank_title():
    with pytest.raises(ValueError):
        asset_filename("   ")


def test_ensure_directory_is_idempotent(tmp_path):
    target = tmp_path / "downloads"
    ensure_directory(target)
    ensure_directory(target)
    assert target.is_dir()


def test_download_asset_creates_directory_and_writes_body(tmp_path):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"video-bytes"))
    with HttpClient("key", "https://api.example.com", transport=transport) as http:
        path = download_asset(http, "https://assets.example.com/a.mp4", tmp_path / "downloads", "a.mp4")

    assert path == tmp_path / "downloads" / "a.mp4"
    assert path.read_bytes() == b"video-bytes"


class _BrokenStream(httpx.SyncByteStream):
    def __iter__(self):
        yield b"partial"
        raise httpx.ReadError("connection reset")


def test_download_failure_removes_partial_file(tmp_path):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, stream=_BrokenStream()))
    with HttpClient("key", "https://api.example.com", transport=transport) as http:
        with pytest.raises(httpx.ReadError):
            download_asset(http, "https://assets.example.com/a.mp4", tmp_path, "a.mp4")

    assert not (tmp_path / "a.mp4").exists()


def test_download_error_status_writes_nothing(tmp_path):
    transport = httpx.MockTransport(lambda request: httpx.Response(403, text="Request has expired"))
    with HttpClient("key", "https://api.example.com", transport=transport) as http:
        with pytest.raises(ApiError) as excinfo:
            download_asset(http, "https://assets.example.com/a.mp4", tmp_path, "a.mp4")

    assert excinfo.value.status_code == 403
    assert not (tmp_path / "a.mp4").exists()


@pytest.mark.parametrize("title,expected", [
    ("Q1/Q2 review", "Q1_Q2review.mp4"),
    ("C:\\clips\\intro", "C:_clips_intro.mp4"),
    ("../../x", ".._.._x.mp4"),
])
def test_asset_filename_replaces_path_separators(title, expected):
    assert asset_filename(title) == expected


def test_download_asset_refuses_to_leave_directory(tmp_path):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"video-bytes"))
    with HttpClient("key", "https://api.example.com", transport=transport) as http:
        with pytest.raises(ValueError):
            download_asset(http, "https://assets.example.com/a.mp4", tmp_path / "downloads", "../x.mp4")

    assert not (tmp_path / "x.mp4").exists()
