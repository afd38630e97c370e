from __future__ import annotations

import logging
from typing import Any

import httpx

from ._http import HttpClient
from .resources.videos import VideosResource

logger = logging.getLogger("synthcli")

DEFAULT_BASE_URL = "https://api.synthesia.io/v2"


class Synthesia:
    """Synthesia video API client.

    Create a single instance per process and close it when you are done,
    either explicitly with :meth:`close` or by using the client as a
    context manager::

        with Synthesia(api_key="...") as client:
            video = client.videos.create("intro", "Hello world.", test=True)
            video.wait_until_complete(poll_interval=120)
            video.download(Path("downloads"))
    """

    videos: VideosResource
    """Entry point for all video operations. See :class:`VideosResource`."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
        debug: bool = False,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Args:
            api_key: Synthesia API key, sent verbatim in the
                ``Authorization`` header.
            base_url: Override the API base URL.
                Defaults to ``https://api.synthesia.io/v2``.
            timeout: HTTP request timeout in seconds. Defaults to 60.
            debug: Set to ``True`` to log every request/response via the
                ``synthcli`` logger.
            transport: Custom httpx transport, e.g. ``httpx.MockTransport``
                in tests.
        """
        if debug:
            logging.getLogger("synthcli").setLevel(logging.DEBUG)

        self._http = HttpClient(api_key=api_key, base_url=base_url, timeout=timeout, transport=transport)
        self.videos = VideosResource(self._http)

    def close(self) -> None:
        """Close the underlying HTTP connection pools."""
        self._http.close()

    def __enter__(self) -> "Synthesia":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()
