"""Internal HTTP client — not part of the public API."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx

from .exceptions import (
    ApiError,
    AuthenticationError,
    NotFoundError,
)

logger = logging.getLogger("synthcli")

_CHUNK_SIZE = 64 * 1024


class HttpClient:
    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            headers={"Authorization": api_key, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )
        # Presigned asset URLs must not carry the API key.
        self._assets = httpx.Client(timeout=timeout, transport=transport, follow_redirects=True)

    def get(self, path: str, timeout: float | None = None, **params: Any) -> Any:
        return self._request("GET", path, params=params or None, timeout=timeout)

    def post(self, path: str, json: Any = None, timeout: float | None = None) -> Any:
        return self._request("POST", path, json=json, timeout=timeout)

    def patch(self, path: str, json: Any = None, timeout: float | None = None) -> Any:
        return self._request("PATCH", path, json=json, timeout=timeout)

    def delete(self, path: str, timeout: float | None = None) -> Any:
        return self._request("DELETE", path, timeout=timeout)

    def _request(self, method: str, path: str, timeout: float | None = None, **kwargs: Any) -> Any:
        url = f"{self._base_url}{path}"
        logger.debug("%s %s  body=%s", method, url, kwargs.get("json"))

        if timeout is None:
            response = self._client.request(method, url, **kwargs)
        else:
            response = self._client.request(method, url, timeout=timeout, **kwargs)

        logger.debug("← %s %s", response.status_code, url)

        self._raise_for_status(response)
        if not response.content:
            return {}
        return response.json()

    def download(self, url: str, destination: Path) -> Path:
        """Stream *url* into *destination*, removing the partial file on failure."""
        logger.debug("GET %s  → %s", url.split("?", 1)[0], destination)
        with self._assets.stream("GET", url) as response:
            if not response.is_success:
                response.read()
                self._raise_for_status(response)
            try:
                with open(destination, "wb") as f:
                    for chunk in response.iter_bytes(_CHUNK_SIZE):
                        f.write(chunk)
            except BaseException:
                if destination.is_file():
                    destination.unlink()
                raise
        return destination

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return
        try:
            body = response.json()
            detail = body.get("context") or body.get("detail") or response.text
        except (ValueError, AttributeError):
            detail = response.text

        status = response.status_code
        if status == 401:
            raise AuthenticationError("Invalid or missing API key.", status_code=status, detail=detail)
        if status == 404:
            raise NotFoundError(detail or "Video not found.", status_code=status, detail=detail)
        raise ApiError(detail or f"HTTP {status}", status_code=status, detail=detail)

    def close(self) -> None:
        self._client.close()
        self._assets.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()
