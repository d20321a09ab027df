"""HTTP client for the Last.fm API."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from scrobblewatch.config.lastfm import LASTFM_BASE_URL, LASTFM_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

log = getLogger(__name__)

INVALID_STATUS_CODE = -1
HTTP_OK = 200


@dataclass(slots=True, frozen=True)
class LastFmResponse:
    """Outcome of one Last.fm request.

    ``status_code`` is ``INVALID_STATUS_CODE`` when the request never produced a
    response, in which case ``error`` holds the transport error. ``payload`` is the
    decoded JSON document, or ``None`` when the body was empty or not JSON.
    """

    status_code: int
    payload: object | None = None
    error: httpx.HTTPError | None = None

    @property
    def ok(self) -> bool:
        return self.status_code == HTTP_OK


class LastFmClient:
    """Blocking GET client; retries and pacing are left to the caller."""

    def __init__(
        self,
        *,
        base_url: str = LASTFM_BASE_URL,
        timeout_seconds: float = LASTFM_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self._client = httpx.Client(timeout=timeout_seconds, transport=transport)

    def __enter__(self) -> LastFmClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(self, params: httpx.QueryParams | Mapping[str, str | int]) -> LastFmResponse:
        try:
            response = self._client.get(self.base_url, params=params)
        except httpx.HTTPError as exc:
            log.error(f"Last.fm request failed: {exc!r}")
            return LastFmResponse(status_code=INVALID_STATUS_CODE, error=exc)

        body = response.text
        if not body.strip():
            return LastFmResponse(status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            log.error(f"Failed to parse JSON response: {body}, Error: {exc}")
            return LastFmResponse(status_code=response.status_code)

        return LastFmResponse(status_code=response.status_code, payload=payload)
