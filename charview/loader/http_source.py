"""
HTTP page source backed by the public Rick and Morty REST API.

Each call issues `GET {api_base_url}/character?page={n}` through a shared
`httpx.AsyncClient` and validates the JSON body into a CharacterPage.
Transport errors can be retried with exponential backoff; by default a single
attempt is made.
"""

from __future__ import annotations

from typing import Optional

import httpx
from pydantic import ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from charview.config import Settings, get_settings
from charview.domain.models import CharacterPage
from charview.loader.abstract import AbstractPageSource, SourceError
from charview.utils.logging import get_logger

log = get_logger(__name__)


def build_async_client(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create an `httpx.AsyncClient` with the configured timeout and headers.

    `transport` lets tests plug in an `httpx.MockTransport`.
    """
    settings = settings or get_settings()
    return httpx.AsyncClient(
        base_url=settings.api_base_url.rstrip("/") + "/",
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
        transport=transport,
    )


class HttpPageSource(AbstractPageSource):
    """
    Fetch character pages over HTTP.
    """

    name: str = "http"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings)

    async def _request(self, page: int) -> httpx.Response:
        return await self._client.get("character", params={"page": page})

    async def _get(self, page: int) -> httpx.Response:
        """Issue the request, retrying transport errors with exponential backoff."""
        with_retry = retry(
            stop=stop_after_attempt(self._settings.fetch_max_attempts),
            wait=wait_exponential(multiplier=self._settings.fetch_backoff_seconds, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )
        return await with_retry(self._request)(page)

    async def fetch_page(self, page: int) -> CharacterPage:
        log.debug("Requesting character page", extra={"page": page})
        try:
            response = await self._get(page)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise SourceError(
                f"page {page}: upstream returned HTTP {exc.response.status_code}", page=page
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceError(f"page {page}: request failed ({exc})", page=page) from exc
        except ValueError as exc:
            raise SourceError(f"page {page}: response is not valid JSON", page=page) from exc

        try:
            return CharacterPage.model_validate(payload)
        except ValidationError as exc:
            raise SourceError(f"page {page}: unexpected response shape", page=page) from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["HttpPageSource", "build_async_client"]
