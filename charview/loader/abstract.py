"""
Page source interfaces, load result contract, and loader errors.

Concrete sources (the live HTTP API, in-memory fakes in tests) implement the
PageSource protocol; `load_collection` consumes any of them and returns a
LoadResult TypedDict so the controller and CLI can report uniformly.
"""

from __future__ import annotations

import abc
import asyncio
from typing import List, Protocol, TypedDict, runtime_checkable

from charview.domain.models import Character, CharacterPage


class ViewerError(Exception):
    """Base class for errors raised by the viewer."""


class SourceError(ViewerError):
    """A page could not be fetched or decoded."""

    def __init__(self, message: str, page: int | None = None) -> None:
        super().__init__(message)
        self.page = page


class LoadCancelled(ViewerError):
    """The load sequence was cancelled between page requests."""


class CancelToken:
    """
    Cooperative cancellation flag checked by the loader between page requests.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise LoadCancelled("character load cancelled")


class LoadResult(TypedDict, total=False):
    """
    Outcome of a completed load sequence.
    """

    records: List[Character]
    pages_requested: int
    exhausted: bool
    duration_seconds: float


@runtime_checkable
class PageSource(Protocol):
    """
    Common interface for anything that serves `/character` pages.
    """

    name: str

    async def fetch_page(self, page: int) -> CharacterPage:
        """
        Fetch one page (1-indexed).

        Raises
        ------
        SourceError
            If the page cannot be retrieved or decoded.
        """
        ...

    async def aclose(self) -> None:
        """Release any underlying resources."""
        ...


class AbstractPageSource(abc.ABC):
    """
    Optional ABC helper for class-based sources with async context support.
    """

    name: str

    @abc.abstractmethod
    async def fetch_page(self, page: int) -> CharacterPage:  # pragma: no cover - interface only
        raise NotImplementedError

    async def aclose(self) -> None:
        return None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = [
    "AbstractPageSource",
    "CancelToken",
    "LoadCancelled",
    "LoadResult",
    "PageSource",
    "SourceError",
    "ViewerError",
]
