"""
Loader package for the Character Viewer.

Re-exports the page source interfaces, the HTTP source, and the
fetch-until-threshold loader so callers can import from `charview.loader`.
"""

from charview.loader.abstract import (
    AbstractPageSource,
    CancelToken,
    LoadCancelled,
    LoadResult,
    PageSource,
    SourceError,
    ViewerError,
)
from charview.loader.collection import load_collection
from charview.loader.http_source import HttpPageSource, build_async_client

__all__ = [
    # Abstracts
    "AbstractPageSource",
    "LoadResult",
    "PageSource",
    # Errors and cancellation
    "CancelToken",
    "LoadCancelled",
    "SourceError",
    "ViewerError",
    # Concrete
    "HttpPageSource",
    "build_async_client",
    "load_collection",
]
