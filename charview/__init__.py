"""
Character Viewer - terminal browser for the Rick and Morty character API.

This package loads a fixed-size collection of characters from the public
paginated REST API and offers:

- Case-insensitive species/status filtering
- Fixed-size pagination with a sliding page-number window
- A detail panel for the selected character
- A typer CLI with one-shot and interactive views rendered by rich
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from charview.config import Settings, get_settings
from charview.controller import ViewController, ViewStatus
from charview.domain.models import Character, CharacterPage, Filters
from charview.filtering import apply_filters, matches
from charview.loader import (
    CancelToken,
    HttpPageSource,
    LoadCancelled,
    PageSource,
    SourceError,
    ViewerError,
    load_collection,
)
from charview.pagination import PageView, page_range, page_slice, paginate, skip, total_pages
from charview.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Character",
    "CharacterPage",
    "Filters",
    # Loading
    "CancelToken",
    "HttpPageSource",
    "LoadCancelled",
    "PageSource",
    "SourceError",
    "ViewerError",
    "load_collection",
    # Filtering and pagination
    "apply_filters",
    "matches",
    "PageView",
    "page_range",
    "page_slice",
    "paginate",
    "skip",
    "total_pages",
    # Coordination
    "ViewController",
    "ViewStatus",
    # Logging
    "configure_logging",
    "get_logger",
]
