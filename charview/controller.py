"""
View controller: the single owner of viewer state.

Holds the loaded collection, the filters, the current page, and the
selection, and composes the pure helpers in `charview.filtering` and
`charview.pagination` into the visible state. Every mutation goes through one
of the action methods below; derived views (filtered list, visible page,
navigation window) are recomputed on access.

Usage:
    controller = ViewController()
    async with HttpPageSource() as source:
        await controller.load(source)
    controller.set_filter("species", "human")
    view = controller.page_view()
"""

from __future__ import annotations

import enum
from typing import List, Optional, Tuple

from charview.config import Settings, get_settings
from charview.domain.models import FILTER_FIELDS, Character, Filters
from charview.filtering import apply_filters
from charview.loader.abstract import CancelToken, LoadCancelled, PageSource, SourceError
from charview.loader.collection import load_collection
from charview.pagination import (
    PageView,
    clamp_page,
    paginate,
)
from charview.pagination import skip as skip_page
from charview.pagination import total_pages as count_pages
from charview.utils.logging import get_logger

log = get_logger(__name__)


class ViewStatus(str, enum.Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"
    CLOSED = "closed"


class ViewController:
    """
    Coordinates loading, filtering, pagination and selection.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self.status = ViewStatus.LOADING
        self.error: Optional[str] = None
        self.filters = Filters()
        self.page = 1
        self.selection: Optional[Character] = None
        self.exhausted = False
        self.load_seconds: Optional[float] = None
        self._collection: Tuple[Character, ...] = ()
        self._cancel = CancelToken()

    # ------------------------------------------------------------------ load

    @property
    def collection(self) -> Tuple[Character, ...]:
        return self._collection

    async def load(self, source: PageSource) -> bool:
        """
        Run the load sequence once and store the collection.

        Returns True when the collection was populated. A source failure moves
        the controller to FAILED and leaves the collection empty; a load that
        finishes after `close()` is discarded.
        """
        if self.status is not ViewStatus.LOADING:
            raise RuntimeError(f"cannot load in state '{self.status.value}'")

        try:
            result = await load_collection(
                source, target=self.settings.target_count, cancel=self._cancel
            )
        except LoadCancelled:
            log.info("Load cancelled; controller closed before completion")
            return False
        except SourceError as exc:
            if self._cancel.cancelled:
                log.info("Discarding load failure after close", extra={"page": exc.page})
                return False
            log.exception("Character load failed", extra={"page": exc.page})
            self.status = ViewStatus.FAILED
            self.error = str(exc)
            return False

        self._collection = tuple(result["records"])
        self.exhausted = result["exhausted"]
        self.load_seconds = result["duration_seconds"]
        self.status = ViewStatus.READY
        log.info(
            "Controller ready",
            extra={
                "records": len(self._collection),
                "pages": result["pages_requested"],
                "exhausted": self.exhausted,
                "seconds": round(self.load_seconds, 3),
            },
        )
        return True

    def close(self) -> None:
        """Tear down: cancel any in-flight load and refuse later results."""
        self._cancel.cancel()
        self.status = ViewStatus.CLOSED

    # --------------------------------------------------------------- derived

    @property
    def filtered(self) -> List[Character]:
        return apply_filters(self._collection, self.filters)

    @property
    def total_pages(self) -> int:
        return count_pages(len(self.filtered), self.settings.page_size)

    def page_view(self) -> PageView:
        return paginate(
            self.filtered,
            self.page,
            page_size=self.settings.page_size,
            radius=self.settings.window_radius,
        )

    @property
    def visible(self) -> List[Character]:
        return self.page_view().items

    @property
    def page_range(self) -> List[int]:
        return self.page_view().window

    # --------------------------------------------------------------- actions

    def set_filter(self, field: str, value: str) -> None:
        """Replace one filter; `field` is 'species' or 'status'."""
        if field not in FILTER_FIELDS:
            raise ValueError(f"Unknown filter '{field}'. Available: {', '.join(FILTER_FIELDS)}")
        self.filters = self.filters.model_copy(update={field: value})
        self._after_filter_change()

    def set_filters(self, species: Optional[str] = None, status: Optional[str] = None) -> None:
        update = {}
        if species is not None:
            update["species"] = species
        if status is not None:
            update["status"] = status
        self.filters = self.filters.model_copy(update=update)
        self._after_filter_change()

    def clear_filters(self) -> None:
        self.filters = Filters()
        self._after_filter_change()

    def _after_filter_change(self) -> None:
        if self.settings.clamp_page_on_filter:
            self.page = clamp_page(self.page, self.total_pages)
        log.debug(
            "Filters changed",
            extra={
                "species": self.filters.species,
                "status": self.filters.status,
                "page": self.page,
            },
        )

    def go_to_page(self, page: int) -> int:
        """Jump to `page`, clamped to `[1, total_pages]`."""
        self.page = clamp_page(page, self.total_pages)
        return self.page

    def skip(self, direction: int) -> int:
        """Move `skip_step` pages back (direction < 0) or forward (direction > 0)."""
        self.page = skip_page(self.page, direction, self.total_pages, self.settings.skip_step)
        return self.page

    def select(self, character: Character) -> Character:
        self.selection = character
        return character

    def select_row(self, row: int) -> Character:
        """Select the record at 1-based `row` of the current page."""
        visible = self.visible
        if not 1 <= row <= len(visible):
            raise IndexError(f"row {row} is not on the current page (1-{len(visible)})")
        return self.select(visible[row - 1])

    def select_id(self, character_id: int) -> Character:
        """Select a record of the collection by its upstream id."""
        for character in self._collection:
            if character.id == character_id:
                return self.select(character)
        raise KeyError(f"no character with id {character_id}")


__all__ = ["ViewController", "ViewStatus"]
