"""
Fetch-until-threshold aggregation of character pages.

Pages are requested strictly in order, one at a time: page N+1 is not
requested until page N has been processed. The loop ends once the running
total reaches the target (the result is then truncated to exactly `target`
records) or the source runs out of pages.
"""

from __future__ import annotations

import time
from typing import List, Optional

from charview.domain.models import Character
from charview.loader.abstract import CancelToken, LoadResult, PageSource
from charview.utils.logging import get_logger

log = get_logger(__name__)


async def load_collection(
    source: PageSource,
    target: int = 300,
    cancel: Optional[CancelToken] = None,
) -> LoadResult:
    """
    Accumulate records from `source` until at least `target` have arrived.

    Parameters
    ----------
    source : PageSource
        Where pages come from.
    target : int
        Number of records to keep, in arrival order.
    cancel : CancelToken | None
        Checked before every page request and once more before returning.

    Returns
    -------
    LoadResult
        The first `target` records plus request bookkeeping.

    Raises
    ------
    SourceError
        Propagated unchanged from the source; nothing is retained.
    LoadCancelled
        If `cancel` was set while the sequence was running.
    """
    if target < 1:
        raise ValueError("target must be >= 1")

    start = time.perf_counter()
    records: List[Character] = []
    page = 1
    requested = 0
    exhausted = False

    while len(records) < target:
        if cancel is not None:
            cancel.raise_if_cancelled()
        batch = await source.fetch_page(page)
        requested += 1
        records.extend(batch.results)
        log.debug(
            "Page processed",
            extra={"page": page, "batch": len(batch.results), "total": len(records)},
        )
        if not batch.results or batch.info.next is None:
            exhausted = len(records) < target
            break
        page += 1

    if cancel is not None:
        cancel.raise_if_cancelled()

    if exhausted:
        log.warning(
            "Source exhausted before target was reached",
            extra={"target": target, "records": len(records), "pages": requested},
        )

    duration = time.perf_counter() - start
    log.info(
        "Character collection loaded",
        extra={"records": min(len(records), target), "pages": requested, "source": source.name},
    )
    return LoadResult(
        records=records[:target],
        pages_requested=requested,
        exhausted=exhausted,
        duration_seconds=duration,
    )


__all__ = ["load_collection"]
