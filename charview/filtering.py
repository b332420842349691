"""
Case-insensitive substring filtering over the character collection.

Both predicates are pure; the controller recomputes the filtered view on
every access with a full linear scan.
"""

from __future__ import annotations

from typing import Iterable, List

from charview.domain.models import Character, Filters


def _contains(value: str, needle: str) -> bool:
    return not needle or needle.lower() in value.lower()


def matches(character: Character, filters: Filters) -> bool:
    """Return True when `character` satisfies both species and status constraints."""
    return _contains(character.species, filters.species) and _contains(
        character.status, filters.status
    )


def apply_filters(records: Iterable[Character], filters: Filters) -> List[Character]:
    """Return the records that match `filters`, preserving order."""
    if filters.is_empty:
        return list(records)
    return [record for record in records if matches(record, filters)]


__all__ = ["apply_filters", "matches"]
