"""
Domain package for the Character Viewer.

Exports the core domain models used by the loader, filters, and controller.
Keep this package focused on data definitions and validation concerns.
"""

from charview.domain.models import FILTER_FIELDS, Character, CharacterPage, Filters, PageInfo, Place

__all__ = [
    "Character",
    "CharacterPage",
    "FILTER_FIELDS",
    "Filters",
    "PageInfo",
    "Place",
]
