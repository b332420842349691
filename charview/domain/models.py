"""
Domain models for the Character Viewer.

Defines the character schema returned by the Rick and Morty API, the envelope
of a single API page, and the user-supplied filters. Records are immutable
once fetched.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Place(BaseModel):
    """
    Named location reference (character origin or last known location).
    """

    name: str = Field(..., description="Location name, e.g. 'Earth (C-137)'.")
    url: str = Field("", description="Upstream resource URL, empty when unknown.")

    model_config = ConfigDict(frozen=True, extra="ignore")


class Character(BaseModel):
    """
    A single character record as served by `/character`.
    """

    id: int = Field(..., description="Upstream character id (unique).")
    name: str = Field(..., description="Character name.")
    species: str = Field(..., description="Species, e.g. 'Human'.")
    status: str = Field(..., description="Life status: 'Alive', 'Dead' or 'unknown'.")
    gender: str = Field(..., description="Gender label.")
    origin: Place = Field(..., description="Place of origin.")
    image: str = Field(..., description="Avatar image URL.")
    type: str = Field("", description="Subspecies or variant, often empty.")
    location: Optional[Place] = Field(None, description="Last known location.")
    episode: List[str] = Field(default_factory=list, description="Episode resource URLs.")
    url: str = Field("", description="Upstream resource URL.")
    created: str = Field("", description="Upstream creation timestamp (ISO 8601).")

    model_config = ConfigDict(frozen=True, extra="ignore")


class PageInfo(BaseModel):
    """
    Pagination metadata of an API page.
    """

    count: int = Field(0, description="Total characters available upstream.")
    pages: int = Field(0, description="Total pages available upstream.")
    next: Optional[str] = Field(None, description="URL of the next page, if any.")
    prev: Optional[str] = Field(None, description="URL of the previous page, if any.")

    model_config = ConfigDict(frozen=True, extra="ignore")


class CharacterPage(BaseModel):
    """
    One page of the `/character` endpoint.
    """

    info: PageInfo = Field(default_factory=PageInfo)
    results: List[Character] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")


class Filters(BaseModel):
    """
    Case-insensitive substring constraints. An empty string means no constraint.
    """

    species: str = ""
    status: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not self.species and not self.status


FILTER_FIELDS = ("species", "status")


__all__ = ["Character", "CharacterPage", "FILTER_FIELDS", "Filters", "PageInfo", "Place"]
