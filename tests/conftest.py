"""
Pytest configuration for the Character Viewer.

Provides fixtures for:
- Deterministic character generation (seeded)
- An in-memory page source that records every request
- Settings with test-specific overrides
"""

from __future__ import annotations

import asyncio
import random
from typing import Callable, List, Optional, Sequence

import pytest

from charview.config import Settings
from charview.controller import ViewController
from charview.domain.models import Character, CharacterPage, PageInfo, Place

SPECIES = ["Human", "Alien", "Humanoid", "Robot", "Animal"]
STATUSES = ["Alive", "Dead", "unknown"]
GENDERS = ["Male", "Female", "Genderless", "unknown"]


def make_character(
    character_id: int,
    species: str = "Human",
    status: str = "Alive",
    name: Optional[str] = None,
    gender: str = "Male",
    origin: str = "Earth (C-137)",
) -> Character:
    return Character(
        id=character_id,
        name=name or f"Character {character_id}",
        species=species,
        status=status,
        gender=gender,
        origin=Place(name=origin),
        image=f"https://rickandmortyapi.com/api/character/avatar/{character_id}.jpeg",
    )


def generate_characters(count: int, seed: int = 42, start: int = 1) -> List[Character]:
    rng = random.Random(seed)
    return [
        make_character(
            i,
            species=rng.choice(SPECIES),
            status=rng.choice(STATUSES),
            gender=rng.choice(GENDERS),
        )
        for i in range(start, start + count)
    ]


class FakePageSource:
    """
    Serves `records` in fixed-size pages and records requested page numbers.

    `fail_on` makes the given page raise the supplied exception instead.
    """

    name = "fake"

    def __init__(
        self,
        records: Sequence[Character],
        page_size: int = 20,
        fail_on: Optional[int] = None,
        error: Optional[Exception] = None,
        on_fetch: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.records = list(records)
        self.page_size = page_size
        self.fail_on = fail_on
        self.error = error
        self.on_fetch = on_fetch
        self.requested: List[int] = []
        self.closed = False

    @property
    def pages(self) -> int:
        return -(-len(self.records) // self.page_size)

    async def fetch_page(self, page: int) -> CharacterPage:
        self.requested.append(page)
        if self.on_fetch is not None:
            self.on_fetch(page)
        if self.fail_on == page and self.error is not None:
            raise self.error
        start = (page - 1) * self.page_size
        results = self.records[start : start + self.page_size]
        next_url = f"https://example.test/character?page={page + 1}" if page < self.pages else None
        return CharacterPage(
            info=PageInfo(count=len(self.records), pages=self.pages, next=next_url),
            results=results,
        )

    async def aclose(self) -> None:
        self.closed = True

    async def __aenter__(self) -> "FakePageSource":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


@pytest.fixture()
def test_settings() -> Settings:
    """
    Settings fixture with the documented defaults, independent of the environment.
    """
    return Settings(
        api_base_url="https://rickandmortyapi.com/api",
        target_count=300,
        page_size=10,
        window_radius=5,
        skip_step=5,
        fetch_max_attempts=1,
        clamp_page_on_filter=True,
        log_level="DEBUG",
    )


@pytest.fixture()
def characters() -> List[Character]:
    return generate_characters(300)


@pytest.fixture()
def fake_source(characters: List[Character]) -> FakePageSource:
    return FakePageSource(characters + generate_characters(126, seed=7, start=301), page_size=20)


@pytest.fixture()
def loaded_controller(test_settings: Settings) -> Callable[..., ViewController]:
    """
    Build a ViewController whose collection arrived through `load()` from a
    FakePageSource serving `records`.
    """

    def _build(records: Sequence[Character], settings: Optional[Settings] = None) -> ViewController:
        controller = ViewController(settings or test_settings)
        assert asyncio.run(controller.load(FakePageSource(records)))
        return controller

    return _build


@pytest.fixture()
def character_factory() -> Callable[..., Character]:
    return make_character


@pytest.fixture()
def source_factory() -> Callable[..., FakePageSource]:
    return FakePageSource
