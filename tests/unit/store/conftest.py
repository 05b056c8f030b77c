"""Shared fixtures for store unit tests"""

import random
from datetime import datetime, timezone

import pytest

from docstore.models import Author, ConflictPolicy, Document
from docstore.store.ids import IdGenerator
from docstore.store.memory_repo import MemoryRepo


def utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


ALICE = Author(id="a1", name="Alice")
BOB = Author(id="b2", name="Bob")


@pytest.fixture(name="store")
def store_fixture():
    """Empty store with a seeded id generator and the default replace policy."""
    return MemoryRepo(id_generator=IdGenerator(rng=random.Random(42)))


@pytest.fixture(name="rejecting_store")
def rejecting_store_fixture():
    return MemoryRepo(on_conflict=ConflictPolicy.reject)


@pytest.fixture(name="strict_store")
def strict_store_fixture():
    return MemoryRepo(on_conflict=ConflictPolicy.error)


@pytest.fixture(name="docs")
def docs_fixture(store):
    """Three documents saved to `store` with distinct titles, content, authors, and dates."""
    return [
        store.save(Document(id="1", title="Alpha-1", content="The quick fox", author=ALICE, created=utc(2020, 1, 1))),
        store.save(Document(id="2", title="Beta-2", content="Lazy dog", author=BOB, created=utc(2021, 6, 1))),
        store.save(Document(id="3", title="Gamma-3", content="quick brown cat", created=utc(2022, 12, 31))),
    ]
