"""API test fixtures — FastAPI test client with injectable corpus and rng.

Invariants:
    - Every test starts with no dependency overrides
    - rng is seeded so backfill is reproducible within a test
    - override_corpus swaps the corpus for a single test (e.g. empty corpus)
"""

import random

import pytest
from httpx import ASGITransport, AsyncClient

from inspire_me.api.dependencies import get_corpus, get_rng
from inspire_me.core.corpus import build_corpus
from inspire_me.main import app


@pytest.fixture
async def client():
    """FastAPI test client with a seeded random source."""
    app.dependency_overrides[get_rng] = lambda: random.Random(1234)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def override_corpus():
    """Call with a list of quote records to serve that corpus instead."""
    def _override(records: list[dict]):
        corpus = build_corpus(records)
        app.dependency_overrides[get_corpus] = lambda: corpus
        return corpus
    return _override
