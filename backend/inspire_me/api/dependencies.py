"""Route Dependencies — corpus and random source injected into handlers.

Invariants:
    - get_corpus() returns the read-only bundled corpus
    - get_rng() returns a new generator per request (no shared random state)

Design Decisions:
    - Plain dependency functions so tests swap them via app.dependency_overrides
"""

import random

from inspire_me.config import get_settings
from inspire_me.core.corpus import DEFAULT_CORPUS, Corpus


def get_corpus() -> Corpus:
    return DEFAULT_CORPUS


def get_rng() -> random.Random:
    """Per-request generator. Seeded from settings when random_seed is set."""
    seed = get_settings().random_seed
    return random.Random(seed) if seed is not None else random.Random()
