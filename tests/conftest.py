"""
tests/conftest.py
==================
Shared pytest fixtures for all cluesat tests.
"""

from pathlib import Path

import pytest
from cluesat.core.config import GameConfig, ReasonerConfig
from cluesat.symbolic.reasoner import ClueReasoner
from cluesat.symbolic.vocabulary import Vocabulary

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


# ─── CONFIGS ──────────────────────────────────────────────────────


@pytest.fixture
def standard_config():
    return GameConfig()


@pytest.fixture
def mini_config():
    """Three seats, seven cards: small enough to reason about by hand."""
    return GameConfig(
        players=("p1", "p2", "p3"),
        suspects=("s1", "s2"),
        weapons=("w1", "w2"),
        rooms=("r1", "r2", "r3"),
    )


# ─── VOCABULARIES ─────────────────────────────────────────────────


@pytest.fixture
def standard_vocab(standard_config):
    return Vocabulary(standard_config)


@pytest.fixture
def mini_vocab(mini_config):
    return Vocabulary(mini_config)


# ─── REASONERS ────────────────────────────────────────────────────


@pytest.fixture
def reasoner():
    return ClueReasoner()


@pytest.fixture
def legacy_reasoner():
    return ClueReasoner(settings=ReasonerConfig.for_legacy_traces())


@pytest.fixture
def mini_reasoner(mini_config):
    return ClueReasoner(mini_config)


# ─── TRACES ───────────────────────────────────────────────────────


@pytest.fixture
def worked_game_path():
    return EXAMPLES_DIR / "worked_game.json"
