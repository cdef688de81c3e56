from __future__ import annotations

import random

import pytest

from classic_pong.config import MatchConfig
from classic_pong.match import Match


@pytest.fixture
def config() -> MatchConfig:
    return MatchConfig()


@pytest.fixture
def viewport(config) -> tuple[float, float]:
    return config.viewport


@pytest.fixture
def match(config) -> Match:
    return Match.create(config, random.Random(1234))
