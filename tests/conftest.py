import random

import pytest

from chroma.colors import CHANNELS
from chroma.model import GameModel


class ScriptedRandom(random.Random):
    """random.Random whose choice() replays a fixed script of picks."""

    def __init__(self, picks, seed=0):
        super().__init__(seed)
        self._picks = list(picks)

    def choice(self, seq):
        pick = self._picks.pop(0)
        assert pick in seq
        return pick


@pytest.fixture()
def scripted_rng():
    return ScriptedRandom


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def model(rng):
    return GameModel(rng)


@pytest.fixture()
def playing(model):
    model.start()
    return model


@pytest.fixture()
def changed_channels():
    """Names of the HSL channels that differ between two colors."""
    def _changed(a, b):
        return [ch for ch in CHANNELS if getattr(a, ch) != getattr(b, ch)]
    return _changed
