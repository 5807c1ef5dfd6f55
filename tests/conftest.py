import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from breakout_game.core import GameplayStateMachine, GameRules, build_session


class ScriptedRandom:
    """依序回傳預先給定的數值"""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def rules():
    return GameRules()


@pytest.fixture
def session():
    return build_session()


@pytest.fixture
def machine(rules):
    return GameplayStateMachine(rules, ScriptedRandom(0.9))

