import os

# Без окна и звука: тесты рисуют на Surface в памяти
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest


class SequenceRng:
    """Генератор с заранее заданными значениями (x, y, x, y, ...)"""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def integers(self, high):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        assert 0 <= value < high
        return value


@pytest.fixture
def sequence_rng():
    return SequenceRng
