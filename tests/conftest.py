"""Global fixtures for Entwine tests."""

from unittest.mock import MagicMock

import pytest

from entwine.core import Random, Shrinkable
from entwine.generators import Generator


class StubGenerator(Generator):
    """Generator whose behaviour is supplied by callables (usually mocks)."""

    def __init__(self, generate=None, with_bias=None):
        self.generate_fn = generate or MagicMock(return_value=Shrinkable(None))
        self.with_bias_fn = with_bias

    def generate(self, rng):
        return self.generate_fn(rng)

    def with_bias(self, frequency):
        if self.with_bias_fn is None:
            return self
        return self.with_bias_fn(frequency)


@pytest.fixture
def make_generator():
    """Factory for stub generators."""
    return StubGenerator


@pytest.fixture
def rng():
    """Seeded randomness source."""
    return Random(42)


@pytest.fixture
def no_call_rng():
    """Randomness source that must never be drawn from."""
    mock = MagicMock(spec=Random)
    mock.next_int.side_effect = AssertionError("next_int should not be called")
    mock.next_double.side_effect = AssertionError("next_double should not be called")
    return mock


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point ENTWINE_CONFIG at a temporary file that does not exist yet."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("ENTWINE_CONFIG", str(path))
    return path
