"""Tests for the sampling loop."""

from unittest.mock import MagicMock

import pytest

from entwine.generators import letrec, nat, one_of, tuple_of
from entwine.sampler import SampleResult, sample_values


class TestSampleValues:
    """Tests for sample_values()."""

    def test_sample_basic(self):
        result = sample_values(nat(10), count=5, seed=42)

        assert isinstance(result, SampleResult)
        assert len(result.values) == 5
        assert result.count == 5
        assert result.seed == 42
        assert all(0 <= v <= 10 for v in result.values)

    def test_sample_consistency(self):
        """Same seed, same values."""
        result1 = sample_values(nat(), count=5, seed=123)
        result2 = sample_values(nat(), count=5, seed=123)

        assert result1.values == result2.values

    def test_random_seed_recorded(self):
        result1 = sample_values(nat(), count=3)
        result2 = sample_values(nat(), count=3, seed=result1.seed)

        assert result1.values == result2.values

    def test_bias_applied_once(self, make_generator):
        biased = make_generator()
        with_bias = MagicMock(return_value=biased)
        gen = make_generator(with_bias=with_bias)

        result = sample_values(gen, count=3, seed=1, bias_frequency=4)

        with_bias.assert_called_once_with(4)
        assert biased.generate_fn.call_count == 3
        assert result.bias_frequency == 4

    def test_recursive_family_with_bias(self):
        family = letrec(lambda tie: {
            "tree": one_of(tie("leaf"), tie("node"), max_depth=6),
            "node": tuple_of(tie("tree"), tie("tree")),
            "leaf": nat(),
        })

        result = sample_values(family["tree"], count=10, seed=3, bias_frequency=2)

        assert len(result.values) == 10

    def test_zero_count(self):
        assert sample_values(nat(), count=0, seed=1).values == []

    def test_negative_count(self):
        with pytest.raises(ValueError, match="non-negative"):
            sample_values(nat(), count=-1, seed=1)

    def test_invalid_bias_frequency(self):
        with pytest.raises(ValueError, match="at least 1"):
            sample_values(nat(), count=1, seed=1, bias_frequency=0)
