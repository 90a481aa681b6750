"""
Tests for the JAX-backed sampler.
"""

import jax.random as jr
import pytest

from understory.sampling import KeySampler


class TestKeySampler:
    """Tests for draw ranges and reproducibility."""

    def test_offsets_within_radius(self) -> None:
        sampler = KeySampler(jr.PRNGKey(0))
        offsets = sampler.offsets(200, 3)
        assert len(offsets) == 200
        assert all(-3 <= dx <= 3 and -3 <= dy <= 3 for dx, dy in offsets)

    def test_offsets_reach_both_extremes(self) -> None:
        offsets = KeySampler(jr.PRNGKey(1)).offsets(500, 2)
        values = {dx for dx, _ in offsets} | {dy for _, dy in offsets}
        assert values == {-2, -1, 0, 1, 2}

    def test_offsets_are_ints(self) -> None:
        dx, dy = KeySampler(jr.PRNGKey(0)).offsets(1, 1)[0]
        assert isinstance(dx, int)
        assert isinstance(dy, int)

    def test_zero_offsets(self) -> None:
        assert KeySampler(jr.PRNGKey(0)).offsets(0, 3) == []

    def test_index_range(self) -> None:
        sampler = KeySampler(jr.PRNGKey(2))
        draws = [sampler.index(3) for _ in range(50)]
        assert set(draws) <= {0, 1, 2}

    def test_index_of_empty_range(self) -> None:
        with pytest.raises(ValueError):
            KeySampler(jr.PRNGKey(0)).index(0)

    def test_same_seed_same_draws(self) -> None:
        first = KeySampler.from_seed(9)
        second = KeySampler.from_seed(9)
        assert first.offsets(10, 4) == second.offsets(10, 4)
        assert [first.index(7) for _ in range(5)] == [second.index(7) for _ in range(5)]

    def test_successive_draws_differ(self) -> None:
        sampler = KeySampler(jr.PRNGKey(0))
        assert sampler.offsets(20, 5) != sampler.offsets(20, 5)
