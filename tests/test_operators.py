import numpy as np
import pytest

from adaptive_lns import OperatorPool, PreconditionError, roulette_wheel, updated_score


class FixedDraw:
    """Stands in for a generator whose uniform draw overshoots ``high``."""

    def __init__(self, overshoot):
        self.overshoot = overshoot

    def uniform(self, low, high):
        return high + self.overshoot


def destroy_everything(solution):
    pass


# ---------------------------------------------------------------------------


def test_updated_score_is_moving_average():
    assert updated_score(1.0, 10.0, 0.9) == pytest.approx(1.0 * 0.9 + 0.1 * 10.0)
    assert updated_score(5.0, 0.0, 0.5) == pytest.approx(2.5)


@pytest.mark.parametrize("decay", [0.1, 0.5, 0.9, 0.99])
@pytest.mark.parametrize("start,target", [(1.0, 10.0), (8.0, 1.5), (1.0, 0.0)])
def test_repeated_updates_converge_monotonically(decay, start, target):
    score = start
    distances = []
    for _ in range(200):
        score = updated_score(score, target, decay)
        distances.append(abs(score - target))
    assert all(b <= a + 1e-12 for a, b in zip(distances, distances[1:]))
    assert distances[-1] < abs(start - target)
    assert score >= 0


def test_roulette_is_deterministic_for_a_seed():
    weights = [0.5, 2.0, 1.0, 4.0]
    a = [roulette_wheel(weights, np.random.default_rng(42)) for _ in range(5)]
    rng1, rng2 = np.random.default_rng(7), np.random.default_rng(7)
    first = [roulette_wheel(weights, rng1) for _ in range(100)]
    second = [roulette_wheel(weights, rng2) for _ in range(100)]
    assert first == second
    assert len(set(a)) == 1
    assert all(0 <= i < len(weights) for i in first)


def test_roulette_frequencies_match_weights():
    weights = [1.0, 2.0, 3.0, 4.0]
    rng = np.random.default_rng(2024)
    draws = 20000
    counts = np.bincount([roulette_wheel(weights, rng) for _ in range(draws)], minlength=4)
    expected = np.array(weights) / sum(weights)
    assert np.allclose(counts / draws, expected, atol=0.015)


def test_roulette_never_picks_zero_weights():
    rng = np.random.default_rng(3)
    picks = {roulette_wheel([0.0, 1.0, 0.0], rng) for _ in range(1000)}
    assert picks == {1}


def test_roulette_falls_back_to_last_index():
    assert roulette_wheel([1.0, 1.0, 1.0], FixedDraw(1e-9)) == 2


def test_roulette_rejects_empty_and_negative_weights():
    rng = np.random.default_rng(0)
    with pytest.raises(PreconditionError):
        roulette_wheel([], rng)
    with pytest.raises(PreconditionError):
        roulette_wheel([1.0, -0.1], rng)


# ---------------------------------------------------------------------------


def test_register_appends_with_unit_score():
    pool = OperatorPool("destroy")
    assert pool.register(destroy_everything) == 0
    assert pool.register(lambda s: None, name="noop") == 1
    assert len(pool) == 2
    assert pool.scores == (1.0, 1.0)
    assert pool.names == ("destroy_everything", "noop")
    assert pool[0] is destroy_everything


def test_register_uses_class_name_for_callable_objects():
    class Shuffle:
        def __call__(self, solution):
            pass

    pool = OperatorPool("repair")
    pool.register(Shuffle())
    assert pool.names == ("Shuffle",)


def test_register_rejects_non_callables():
    with pytest.raises(TypeError):
        OperatorPool("repair").register(42)


def test_register_detects_score_count_mismatch():
    pool = OperatorPool("destroy")
    pool.register(destroy_everything)
    pool._scores.append(1.0)
    with pytest.raises(PreconditionError):
        pool.register(destroy_everything)


def test_select_from_empty_pool_fails():
    with pytest.raises(PreconditionError, match="no repair operator"):
        OperatorPool("repair").select(np.random.default_rng(0))


def test_update_and_reset_scores():
    pool = OperatorPool("destroy")
    pool.register(destroy_everything)
    pool.register(destroy_everything)
    pool.update_score(1, 10.0, 0.9)
    assert pool.scores == (1.0, pytest.approx(1.9))
    pool.reset_scores()
    assert pool.scores == (1.0, 1.0)
    assert len(pool) == 2


def test_register_disambiguates_repeated_names():
    pool = OperatorPool("destroy")
    pool.register(destroy_everything)
    pool.register(destroy_everything)
    pool.register(lambda s: None, name="destroy_everything")
    assert pool.names == ("destroy_everything", "destroy_everything#1", "destroy_everything#2")
