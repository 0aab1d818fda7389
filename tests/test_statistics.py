import pytest

from bank_queue.core import StatsAccumulator


def accumulator(*waits):
    stats = StatsAccumulator()
    for wait in waits:
        stats.add(wait)
    return stats


def test_empty_accumulator_is_safe():
    stats = StatsAccumulator()
    assert not stats.has_data()
    assert stats.mean() == 0.0
    assert stats.median() == 0.0
    assert stats.mode() == 0
    assert stats.stddev() == 0.0
    assert stats.max() == 0.0


def test_mean_and_max():
    stats = accumulator(3, 0, 6)
    assert stats.mean() == pytest.approx(3.0)
    assert stats.max() == 6.0


def test_median_odd_and_even_counts():
    assert accumulator(5, 1, 3).median() == 3.0
    assert accumulator(4, 1, 3, 2).median() == 2.5


def test_median_leaves_insertion_order_alone():
    stats = accumulator(5, 1, 4, 2)
    stats.median()
    assert stats.samples == (5.0, 1.0, 4.0, 2.0)


def test_mode_ties_go_to_lowest_value():
    assert accumulator(1, 1, 2, 2).mode() == 1
    assert accumulator(2, 2, 1, 1).mode() == 1


def test_mode_rounds_half_away_from_zero():
    assert accumulator(2.5, 3.0, 0.4).mode() == 3
    assert accumulator(7.0).mode() == 7


def test_max_of_negative_samples():
    assert accumulator(-5, -2, -9).max() == -2.0


def test_mode_with_wide_sample_range():
    assert accumulator(0, 1e9, 1e9).mode() == 1000000000
    assert accumulator(1e9, 0).mode() == 0


def test_population_standard_deviation():
    stats = accumulator(2, 4, 4, 4, 5, 5, 7, 9)
    assert stats.stddev() == pytest.approx(2.0)


def test_statistics_ignore_insertion_order():
    forward = accumulator(0, 2, 2, 5, 9)
    backward = accumulator(9, 5, 2, 2, 0)
    assert forward.summary() == pytest.approx(backward.summary())


def test_summary_is_idempotent():
    stats = accumulator(0, 1, 4, 4, 2)
    assert stats.summary() == stats.summary()
    assert stats.summary() == {
        'count': 5,
        'mean': pytest.approx(2.2),
        'median': 2.0,
        'mode': 4,
        'stddev': pytest.approx(1.6),
        'max': 4.0,
    }
