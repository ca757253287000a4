import math
import statistics

import pytest

from embedkit.running_average import RunningAverage


def test_empty_gives_nan():
    ra = RunningAverage(4)
    results = [
        ra.average(),
        ra.fast_average(),
        ra.min_in_buffer(),
        ra.max_in_buffer(),
        ra.standard_deviation(),
        ra.minimum(),
    ]
    assert [math.isnan(v) for v in results] == [True] * 6
    assert ra.count() == 0


def test_average_matches_mean():
    values = [1.0, 2.0, 4.0, 8.0]
    ra = RunningAverage(10)
    for v in values:
        ra.add(v)
    assert ra.average() == pytest.approx(statistics.fmean(values))
    assert ra.fast_average() == pytest.approx(ra.average())
    assert ra.count() == len(values)
    assert not ra.is_full()


def test_buffer_keeps_only_latest_values():
    ra = RunningAverage(3)
    for v in [10.0, 20.0, 30.0, 40.0, 50.0]:
        ra.add(v)
    assert ra.is_full()
    assert ra.count() == ra.size() == 3
    assert ra.average() == pytest.approx(statistics.fmean([30.0, 40.0, 50.0]))
    assert ra.fast_average() == pytest.approx(ra.average())
    assert ra.min_in_buffer() == 30.0
    assert ra.max_in_buffer() == 50.0


def test_min_max_remember_all_values_since_clear():
    ra = RunningAverage(2)
    for v in [5.0, -3.0, 9.0, 1.0]:
        ra.add(v)
    assert ra.minimum() == -3.0
    assert ra.maximum() == 9.0
    assert ra.min_in_buffer() == 1.0


def test_standard_deviation_is_sample_stdev():
    values = [2.0, 4.0, 4.0, 5.0, 7.0]
    ra = RunningAverage(5)
    for v in values:
        ra.add(v)
    assert ra.standard_deviation() == pytest.approx(statistics.stdev(values))
    assert 0 < ra.standard_error() < ra.standard_deviation()


def test_single_value_has_no_deviation():
    ra = RunningAverage(5)
    ra.add(3.0)
    results = [ra.standard_deviation(), ra.standard_error()]
    assert [math.isnan(v) for v in results] == [True, True]
    assert ra.average() == 3.0


def test_fill_replaces_contents():
    ra = RunningAverage(5)
    ra.add(100.0)
    ra.fill(2.5, 3)
    assert ra.count() == 3
    assert ra.average() == 2.5
    assert ra.minimum() == ra.maximum() == 2.5


def test_element_access():
    ra = RunningAverage(4)
    ra.add(7.0)
    ra.add(8.0)
    assert ra.element(0) == 7.0
    assert ra.element(1) == 8.0
    assert math.isnan(ra.element(2))


def test_clear_resets():
    ra = RunningAverage(3)
    ra.add(1.0)
    ra.clear()
    assert ra.count() == 0
    assert math.isnan(ra.average())


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        RunningAverage(0)