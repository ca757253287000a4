import math
import statistics

import pytest

from embedkit.running_median import MEDIAN_MAX_SIZE, MEDIAN_MIN_SIZE, RunningMedian


def filled(size, values):
    rm = RunningMedian(size)
    for v in values:
        rm.add(v)
    return rm


def test_size_is_clamped():
    assert RunningMedian(0).size() == MEDIAN_MIN_SIZE
    assert RunningMedian(100).size() == MEDIAN_MAX_SIZE
    assert RunningMedian(7).size() == 7


def test_empty_gives_nan():
    rm = RunningMedian(5)
    results = [rm.median(), rm.average(), rm.highest(), rm.lowest(), rm.element(0)]
    assert [math.isnan(v) for v in results] == [True] * 5
    assert rm.count() == 0


@pytest.mark.parametrize(
    "values", [[5.0, 1.0, 3.0], [4.0, 1.0, 3.0, 2.0], [9.0], [2.0, 2.0, 8.0, 1.0, 7.0]]
)
def test_median_matches_statistics(values):
    rm = filled(10, values)
    assert rm.median() == pytest.approx(statistics.median(values))


def test_average_of_all_and_middle():
    values = [1.0, 100.0, 2.0, 3.0, -50.0]
    rm = filled(5, values)
    assert rm.average() == pytest.approx(statistics.fmean(values))
    assert rm.average(1) == rm.median()
    assert rm.average(3) == pytest.approx(statistics.fmean([1.0, 2.0, 3.0]))
    assert rm.average(50) == pytest.approx(rm.average())
    assert math.isnan(rm.average(0))


def test_highest_and_lowest():
    rm = filled(5, [3.0, -1.0, 8.0, 2.0])
    assert rm.highest() == 8.0
    assert rm.lowest() == -1.0


def test_elements_in_time_order_after_wrap():
    rm = filled(3, [1.0, 2.0, 3.0, 4.0, 5.0])
    assert rm.count() == 3
    assert [rm.element(i) for i in range(3)] == [3.0, 4.0, 5.0]
    assert math.isnan(rm.element(3))


def test_sorted_elements_are_ascending():
    rm = filled(6, [6.0, 2.0, 9.0, 1.0, 5.0])
    ordered = [rm.sorted_element(i) for i in range(rm.count())]
    assert ordered == sorted([6.0, 2.0, 9.0, 1.0, 5.0])


def test_predict_limits_and_sign():
    rm = filled(7, [1.0, 2.0, 3.0, 4.0, 5.0])
    assert math.isnan(rm.predict(2))
    assert rm.predict(0) == 0.0
    assert rm.predict(1) >= 0.0


def test_predict_even_count_non_negative():
    rm = filled(8, [1.0, 3.0, 6.0, 10.0])
    assert rm.predict(1) >= 0.0
    assert math.isnan(rm.predict(2))


def test_clear_forgets_values():
    rm = filled(4, [1.0, 2.0])
    rm.clear()
    assert rm.count() == 0
    assert math.isnan(rm.median())