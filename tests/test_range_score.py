"""Range scoring of single parameters."""

from __future__ import annotations

import math

import pytest

from exoengine.scoring import range_score


@pytest.mark.parametrize("value", [0.5, 1.0, 1.5, 2.0])
def test_inside_interval_is_perfect(value: float) -> None:
    assert range_score(value, (0.5, 2.0)) == 1.0


def test_decay_uses_half_width_as_length_scale() -> None:
    # width 2 -> decay length 1
    assert range_score(3.0, (0.0, 2.0)) == pytest.approx(math.exp(-1.0))
    assert range_score(-1.0, (0.0, 2.0)) == pytest.approx(math.exp(-1.0))
    assert range_score(4.0, (0.0, 2.0)) == pytest.approx(math.exp(-2.0))


def test_decay_is_monotonic_on_both_sides() -> None:
    below = [range_score(v, (10.0, 20.0)) for v in (9.0, 7.0, 4.0, 0.0)]
    above = [range_score(v, (10.0, 20.0)) for v in (21.0, 23.0, 26.0, 30.0)]
    assert below == sorted(below, reverse=True) and len(set(below)) == 4
    assert above == sorted(above, reverse=True) and len(set(above)) == 4


def test_zero_width_interval_is_point_match() -> None:
    assert range_score(5.0, (5.0, 5.0)) == 1.0
    assert range_score(5.000001, (5.0, 5.0)) == 0.0
    assert range_score(-3.0, (5.0, 5.0)) == 0.0


def test_non_finite_values_do_not_propagate() -> None:
    assert range_score(float("nan"), (0.0, 1.0)) == 0.0
    assert range_score(float("inf"), (0.0, 1.0)) == 0.0
    assert range_score(float("-inf"), (0.0, 1.0)) == 0.0


def test_far_out_of_range_degrades_toward_zero() -> None:
    score = range_score(1e6, (0.5, 2.0))
    assert 0.0 <= score < 1e-12
