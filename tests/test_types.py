from functools import cmp_to_key

import pytest

from ekit.types import comparator_real_number

SAMPLES = [5, -3, 0, 2.5, 7, -3, 100, 2.5]


def test_equal_values_compare_as_zero():
    for value in SAMPLES:
        assert comparator_real_number(value, value) == 0


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_antisymmetric(a, b):
    assert comparator_real_number(a, b) == -comparator_real_number(b, a)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_result_in_allowed_range(a, b):
    assert comparator_real_number(a, b) in {-1, 0, 1}


def test_sorting_with_comparator_matches_natural_order():
    ordered = sorted(SAMPLES, key=cmp_to_key(lambda a, b: comparator_real_number(a, b)))
    assert ordered == sorted(SAMPLES)
    assert all(comparator_real_number(a, b) <= 0 for a, b in zip(ordered, ordered[1:]))


@pytest.mark.parametrize(
    "a, b, want",
    [(1, 2, -1), (2, 1, 1), (3, 3, 0), (-1.5, 0.5, -1)],
)
def test_pinned_values(a, b, want):
    assert comparator_real_number(a, b) == want


def test_smaller_value_sorts_first():
    assert comparator_real_number(1, 2) < comparator_real_number(2, 1)