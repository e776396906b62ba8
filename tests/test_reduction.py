import math

import numpy as np
import pytest

from datakit.errors import EmptyInputError
from datakit.stats.reduction import prod, sample_max, sample_min
from datakit.tolerance import is_close


def test_prod_of_integer_run():
    assert is_close(prod(range(1, 11)), 3628800)


def test_prod_survives_extreme_magnitudes():
    floats = ([0.1, 0.2, 0.3] * 33)[:99]
    values = [1e75] + floats
    assert is_close(prod(values), 47.751966659678405306351616)


def test_prod_matches_plain_multiplication():
    values = [1.5, -2.0, 0.25, 3.0, -0.75]
    assert is_close(prod(values), math.prod(values))


def test_prod_sign_tracking():
    assert prod([-2.0, 3.0]) < 0
    assert prod([-2.0, -3.0]) > 0


def test_prod_zero_short_circuits():
    assert prod([5.0, 0.0, -3.0]) == 0.0
    assert prod([0.0]) == 0.0


def test_prod_of_tiny_values_does_not_underflow_midway():
    values = [1e-200, 1e-200, 1e200, 1e200]
    assert is_close(prod(values), 1.0)


def test_prod_of_long_run_with_unrepresentable_partials():
    values = [1e300, 1e300, 1e-300, 1e-300, 2.0]
    assert is_close(prod(values), 2.0)


def test_max_and_min():
    nums = [10, -2, 23, 12, 43, 123213, 2]
    assert sample_max(nums) == 123213
    assert sample_min(nums) == -2


def test_single_element_extrema():
    assert sample_max([7.5]) == 7.5
    assert sample_min([7.5]) == 7.5


@pytest.mark.parametrize("func", [sample_max, sample_min, prod])
def test_empty_sample_raises(func):
    with pytest.raises(EmptyInputError):
        func([])


def test_prod_raises_when_product_exceeds_float_range():
    with pytest.raises(OverflowError):
        prod([1e200, 1e200])
    with pytest.raises(OverflowError):
        prod([-1e200, 1e200])


@pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
def test_prod_rejects_non_finite_values(bad):
    with pytest.raises(ValueError):
        prod([2.0, bad, 3.0])


def test_reductions_are_pure():
    data = np.array([0.3, -1.7, 2.9, 0.05])
    snapshot = data.copy()
    assert prod(data) == prod(data)
    assert sample_max(data) == sample_max(data)
    assert sample_min(data) == sample_min(data)
    np.testing.assert_array_equal(data, snapshot)
