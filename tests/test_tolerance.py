from datakit.tolerance import ATOL, RTOL, is_close


def test_close_numbers_within_absolute_tolerance():
    assert is_close(0, 1e-15)


def test_distant_numbers_are_not_close():
    assert not is_close(0, 1e-5)


def test_relative_term_scales_with_reference_only():
    # 1e6 * RTOL = 10, so a difference of 5 is accepted against b = 1e6 ...
    assert is_close(1e6 - 5, 1e6)
    # ... but not when the small value is the reference.
    assert not is_close(1e6, 5.0)


def test_default_constants():
    assert RTOL == 1e-5
    assert ATOL == 1e-8
