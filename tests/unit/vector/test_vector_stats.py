"""Tests for precision-generic vector statistics."""

from __future__ import annotations

import numpy as np
import pytest

from windowdsp.domain import DegenerateVectorError, InvalidSizeError, LengthMismatchError
from windowdsp.vector import (
    v_add,
    v_correlation_coefficient,
    v_dot_product,
    v_length,
    v_max,
    v_mean,
    v_min,
    v_mod,
    v_multiply,
    v_normalize_to_unit_length,
    v_normalize_to_unit_variance,
    v_power,
    v_remove_mean,
    v_sqrt,
    v_std,
    v_sum,
    v_variance,
)


def test_reductions_on_simple_vector() -> None:
    v = [3.0, 4.0]

    assert v_mean(v) == pytest.approx(3.5)
    assert v_sum(v) == pytest.approx(7.0)
    assert v_length(v) == pytest.approx(5.0)
    assert v_power(v) == pytest.approx(25.0)
    assert v_max(v) == pytest.approx(4.0)
    assert v_min(v) == pytest.approx(3.0)


def test_variance_uses_sample_denominator() -> None:
    v = [1.0, 2.0, 3.0, 4.0]

    assert v_variance(v) == pytest.approx(5.0 / 3.0)
    assert v_std(v) == pytest.approx(np.sqrt(5.0 / 3.0))
    assert v_variance([2.5]) == 0.0


def test_integer_input_is_promoted_to_float64() -> None:
    result = v_add([1, 2, 3], 0.5)

    assert result.dtype == np.float64
    assert np.allclose(result, np.asarray([1.5, 2.5, 3.5]))


def test_float32_input_keeps_precision() -> None:
    v = np.asarray([1.0, 2.0, 4.0], dtype=np.float32)

    assert v_add(v, 1.0).dtype == np.float32
    assert v_multiply(v, 2.0).dtype == np.float32
    assert v_remove_mean(v).dtype == np.float32
    assert v_normalize_to_unit_length(v, centralize=True).dtype == np.float32
    assert v_mean(v) == pytest.approx(7.0 / 3.0, rel=1e-6)


def test_elementwise_helpers() -> None:
    v = np.asarray([1.0, 4.0, 9.0])

    assert np.allclose(v_multiply(v, -2.0), np.asarray([-2.0, -8.0, -18.0]))
    assert np.allclose(v_sqrt(v), np.asarray([1.0, 2.0, 3.0]))
    assert np.allclose(v_mod([5.5, -5.5], 2.0), np.asarray([1.5, -1.5]))
    assert np.allclose(v_remove_mean(v), v - np.mean(v))


def test_sqrt_and_mod_reject_invalid_arguments() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        v_sqrt([1.0, -1.0])
    with pytest.raises(ValueError, match="non-zero"):
        v_mod([1.0], 0.0)


def test_empty_and_multidimensional_input_are_rejected() -> None:
    with pytest.raises(InvalidSizeError):
        v_mean([])
    with pytest.raises(ValueError, match="1D"):
        v_sum(np.ones((2, 2)))


def test_normalize_to_unit_length() -> None:
    plain = v_normalize_to_unit_length([3.0, 4.0], centralize=False)
    centered = v_normalize_to_unit_length([1.0, 2.0, 3.0], centralize=True)

    assert np.allclose(plain, np.asarray([0.6, 0.8]))
    assert np.linalg.norm(centered) == pytest.approx(1.0)
    assert np.mean(centered) == pytest.approx(0.0, abs=1e-12)


def test_normalize_to_unit_length_rejects_zero_norm() -> None:
    with pytest.raises(DegenerateVectorError):
        v_normalize_to_unit_length([0.0, 0.0, 0.0], centralize=False)
    with pytest.raises(DegenerateVectorError):
        v_normalize_to_unit_length([0.1] * 10, centralize=True)


def test_normalize_to_unit_variance() -> None:
    v = np.asarray([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])
    centered = v_normalize_to_unit_variance(v, centralize=True)
    scaled = v_normalize_to_unit_variance(v, centralize=False)

    assert np.std(centered, ddof=1) == pytest.approx(1.0)
    assert np.mean(centered) == pytest.approx(0.0, abs=1e-12)
    assert np.allclose(scaled, v / np.std(v, ddof=1))


def test_normalize_to_unit_variance_rejects_constant_input() -> None:
    with pytest.raises(DegenerateVectorError):
        v_normalize_to_unit_variance([3.0, 3.0, 3.0], centralize=True)
    with pytest.raises(DegenerateVectorError):
        v_normalize_to_unit_variance([3.0], centralize=False)


def test_dot_product_requires_equal_lengths() -> None:
    assert v_dot_product([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == pytest.approx(32.0)
    with pytest.raises(LengthMismatchError, match="3 != 2"):
        v_dot_product([1.0, 2.0, 3.0], [1.0, 2.0])


def test_correlation_of_vector_with_itself_and_shifted_copy() -> None:
    v = np.arange(10, dtype=np.float64)

    assert v_correlation_coefficient(v, v) == pytest.approx(1.0)
    assert v_correlation_coefficient(v, v + 3.0) == pytest.approx(1.0)
    assert v_correlation_coefficient(v, -2.0 * v) == pytest.approx(-1.0)


def test_correlation_matches_pearson() -> None:
    rng = np.random.default_rng(11)
    v1 = rng.normal(size=64)
    v2 = 0.5 * v1 + rng.normal(size=64)

    assert v_correlation_coefficient(v1, v2) == pytest.approx(float(np.corrcoef(v1, v2)[0, 1]))


def test_correlation_rejects_constant_and_mismatched_input() -> None:
    with pytest.raises(DegenerateVectorError):
        v_correlation_coefficient([2.0, 2.0, 2.0], [1.0, 2.0, 3.0])
    with pytest.raises(LengthMismatchError):
        v_correlation_coefficient([1.0, 2.0, 3.0], [1.0, 2.0])


def test_float32_self_correlation_stays_within_pearson_range() -> None:
    rng = np.random.default_rng(5)
    v = rng.normal(size=4096).astype(np.float32)

    r = v_correlation_coefficient(v, v)
    assert -1.0 <= r <= 1.0
    assert r == pytest.approx(1.0, abs=1e-6)
    assert v_correlation_coefficient(v, -v) >= -1.0
