"""Precision-generic statistics over one-dimensional sample vectors.

Every function accepts any array-like of reals. Floating inputs keep their
precision (``float32`` stays ``float32``), everything else is promoted to
``float64``. Scalar results are returned as Python floats.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from windowdsp.domain.errors import DegenerateVectorError, InvalidSizeError, LengthMismatchError
from windowdsp.domain.models import FloatArray


def as_float_vector(v: npt.ArrayLike, *, name: str = "v") -> FloatArray:
    """Return ``v`` as a non-empty 1D floating array, preserving float precision."""
    x = np.asarray(v)
    if not np.issubdtype(x.dtype, np.floating):
        x = x.astype(np.float64)
    if x.ndim != 1:
        raise ValueError(f"{name} must be 1D")
    if x.size == 0:
        raise InvalidSizeError(f"{name} must contain at least one sample")
    return x


def v_mean(v: npt.ArrayLike) -> float:
    """Arithmetic mean."""
    return float(np.mean(as_float_vector(v)))


def v_sum(v: npt.ArrayLike) -> float:
    """Sum of all elements."""
    return float(np.sum(as_float_vector(v)))


def v_length(v: npt.ArrayLike) -> float:
    """Euclidean norm."""
    return float(np.linalg.norm(as_float_vector(v)))


def v_power(v: npt.ArrayLike) -> float:
    """Squared Euclidean norm (signal energy)."""
    x = as_float_vector(v)
    return float(np.dot(x, x))


v_energy = v_power


def v_max(v: npt.ArrayLike) -> float:
    """Largest element."""
    return float(np.max(as_float_vector(v)))


def v_min(v: npt.ArrayLike) -> float:
    """Smallest element."""
    return float(np.min(as_float_vector(v)))


def v_variance(v: npt.ArrayLike) -> float:
    """Sample variance with an ``n - 1`` denominator; 0.0 for a single sample."""
    x = as_float_vector(v)
    if x.size == 1:
        return 0.0
    return float(np.var(x, ddof=1))


def v_std(v: npt.ArrayLike) -> float:
    """Sample standard deviation."""
    return float(np.sqrt(v_variance(v)))


def v_add(v: npt.ArrayLike, value: float) -> FloatArray:
    """Add ``value`` to every element."""
    x = as_float_vector(v)
    return x + x.dtype.type(value)


def v_multiply(v: npt.ArrayLike, value: float) -> FloatArray:
    """Multiply every element by ``value``."""
    x = as_float_vector(v)
    return x * x.dtype.type(value)


def v_mod(v: npt.ArrayLike, value: float) -> FloatArray:
    """Elementwise floating remainder with the sign of the dividend."""
    if value == 0:
        raise ValueError("value must be non-zero")
    x = as_float_vector(v)
    return np.fmod(x, x.dtype.type(value))


def v_sqrt(v: npt.ArrayLike) -> FloatArray:
    """Elementwise square root; negative inputs are rejected."""
    x = as_float_vector(v)
    if np.any(x < 0):
        raise ValueError("v must be non-negative for sqrt")
    return np.sqrt(x)


def v_remove_mean(v: npt.ArrayLike) -> FloatArray:
    """Subtract the mean from every element."""
    x = as_float_vector(v)
    return x - np.mean(x)


def v_normalize_to_unit_length(v: npt.ArrayLike, centralize: bool) -> FloatArray:
    """Scale to unit Euclidean norm, optionally removing the mean first."""
    x = as_float_vector(v)
    y = x - np.mean(x) if centralize else x
    norm = float(np.linalg.norm(y))
    if _is_degenerate(norm, x):
        raise DegenerateVectorError("cannot normalize a zero-norm vector to unit length")
    return y / y.dtype.type(norm)


def v_normalize_to_unit_variance(v: npt.ArrayLike, centralize: bool) -> FloatArray:
    """Scale to unit sample variance, optionally removing the mean first."""
    x = as_float_vector(v)
    std = v_std(x)
    if _is_degenerate(std * np.sqrt(max(x.size - 1, 1)), x):
        raise DegenerateVectorError("cannot normalize a zero-variance vector to unit variance")
    y = x - np.mean(x) if centralize else x
    return y / y.dtype.type(std)


def v_dot_product(v1: npt.ArrayLike, v2: npt.ArrayLike) -> float:
    """Inner product of two equal-length vectors."""
    x1 = as_float_vector(v1, name="v1")
    x2 = as_float_vector(v2, name="v2")
    _require_same_length(x1, x2)
    return float(np.dot(x1, x2))


def v_correlation_coefficient(v1: npt.ArrayLike, v2: npt.ArrayLike) -> float:
    """Pearson correlation computed as the dot product of centralized unit vectors."""
    x1 = as_float_vector(v1, name="v1")
    x2 = as_float_vector(v2, name="v2")
    _require_same_length(x1, x2)
    r = v_dot_product(
        v_normalize_to_unit_length(x1, centralize=True),
        v_normalize_to_unit_length(x2, centralize=True),
    )
    return float(np.clip(r, -1.0, 1.0))


def _require_same_length(x1: FloatArray, x2: FloatArray) -> None:
    if x1.size != x2.size:
        raise LengthMismatchError(f"vector lengths differ: {x1.size} != {x2.size}")


def _is_degenerate(norm: float, x: FloatArray) -> bool:
    # Mean removal leaves rounding residue on constant input; scale the cutoff by magnitude.
    tolerance = float(np.finfo(x.dtype).eps) * x.size * float(np.max(np.abs(x)))
    return not np.isfinite(norm) or norm <= tolerance
