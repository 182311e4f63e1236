"""Core value types and configuration for windowed signal analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
import numpy.typing as npt

from windowdsp.domain.errors import InvalidSizeError


FloatArray = npt.NDArray[np.floating[Any]]

SUPPORTED_DTYPES: tuple[str, ...] = ("float32", "float64")


class CacheState(StrEnum):
    """Lifecycle of a derived spectrum relative to its source buffer."""

    EMPTY = "empty"
    FRESH = "fresh"
    STALE = "stale"


def resolve_dtype(dtype: str) -> np.dtype[Any]:
    """Validate a dtype name and return the matching NumPy dtype."""
    if dtype not in SUPPORTED_DTYPES:
        allowed = ", ".join(SUPPORTED_DTYPES)
        raise ValueError(f"dtype must be one of: {allowed}; got {dtype!r}")
    return np.dtype(dtype)


@dataclass(frozen=True, slots=True)
class WindowConfig:
    """Construction parameters for one sliding analysis window."""

    capacity: int
    fft_enabled: bool = True
    dtype: str = "float64"
    fill_value: float = 0.0

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise InvalidSizeError(f"capacity must be > 0, got {self.capacity}")
        resolve_dtype(self.dtype)

    @property
    def effective_capacity(self) -> int:
        """Capacity actually allocated; FFT windows are rounded up to even length."""
        if self.fft_enabled and self.capacity % 2 == 1:
            return self.capacity + 1
        return self.capacity


@dataclass(frozen=True, slots=True)
class Spectrum:
    """One-sided spectrum of a real window, DC through Nyquist."""

    real: FloatArray
    imag: FloatArray

    def __post_init__(self) -> None:
        if self.real.shape != self.imag.shape:
            raise ValueError("real and imag must have same shape")
        if self.real.ndim != 1:
            raise ValueError("spectrum must be 1D")

    @property
    def num_bins(self) -> int:
        """Number of frequency bins (N/2+1 for an N-sample window)."""
        return int(self.real.size)

    def power(self) -> FloatArray:
        """Per-bin squared magnitude, re^2 + im^2."""
        return np.square(self.real) + np.square(self.imag)

    def as_complex(self) -> npt.NDArray[np.complexfloating[Any, Any]]:
        """Return the bins as one complex array."""
        return self.real + 1j * self.imag
