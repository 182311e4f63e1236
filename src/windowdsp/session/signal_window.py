"""Single-owner analysis session around one sliding window."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy.typing as npt

from windowdsp.buffer.ring import SlidingWindowBuffer
from windowdsp.domain.errors import FFTUnsupportedError, LengthMismatchError
from windowdsp.domain.models import FloatArray, Spectrum, WindowConfig
from windowdsp.filtering.fir import FIRFilter
from windowdsp.spectral.analyzer import SpectralAnalyzer
from windowdsp.spectral.summary import SpectrumSummary, summarize_spectrum
from windowdsp.vector import stats


logger = logging.getLogger(__name__)


class SignalWindow:
    """Sliding window with time-domain stats, cached spectrum, and FIR output.

    Samples enter only through :meth:`push`; every mutation marks the cached
    spectrum stale. Instances are not thread-safe and must be driven by one
    owner at a time.
    """

    def __init__(
        self,
        capacity: int,
        fft_enabled: bool = True,
        *,
        dtype: str = "float64",
        fill_value: float = 0.0,
    ) -> None:
        config = WindowConfig(capacity=capacity, fft_enabled=fft_enabled, dtype=dtype, fill_value=fill_value)
        size = config.effective_capacity
        if size != config.capacity:
            logger.warning("Window size must be even for FFT; using %d instead of %d", size, config.capacity)

        self._config = config
        self._buffer = SlidingWindowBuffer(size, config.fill_value, dtype=config.dtype)
        self._analyzer = SpectralAnalyzer(self._buffer) if config.fft_enabled else None
        self._fir = FIRFilter(self._buffer)

    @classmethod
    def from_config(cls, config: WindowConfig) -> SignalWindow:
        """Build a window from a validated configuration."""
        return cls(
            config.capacity,
            config.fft_enabled,
            dtype=config.dtype,
            fill_value=config.fill_value,
        )

    @property
    def config(self) -> WindowConfig:
        return self._config

    @property
    def buffer_size(self) -> int:
        """Allocated window length, after any even-size correction."""
        return self._buffer.capacity

    @property
    def fft_enabled(self) -> bool:
        return self._analyzer is not None

    @property
    def buffer(self) -> SlidingWindowBuffer:
        return self._buffer

    @property
    def fir_filter(self) -> FIRFilter:
        return self._fir

    def push(self, value: float) -> None:
        """Append the newest sample, evicting the oldest."""
        self._buffer.push(value)

    def extend(self, values: Iterable[float]) -> None:
        self._buffer.extend(values)

    def data(self) -> FloatArray:
        return self._buffer.data()

    def at(self, index: int) -> float:
        return self._buffer.at(index)

    def clear(self) -> None:
        """Zero the window. FIR taps are kept."""
        self._buffer.clear()

    @property
    def mean(self) -> float:
        return stats.v_mean(self.data())

    @property
    def sum(self) -> float:
        return stats.v_sum(self.data())

    @property
    def length(self) -> float:
        """Euclidean norm of the window."""
        return stats.v_length(self.data())

    @property
    def energy(self) -> float:
        """Squared norm of the window."""
        return stats.v_power(self.data())

    @property
    def max(self) -> float:
        return stats.v_max(self.data())

    @property
    def min(self) -> float:
        return stats.v_min(self.data())

    @property
    def variance(self) -> float:
        return stats.v_variance(self.data())

    @property
    def std(self) -> float:
        return stats.v_std(self.data())

    def add(self, value: float) -> FloatArray:
        return stats.v_add(self.data(), value)

    def multiply(self, value: float) -> FloatArray:
        return stats.v_multiply(self.data(), value)

    def mod(self, value: float) -> FloatArray:
        return stats.v_mod(self.data(), value)

    def sqrt(self) -> FloatArray:
        return stats.v_sqrt(self.data())

    def centralized(self) -> FloatArray:
        """Window with its mean removed."""
        return stats.v_remove_mean(self.data())

    def normalized_to_unit_length(self, centralize: bool) -> FloatArray:
        return stats.v_normalize_to_unit_length(self.data(), centralize)

    def normalized_to_unit_variance(self, centralize: bool) -> FloatArray:
        return stats.v_normalize_to_unit_variance(self.data(), centralize)

    def dot_product(self, other: npt.ArrayLike) -> float:
        """Inner product with a vector of exactly ``buffer_size`` elements."""
        vector = stats.as_float_vector(other, name="other")
        if vector.size != self.buffer_size:
            raise LengthMismatchError(
                f"other has {vector.size} elements, window holds {self.buffer_size}"
            )
        return stats.v_dot_product(self.data(), vector)

    @property
    def analyzer(self) -> SpectralAnalyzer:
        """Spectral analyzer bound to this window."""
        if self._analyzer is None:
            raise FFTUnsupportedError("FFT is not enabled on this window")
        return self._analyzer

    @property
    def fft_is_stale(self) -> bool:
        return self.analyzer.stale

    def spectrum(self) -> Spectrum:
        return self.analyzer.compute_fft()

    def fft(self) -> tuple[FloatArray, FloatArray]:
        """Real and imaginary parts of the N/2+1 one-sided bins."""
        spectrum = self.analyzer.compute_fft()
        return spectrum.real, spectrum.imag

    def fft_frequencies(self, sampling_rate_hz: float) -> FloatArray:
        return self.analyzer.frequencies(sampling_rate_hz)

    def fft_magnitudes(self) -> FloatArray:
        return self.analyzer.magnitudes()

    def squared_power_spectrum(self) -> FloatArray:
        return self.analyzer.squared_power_spectrum()

    def mean_squared_power_spectrum(self) -> FloatArray:
        return self.analyzer.mean_squared_power_spectrum()

    def power_spectral_density(self, sampling_rate_hz: float) -> FloatArray:
        return self.analyzer.power_spectral_density(sampling_rate_hz)

    def average_band_power(self, from_hz: float, to_hz: float, sampling_rate_hz: float) -> float:
        return self.analyzer.average_band_power(from_hz, to_hz, sampling_rate_hz)

    def summarize_spectrum(self, sampling_rate_hz: float) -> SpectrumSummary:
        return summarize_spectrum(self.analyzer, sampling_rate_hz=sampling_rate_hz)

    def setup_fir_filter(self, taps: npt.ArrayLike) -> None:
        self._fir.setup(taps)

    def latest_fir_output(self) -> float:
        return self._fir.latest_output()

    def fir_filtered(self) -> FloatArray:
        return self._fir.filtered()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(buffer_size={self.buffer_size}, fft_enabled={self.fft_enabled}, "
            f"buffer={self._buffer!r})"
        )
