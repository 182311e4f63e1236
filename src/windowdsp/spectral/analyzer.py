"""Lazily cached real-FFT analysis of a sliding window."""

from __future__ import annotations

import logging
import math
import weakref

import numpy as np

from windowdsp.buffer.ring import SlidingWindowBuffer
from windowdsp.domain.errors import InvalidBandError, InvalidSizeError
from windowdsp.domain.models import CacheState, FloatArray, Spectrum
from windowdsp.spectral.cache import SpectrumCache


logger = logging.getLogger(__name__)


class SpectralAnalyzer:
    """Compute and cache the one-sided spectrum of a buffer.

    The analyzer subscribes to buffer mutations, so every ``push``/``clear``
    marks the cached spectrum stale before the mutating call returns. The
    transform itself runs only when a spectral view is requested on a stale
    cache.
    """

    def __init__(self, buffer: SlidingWindowBuffer) -> None:
        if buffer.capacity % 2 != 0:
            raise InvalidSizeError(f"FFT requires an even window size, got {buffer.capacity}")
        self._buffer = buffer
        self._cache = SpectrumCache()
        self._transform_count = 0
        buffer.add_mutation_listener(self._cache.invalidate)
        # Listener lives only as long as the analyzer.
        self._detach = weakref.finalize(self, buffer.remove_mutation_listener, self._cache.invalidate)

    @property
    def window_size(self) -> int:
        return self._buffer.capacity

    @property
    def num_bins(self) -> int:
        return self._buffer.capacity // 2 + 1

    @property
    def stale(self) -> bool:
        """Whether the next spectral read will recompute the FFT."""
        return self._cache.is_stale

    @property
    def cache_state(self) -> CacheState:
        return self._cache.state

    @property
    def transform_count(self) -> int:
        """Number of FFT evaluations performed so far."""
        return self._transform_count

    def detach(self) -> None:
        """Stop tracking buffer mutations. Calling it again has no effect."""
        self._detach()

    def compute_fft(self) -> Spectrum:
        """Return the spectrum of the current window, recomputing only if stale."""
        if self._cache.is_stale:
            bins = np.fft.rfft(self._buffer.data())
            self._transform_count += 1
            real = np.ascontiguousarray(bins.real)
            imag = np.ascontiguousarray(bins.imag)
            # Cached bins are shared with every caller until the next mutation.
            real.setflags(write=False)
            imag.setflags(write=False)
            self._cache.store(Spectrum(real=real, imag=imag))
            logger.debug("Recomputed %d-point FFT (transform #%d)", self.window_size, self._transform_count)
        return self._cache.get()

    def frequencies(self, sampling_rate_hz: float) -> FloatArray:
        """Bin center frequencies ``k * fs / N`` for k in [0, N/2]."""
        _validate_sampling_rate(sampling_rate_hz)
        return np.asarray(
            np.fft.rfftfreq(self.window_size, d=1.0 / sampling_rate_hz),
            dtype=self._buffer.dtype,
        )

    def magnitudes(self) -> FloatArray:
        """Absolute value of each bin."""
        return np.sqrt(self.compute_fft().power())

    def squared_power_spectrum(self) -> FloatArray:
        """One-sided squared magnitudes: doubled, except the DC bin."""
        return self._one_sided(self.compute_fft().power())

    def mean_squared_power_spectrum(self) -> FloatArray:
        """One-sided squared magnitudes divided by the window size."""
        return self._one_sided(self.compute_fft().power() / self.window_size)

    def power_spectral_density(self, sampling_rate_hz: float) -> FloatArray:
        """One-sided squared magnitudes divided by ``fs * N``."""
        _validate_sampling_rate(sampling_rate_hz)
        return self._one_sided(self.compute_fft().power() / (sampling_rate_hz * self.window_size))

    def average_band_power(self, from_hz: float, to_hz: float, sampling_rate_hz: float) -> float:
        """Mean raw bin power over ``[from_hz, to_hz]``.

        The lower edge is floored and the upper edge is ceiled to bin indices,
        both inclusive, so a band may pick up one extra bin on either side.
        The result is not one-sided-scaled.
        """
        _validate_sampling_rate(sampling_rate_hz)
        nyquist = sampling_rate_hz / 2.0
        if not 0.0 <= from_hz <= to_hz <= nyquist:
            raise InvalidBandError(
                f"band must satisfy 0 <= from_hz <= to_hz <= {nyquist:g}; got [{from_hz:g}, {to_hz:g}]"
            )

        last_bin = self.num_bins - 1
        from_idx = min(max(math.floor(from_hz * self.window_size / sampling_rate_hz), 0), last_bin)
        to_idx = min(max(math.ceil(to_hz * self.window_size / sampling_rate_hz), 0), last_bin)

        band = self.compute_fft().power()[from_idx : to_idx + 1]
        return float(np.mean(band))

    @staticmethod
    def _one_sided(power: FloatArray) -> FloatArray:
        scaled = power * 2
        scaled[0] /= 2
        return scaled


def _validate_sampling_rate(sampling_rate_hz: float) -> None:
    if not (math.isfinite(sampling_rate_hz) and sampling_rate_hz > 0):
        raise ValueError(f"sampling_rate_hz must be finite and > 0, got {sampling_rate_hz}")
