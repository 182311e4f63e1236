"""Compact frequency-domain features of the current window."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from windowdsp.spectral.analyzer import SpectralAnalyzer


@dataclass(frozen=True, slots=True)
class SpectrumSummary:
    """Peak, centroid, and power of one window's spectrum."""

    dominant_bin: int
    dominant_frequency_hz: float
    spectral_centroid_hz: float
    spectral_rms: float
    total_energy: float


def summarize_spectrum(
    analyzer: SpectralAnalyzer,
    *,
    sampling_rate_hz: float,
) -> SpectrumSummary:
    """Summarize the cached spectrum without triggering a second transform.

    The DC bin is ignored when picking the dominant bin unless every other bin
    is empty, so an offset does not mask the strongest oscillation.
    """
    freqs = analyzer.frequencies(sampling_rate_hz)
    power = analyzer.compute_fft().power()
    mags = np.sqrt(power)

    ac_power = power[1:]
    if ac_power.size and float(np.max(ac_power)) > 0:
        dominant_bin = int(np.argmax(ac_power)) + 1
    else:
        dominant_bin = 0

    mag_sum = float(np.sum(mags))
    centroid_hz = float(np.dot(freqs, mags) / mag_sum) if mag_sum > 0 else 0.0

    return SpectrumSummary(
        dominant_bin=dominant_bin,
        dominant_frequency_hz=float(freqs[dominant_bin]),
        spectral_centroid_hz=centroid_hz,
        spectral_rms=float(np.sqrt(np.mean(power))),
        total_energy=float(np.sum(power)),
    )
