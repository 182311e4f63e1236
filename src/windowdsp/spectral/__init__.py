"""Frequency-domain analysis of sliding windows."""

from windowdsp.spectral.analyzer import SpectralAnalyzer
from windowdsp.spectral.cache import SpectrumCache
from windowdsp.spectral.summary import SpectrumSummary, summarize_spectrum

__all__ = [
    "SpectralAnalyzer",
    "SpectrumCache",
    "SpectrumSummary",
    "summarize_spectrum",
]
