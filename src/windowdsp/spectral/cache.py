"""Explicit fresh/stale cache for a derived spectrum."""

from __future__ import annotations

from windowdsp.domain.models import CacheState, Spectrum


class SpectrumCache:
    """Hold the last computed spectrum and whether it still matches the buffer."""

    def __init__(self) -> None:
        self._state = CacheState.EMPTY
        self._spectrum: Spectrum | None = None

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def is_stale(self) -> bool:
        """True until a spectrum is stored, and again after every invalidation."""
        return self._state != CacheState.FRESH

    def invalidate(self) -> None:
        """Mark the stored spectrum as outdated."""
        if self._state == CacheState.FRESH:
            self._state = CacheState.STALE

    def store(self, spectrum: Spectrum) -> None:
        self._spectrum = spectrum
        self._state = CacheState.FRESH

    def get(self) -> Spectrum:
        """Return the fresh spectrum."""
        if self._state != CacheState.FRESH or self._spectrum is None:
            raise RuntimeError(f"spectrum cache is {self._state.value}")
        return self._spectrum
