"""Error types raised by sliding-window analysis components."""

from __future__ import annotations


class WindowDspError(Exception):
    """Base class for all windowdsp errors."""


class InvalidSizeError(WindowDspError, ValueError):
    """Raised when a buffer or vector size is not usable."""


class IndexOutOfRangeError(WindowDspError, IndexError):
    """Raised when a sample index falls outside the window."""


class LengthMismatchError(WindowDspError, ValueError):
    """Raised when two vectors must have equal length but do not."""


class InvalidTapsError(WindowDspError, ValueError):
    """Raised when FIR coefficients are malformed."""


class TapsTooLongError(InvalidTapsError):
    """Raised when FIR taps look further back than the window holds."""


class FilterNotConfiguredError(WindowDspError, RuntimeError):
    """Raised when FIR output is requested before taps are set."""


class FFTUnsupportedError(WindowDspError, RuntimeError):
    """Raised when a spectral operation is requested on an FFT-disabled window."""


class InvalidBandError(WindowDspError, ValueError):
    """Raised when frequency band bounds are out of order or out of range."""


class DegenerateVectorError(WindowDspError, ValueError):
    """Raised when a vector has zero norm or zero variance."""
