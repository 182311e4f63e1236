"""Domain errors, configuration and value types."""

from windowdsp.domain.errors import (
    DegenerateVectorError,
    FFTUnsupportedError,
    FilterNotConfiguredError,
    IndexOutOfRangeError,
    InvalidBandError,
    InvalidSizeError,
    InvalidTapsError,
    LengthMismatchError,
    TapsTooLongError,
    WindowDspError,
)
from windowdsp.domain.models import (
    SUPPORTED_DTYPES,
    CacheState,
    FloatArray,
    Spectrum,
    WindowConfig,
    resolve_dtype,
)

__all__ = [
    "SUPPORTED_DTYPES",
    "CacheState",
    "DegenerateVectorError",
    "FFTUnsupportedError",
    "FilterNotConfiguredError",
    "FloatArray",
    "IndexOutOfRangeError",
    "InvalidBandError",
    "InvalidSizeError",
    "InvalidTapsError",
    "LengthMismatchError",
    "Spectrum",
    "TapsTooLongError",
    "WindowConfig",
    "WindowDspError",
    "resolve_dtype",
]
