"""FIR filtering against the current sliding window."""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt
from scipy import signal

from windowdsp.buffer.ring import SlidingWindowBuffer
from windowdsp.domain.errors import FilterNotConfiguredError, InvalidTapsError, TapsTooLongError
from windowdsp.domain.models import FloatArray


logger = logging.getLogger(__name__)


class FIRFilter:
    """Convolve a coefficient vector with the newest samples of a buffer.

    Taps are aligned to the newest samples: ``taps[-1]`` weights the latest
    sample and ``taps[0]`` the oldest one still covered by the filter.
    Outputs are computed on demand and never cached.
    """

    def __init__(self, buffer: SlidingWindowBuffer, taps: npt.ArrayLike | None = None) -> None:
        self._buffer = buffer
        self._taps: FloatArray | None = None
        self._last_output: float | None = None
        if taps is not None:
            self.setup(taps)

    @property
    def is_configured(self) -> bool:
        return self._taps is not None

    @property
    def num_taps(self) -> int:
        return 0 if self._taps is None else int(self._taps.size)

    @property
    def taps(self) -> FloatArray:
        """Copy of the active coefficients."""
        return self._require_taps().copy()

    @property
    def last_output(self) -> float | None:
        """Value returned by the most recent :meth:`latest_output` call."""
        return self._last_output

    def setup(self, taps: npt.ArrayLike) -> None:
        """Validate and install new coefficients, replacing any previous ones."""
        candidate = np.array(taps, dtype=self._buffer.dtype)
        if candidate.ndim != 1:
            raise InvalidTapsError("taps must be 1D")
        if candidate.size == 0:
            raise InvalidTapsError("taps must not be empty")
        if candidate.size > self._buffer.capacity:
            raise TapsTooLongError(
                f"{candidate.size} taps exceed window capacity {self._buffer.capacity}"
            )
        if not np.all(np.isfinite(candidate)):
            raise InvalidTapsError("taps must contain only finite values")

        candidate.setflags(write=False)
        if self._taps is not None:
            logger.debug("Replacing %d FIR taps with %d", self._taps.size, candidate.size)
        self._taps = candidate
        self._last_output = None

    def latest_output(self) -> float:
        """Filter output aligned with the newest sample."""
        taps = self._require_taps()
        recent = self._buffer.latest(taps.size)
        self._last_output = float(np.dot(taps, recent))
        return self._last_output

    def filtered(self) -> FloatArray:
        """Filter output at every window position, zero-padding before the oldest sample."""
        taps = self._require_taps()
        # lfilter computes sum(b[k] * x[n - k]); reversing the taps keeps newest alignment.
        output = signal.lfilter(taps[::-1], [1.0], self._buffer.data())
        return np.asarray(output, dtype=self._buffer.dtype)

    def _require_taps(self) -> FloatArray:
        if self._taps is None:
            raise FilterNotConfiguredError("FIR taps have not been set up")
        return self._taps
