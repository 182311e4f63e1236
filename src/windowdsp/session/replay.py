"""Offline replay of recorded signals through a sliding window."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
import numpy.typing as npt

from windowdsp.domain.models import FloatArray
from windowdsp.session.signal_window import SignalWindow


def replay_windows(
    signal: npt.ArrayLike,
    window: SignalWindow,
    *,
    step_size: int,
) -> Iterator[FloatArray]:
    """Push ``signal`` sample by sample, yielding the window every ``step_size`` pushes.

    The first snapshot is taken after ``step_size`` samples, so early windows
    still contain the initial fill for positions not yet reached by the stream.
    """
    if step_size <= 0:
        raise ValueError("step_size must be > 0")

    x = np.asarray(signal, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError("signal must be 1D")
    if not np.all(np.isfinite(x)):
        raise ValueError("signal must contain only finite values")

    for count, value in enumerate(x, start=1):
        window.push(float(value))
        if count % step_size == 0:
            yield window.data()
