"""Tests for replaying recorded signals through a window."""

from __future__ import annotations

import numpy as np
import pytest

from windowdsp.session import SignalWindow, replay_windows


def test_replay_yields_snapshot_every_step() -> None:
    window = SignalWindow(4, fft_enabled=False)
    snapshots = list(replay_windows(np.arange(10, dtype=np.float64), window, step_size=3))

    assert len(snapshots) == 3
    assert np.allclose(snapshots[0], np.asarray([0.0, 0.0, 1.0, 2.0]))
    assert np.allclose(snapshots[1], np.asarray([2.0, 3.0, 4.0, 5.0]))
    assert np.allclose(snapshots[2], np.asarray([5.0, 6.0, 7.0, 8.0]))
    assert np.allclose(window.data(), np.asarray([6.0, 7.0, 8.0, 9.0]))


def test_replay_invalidates_spectrum_between_snapshots() -> None:
    window = SignalWindow(4)
    counts: list[int] = []
    for _ in replay_windows([1.0, 2.0, 3.0, 4.0], window, step_size=2):
        window.fft()
        counts.append(window.analyzer.transform_count)

    assert counts == [1, 2]


@pytest.mark.parametrize(
    ("signal", "step_size", "message"),
    [
        ([1.0, 2.0], 0, "step_size must be > 0"),
        ([[1.0, 2.0]], 1, "must be 1D"),
        ([1.0, float("inf")], 1, "finite"),
    ],
)
def test_replay_validates_input(signal: list[object], step_size: int, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        list(replay_windows(signal, SignalWindow(4), step_size=step_size))  # type: ignore[arg-type]
