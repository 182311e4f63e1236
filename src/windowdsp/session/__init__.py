"""Analysis sessions built around a single sliding window."""

from windowdsp.session.replay import replay_windows
from windowdsp.session.signal_window import SignalWindow

__all__ = ["SignalWindow", "replay_windows"]
