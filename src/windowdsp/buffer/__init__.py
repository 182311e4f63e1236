"""Sliding-window sample storage."""

from windowdsp.buffer.ring import MutationListener, SlidingWindowBuffer

__all__ = ["MutationListener", "SlidingWindowBuffer"]
