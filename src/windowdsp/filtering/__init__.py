"""Finite impulse response filtering over sliding windows."""

from windowdsp.filtering.fir import FIRFilter

__all__ = ["FIRFilter"]
