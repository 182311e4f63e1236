"""Fixed-capacity sliding window over a scalar sample stream."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import numpy as np

from windowdsp.domain.errors import IndexOutOfRangeError, InvalidSizeError
from windowdsp.domain.models import FloatArray, resolve_dtype


MutationListener = Callable[[], None]


class SlidingWindowBuffer:
    """Keep the most recent ``capacity`` samples, oldest first.

    Samples are written twice into a ``2 * capacity`` array (at ``head`` and
    ``head + capacity``) so the live window is always the contiguous slice
    ``[head, head + capacity)``. Pushing is O(1) and reading never wraps.
    """

    def __init__(self, capacity: int, fill_value: float = 0.0, *, dtype: str = "float64") -> None:
        if capacity <= 0:
            raise InvalidSizeError(f"capacity must be > 0, got {capacity}")
        self._capacity = capacity
        self._dtype = resolve_dtype(dtype)
        self._storage: FloatArray = np.full(2 * capacity, fill_value, dtype=self._dtype)
        self._head = 0
        self._version = 0
        self._listeners: list[MutationListener] = []

    @property
    def capacity(self) -> int:
        """Number of samples held by the window."""
        return self._capacity

    @property
    def dtype(self) -> np.dtype[Any]:
        """Floating dtype of stored samples."""
        return self._dtype

    @property
    def version(self) -> int:
        """Count of mutations applied since construction."""
        return self._version

    def __len__(self) -> int:
        return self._capacity

    @property
    def listener_count(self) -> int:
        """Number of registered mutation listeners."""
        return len(self._listeners)

    def add_mutation_listener(self, listener: MutationListener) -> None:
        """Register a callback invoked after every push/clear."""
        self._listeners.append(listener)

    def remove_mutation_listener(self, listener: MutationListener) -> None:
        """Unregister a previously added callback."""
        try:
            self._listeners.remove(listener)
        except ValueError as exc:
            raise ValueError("listener is not registered") from exc

    def push(self, value: float) -> None:
        """Append ``value`` as the newest sample and drop the oldest one."""
        head = self._head
        self._storage[head] = value
        self._storage[head + self._capacity] = value
        head += 1
        self._head = 0 if head == self._capacity else head
        self._mutated()

    def extend(self, values: Iterable[float]) -> None:
        """Push every value in order."""
        for value in values:
            self.push(value)

    def data(self) -> FloatArray:
        """Snapshot of the window, oldest first."""
        return self._window().copy()

    def latest(self, count: int) -> FloatArray:
        """Snapshot of the newest ``count`` samples, oldest first."""
        if count <= 0 or count > self._capacity:
            raise IndexOutOfRangeError(f"count must be in [1, {self._capacity}], got {count}")
        return self._window()[self._capacity - count :].copy()

    def at(self, index: int) -> float:
        """Return one sample by logical index, 0 being the oldest."""
        if index < 0 or index >= self._capacity:
            raise IndexOutOfRangeError(f"index {index} out of range [0, {self._capacity})")
        return float(self._storage[self._head + index])

    def clear(self) -> None:
        """Reset every sample to zero."""
        self._storage.fill(0)
        self._head = 0
        self._mutated()

    def _window(self) -> FloatArray:
        return self._storage[self._head : self._head + self._capacity]

    def _mutated(self) -> None:
        self._version += 1
        for listener in self._listeners:
            listener()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, dtype={self._dtype.name}, "
            f"data={np.array2string(self._window(), precision=3)})"
        )
