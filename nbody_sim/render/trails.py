"""Fixed-capacity position trails kept by the presentation layer."""

from collections import deque
from typing import Deque, List
import numpy as np
from nbody_sim.errors import ConfigurationError


class TrailBuffer:
    """FIFO of recent positions; the oldest point is evicted when full."""

    def __init__(self, capacity: int = 600):
        if capacity < 1:
            raise ConfigurationError(f"trail capacity must be >= 1, got {capacity}")
        self._points: Deque[np.ndarray] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._points.maxlen

    def append(self, position) -> None:
        self._points.append(np.array(position, dtype=np.float64))

    def clear(self) -> None:
        self._points.clear()

    def as_array(self) -> np.ndarray:
        """Points oldest-first as an (k, dim) array (k may be 0)."""
        if not self._points:
            return np.empty((0, 0))
        return np.vstack(self._points)

    def __len__(self) -> int:
        return len(self._points)


class TrailHistory:
    """One TrailBuffer per body, indexed like the BodySet."""

    def __init__(self, n_bodies: int, capacity: int = 600):
        self.capacity = capacity
        self.buffers: List[TrailBuffer] = [TrailBuffer(capacity) for _ in range(n_bodies)]

    def record(self, positions: np.ndarray) -> None:
        """Append each body's current position to its trail."""
        if len(positions) != len(self.buffers):
            self.resize(len(positions))
        for buffer, position in zip(self.buffers, positions):
            buffer.append(position)

    def resize(self, n_bodies: int) -> None:
        """Match a body count that changed between steps (new trails start empty)."""
        if n_bodies > len(self.buffers):
            self.buffers.extend(TrailBuffer(self.capacity) for _ in range(n_bodies - len(self.buffers)))
        else:
            del self.buffers[n_bodies:]

    def clear(self) -> None:
        for buffer in self.buffers:
            buffer.clear()

    def __getitem__(self, index: int) -> TrailBuffer:
        return self.buffers[index]

    def __len__(self) -> int:
        return len(self.buffers)
