"""Fixed-length sample history for charting."""

from collections import deque
from collections.abc import Iterator


class RollingWindow:
    """
    Fixed-capacity FIFO of recent samples.

    The window is pre-filled on creation and never changes length: every push
    evicts the oldest sample.
    """

    def __init__(self, capacity: int = 200, fill: float = 0.0) -> None:
        """
        Initialize the RollingWindow.

        Args:
            capacity: Number of samples kept. Must be positive.
            fill: Value the window is pre-filled with.
        """
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._samples: deque[float] = deque([float(fill)] * capacity, maxlen=capacity)

    def push(self, value: float) -> None:
        """Evict the oldest sample and append ``value``."""
        self._samples.append(float(value))

    def snapshot(self) -> tuple[float, ...]:
        """Read-only copy of the samples, oldest first."""
        return tuple(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[float]:
        return iter(self._samples)
