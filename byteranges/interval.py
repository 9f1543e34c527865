from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Interval:
    """An inclusive span of byte offsets, `start` through `stop`."""

    start: int
    stop: int

    def __post_init__(self) -> None:
        if self.start > self.stop:
            raise ValueError(
                f"Interval start ({self.start}) must be <= stop ({self.stop})"
            )

    def __str__(self) -> str:
        """Human-friendly string showing range and size."""
        return f"Interval({self.start}→{self.stop}, {self.length} bytes)"

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.stop

    @property
    def length(self) -> int:
        return self.stop - self.start + 1

    def overlaps(self, other: "Interval") -> bool:
        """Closed-interval test: spans sharing an endpoint overlap."""
        return self.start <= other.stop and other.start <= self.stop

    def merge(self, other: "Interval") -> "Interval":
        # Only meaningful when other sorts at or after self and overlaps it.
        return Interval(start=self.start, stop=max(self.stop, other.stop))
