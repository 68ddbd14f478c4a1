"""Leaky bucket traffic shaping simulation."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class BucketStep:
    """What happened to one incoming packet burst."""

    incoming: int
    dropped: int
    buffered: int
    remaining: int

    def describe(self, capacity: int) -> str:
        """Render the step as the simulation log lines."""
        lines = [f"Incoming packet size {self.incoming}"]
        if self.dropped:
            lines.append(f"Dropped {self.dropped} no of packets")
        lines.append(f"Bucket buffer size :  {self.buffered} out of {capacity}")
        lines.append(
            f"After outgoing ,  There are {self.remaining}  out of {capacity} "
            "packets left in buffer"
        )
        return "\n".join(lines)


class LeakyBucket:
    """A bucket of fixed capacity that drains ``rate`` per step if it holds that much."""

    def __init__(self, capacity: int, rate: int) -> None:
        if capacity < 0 or rate < 0:
            raise ValueError("capacity and rate must not be negative")
        self.capacity = capacity
        self.rate = rate
        self.level = 0

    def offer(self, size: int) -> BucketStep:
        """Pour a burst of ``size`` packets into the bucket, then drain once."""
        dropped = max(size - (self.capacity - self.level), 0)
        self.level = self.capacity if dropped else self.level + size
        buffered = self.level
        if self.level >= self.rate:
            self.level -= self.rate
        self.level = abs(self.level)
        return BucketStep(size, dropped, buffered, self.level)


def simulate(capacity: int, rate: int, packets: Iterable[int]) -> list[BucketStep]:
    """Run every burst through a fresh bucket and return the steps."""
    bucket = LeakyBucket(capacity, rate)
    return [bucket.offer(size) for size in packets]


def main(argv: Sequence[str] | None = None) -> int:
    """Read bucket settings and packet sizes from standard input and log each step."""
    tokens = iter(sys.stdin.read().split())
    try:
        print("Enter bucket size, outgoing rate and no of inputs : ", end="", flush=True)
        capacity, rate, count = (int(next(tokens)) for _ in range(3))
        bucket = LeakyBucket(capacity, rate)
        for _ in range(count):
            print("Enter the incoming packet size : ", end="", flush=True)
            print(bucket.offer(int(next(tokens))).describe(capacity))
    except (StopIteration, RuntimeError):
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())