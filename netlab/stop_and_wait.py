"""Stop-and-wait ARQ simulation with random frame and acknowledgement loss."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum


class EventKind(Enum):
    SENT = "sent"
    ACK_RECEIVED = "ack_received"
    TIMER_TICK = "timer_tick"
    RECEIVED = "received"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class Event:
    """One step of the exchange; ``lost`` marks a frame or ACK that went missing."""

    kind: EventKind
    seq: int = 0
    lost: bool = False

    def __str__(self) -> str:
        if self.kind is EventKind.SENT:
            error = "Error While sending Packet" if self.lost else ""
            return f"SENDER: sent packet with seq NO: {self.seq}\n{error}"
        if self.kind is EventKind.ACK_RECEIVED:
            return f"SENDER: Received ACK for packet {self.seq}"
        if self.kind is EventKind.TIMER_TICK:
            return "SENDER time reducing"
        verb = "Received" if self.kind is EventKind.RECEIVED else "Duplicated"
        error = "Error While sending ACK" if self.lost else ""
        return f"RECEIVER: {verb} packet with seq {self.seq}\n{error}"


class StopAndWait:
    """Sender and receiver taking turns until ``frames`` frames are acknowledged.

    A transmission is lost when ``rng.randrange(4)`` returns 0.
    """

    def __init__(self, frames: int = 5, timeout: int = 5, rng: random.Random | None = None) -> None:
        if frames < 0 or timeout < 1:
            raise ValueError("frames must not be negative and timeout must be positive")
        self.frames = frames
        self.timeout = timeout
        self.rng = rng if rng is not None else random.Random()

    def run(self) -> Iterator[Event]:
        """Yield the events of one complete exchange in order."""
        seq = ack = 0
        expected = 1
        sender_turn = True
        frame_lost = ack_lost = acked_before = False
        ticks = self.timeout

        while True:
            if sender_turn:
                if not ack_lost:
                    if acked_before:
                        yield Event(EventKind.ACK_RECEIVED, ack)
                    if seq == self.frames:
                        return
                    seq += 1
                    acked_before = True
                frame_lost = self.rng.randrange(4) == 0
                yield Event(EventKind.SENT, seq, frame_lost)
                sender_turn = False
            else:
                ticks -= 1
                yield Event(EventKind.TIMER_TICK, seq)
                if ticks == 0:
                    sender_turn = ack_lost = True
                    ticks = self.timeout

            if not sender_turn and not frame_lost:
                if seq == expected:
                    kind, ack = EventKind.RECEIVED, seq
                    expected += 1
                else:
                    kind, ack = EventKind.DUPLICATE, expected - 1
                sender_turn = True
                ack_lost = self.rng.randrange(4) == 0
                yield Event(kind, ack, ack_lost)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one simulated exchange and print its log."""
    parser = argparse.ArgumentParser(description="Simulate stop-and-wait ARQ.")
    parser.add_argument("--frames", type=int, default=5)
    parser.add_argument("--timeout", type=int, default=5)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        protocol = StopAndWait(args.frames, args.timeout, random.Random(args.seed))
    except ValueError as error:
        parser.error(str(error))
    for event in protocol.run():
        print(event)
    return 0


if __name__ == "__main__":
    sys.exit(main())