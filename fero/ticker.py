"""A periodic ticker tasklet feeding work items to a queue-activated worker."""

from __future__ import annotations

import argparse
import struct
import sys
import time as _time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TextIO

from fero.queue import Queue, QueueFull
from fero.scheduler import Scheduler
from fero.tasklet import Tasklet

__all__ = ["run", "main"]

MAX_WORK_ITEMS = 16
TICK_PERIOD_NS = 1_000_000_000
TICK_OFFSET_NS = 500_000_000
DEFAULT_DURATION_NS = 3_000_000_000

_ITEM = struct.Struct("=I")


@dataclass
class _TickerState:
    next_item: int = 0


def _elapsed_clock() -> Callable[[], int]:
    start = _time.process_time_ns()
    return lambda: _time.process_time_ns() - start


def run(
    duration: int = DEFAULT_DURATION_NS,
    clock: Optional[Callable[[], int]] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Run the ticker and worker until ``clock()`` reaches ``duration`` ns.

    Returns the number of work items the ticker produced.
    """
    out = sys.stdout if out is None else out
    clock = _elapsed_clock() if clock is None else clock

    work_queue = Queue(MAX_WORK_ITEMS, _ITEM.size)

    def work(_data: object) -> bool:
        if not len(work_queue):
            return True
        (item,) = _ITEM.unpack(work_queue.get())
        print(f"Work got item {item}", file=out)
        return True

    def tick(state: _TickerState) -> bool:
        print(f"Ticker woken at {clock()}", file=out)
        for offset in range(MAX_WORK_ITEMS):
            item = (state.next_item + offset) & 0xFFFFFFFF
            try:
                work_queue.put(_ITEM.pack(item))
            except QueueFull:
                pass
        state.next_item += MAX_WORK_ITEMS
        return True

    state = _TickerState()
    ticker = Tasklet("Ticker", tick, state)
    ticker.set_periodic(TICK_PERIOD_NS, TICK_OFFSET_NS)
    worker = Tasklet("Work", work)
    worker.set_queue_activated(work_queue)

    scheduler = Scheduler(2)
    scheduler.add_tasklet(worker, 1)
    scheduler.add_tasklet(ticker, 1)

    while clock() < duration:
        scheduler.invoke(clock())
    return state.next_item


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fero-ticker",
        description="Run a periodic ticker that hands work items to a worker.",
    )
    parser.add_argument(
        "--duration",
        type=int,
        default=DEFAULT_DURATION_NS,
        help="CPU time to run for, in nanoseconds (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    run(args.duration)
    return 0


if __name__ == "__main__":
    sys.exit(main())