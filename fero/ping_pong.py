"""Two tasklets passing a counter back and forth through a pair of queues."""

from __future__ import annotations

import argparse
import struct
import sys
from typing import Optional, Sequence, TextIO

from fero.queue import Queue
from fero.scheduler import Scheduler
from fero.tasklet import Tasklet

__all__ = ["run", "main"]

_COUNTER = struct.Struct("=I")
DEFAULT_LIMIT = 32


def _relay(label: str, source: Queue, target: Queue, out: TextIO):
    """Build a tasklet function that forwards an incremented counter."""

    def relay(_data: object) -> bool:
        if not len(source):
            return True
        (counter,) = _COUNTER.unpack(source.get())
        print(f"Received {label} {counter}", file=out)
        target.put(_COUNTER.pack((counter + 1) & 0xFFFFFFFF))
        return True

    return relay


def run(limit: int = DEFAULT_LIMIT, out: Optional[TextIO] = None) -> int:
    """Exchange pings and pongs until the ping counter exceeds ``limit``.

    Returns the counter left waiting in the ping queue.
    """
    out = sys.stdout if out is None else out

    ping_queue = Queue(1, _COUNTER.size)
    pong_queue = Queue(1, _COUNTER.size)

    ping = Tasklet("Ping", _relay("ping", ping_queue, pong_queue, out))
    ping.set_queue_activated(ping_queue)
    pong = Tasklet("Pong", _relay("pong", pong_queue, ping_queue, out))
    pong.set_queue_activated(pong_queue)

    scheduler = Scheduler(2)
    scheduler.add_tasklet(ping, 1)
    scheduler.add_tasklet(pong, 1)

    # The first ping kicks off the exchange.
    ping_queue.put(_COUNTER.pack(0))

    time = 0
    while True:
        scheduler.invoke(time)
        time += 1
        if len(ping_queue):
            (counter,) = _COUNTER.unpack(ping_queue.peek())
            if counter > limit:
                return counter


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fero-ping-pong",
        description="Pass a counter between two queue-activated tasklets.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT,
        help="stop once the ping counter exceeds this value (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    run(args.limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())