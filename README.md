# fero

A small cooperative scheduler built from three pieces:

- **`Queue`** (`fero.queue`) is a bounded FIFO of byte messages. Each queue
  has a fixed capacity and a maximum item size.
- **`Tasklet`** (`fero.tasklet`) is a named callable plus the rule that
  decides when it is due. It can be due always, periodically, or whenever a
  queue holds something.
- **`Scheduler`** (`fero.scheduler`) keeps tasklets ordered by priority. Each
  call to `invoke` runs at most one tasklet: the due tasklet with the highest
  priority.

Time is measured in integer nanoseconds. The caller supplies the current time,
so the scheduler runs equally well against a real clock or a simulated one.

## Queues

```python
from fero.queue import Queue, QueueFull, QueueEmpty, ItemTooLarge

q = Queue(capacity=2, item_size=10)
q.put(b"\x01\x02\x03")
q.put(b"\x04")
len(q)        # 2
q.full        # True
list(q)       # [b"\x01\x02\x03", b"\x04"], oldest first
q.peek()      # b"\x01\x02\x03", left in the queue
q.get()       # b"\x01\x02\x03", removed from the queue
```

`put` accepts `bytes`, `bytearray` or `memoryview` and stores a copy. It
raises `ItemTooLarge` for an item longer than `item_size` and `QueueFull`
when the queue already holds `capacity` items. `get` and `peek` raise
`QueueEmpty` on an empty queue. All three errors derive from `QueueError`.
A negative capacity or item size raises `ValueError`.

## Tasklets

```python
from fero.tasklet import Tasklet, InvocationType

def work(data):
    ...

t = Tasklet("Work", work, None)
t.set_always_active()                        # due on every cycle
t.set_periodic(1_000_000_000, 500_000_000)   # every 1 s, first at 0.5 s
t.set_queue_activated(q)                     # due while q is not empty
t.invocation_type                            # InvocationType.QUEUE
```

`is_due(time)` tells whether the tasklet should run at `time`. A tasklet
with no activation rule (`InvocationType.NONE`) is never due.

`invoke()` calls the function with the tasklet's `data` and returns whatever
the function returns. For a periodic tasklet, it first moves
`next_activation_time` forward by one `period`. Invoking a tasklet that was
created without a function raises `TypeError`.

## Scheduler

```python
from fero.scheduler import Scheduler, SchedulerFull

s = Scheduler(capacity=2)
s.add_tasklet(high, 2)
s.add_tasklet(low, 1)
s.tasklets    # (high, low)

ran = s.invoke(now_ns())   # the tasklet that ran, or None
```

`add_tasklet` stores the priority on the tasklet. Tasklets with a higher
priority come first. Among tasklets with equal priority, the one added
earlier comes first. Adding a tasklet to a scheduler that already holds
`capacity` tasklets raises `SchedulerFull`.

## Demos

Two small programs are installed with the package.

```
fero-ping-pong [--limit N]
```

Two queue-activated tasklets, "Ping" and "Pong", pass a counter back and
forth. Each adds one and prints what it received. The program stops once the
counter waiting in the ping queue exceeds the limit (default 32). The same
exchange is available from Python as `fero.ping_pong.run(limit, out)`.
It returns the final counter.

```
fero-ticker [--duration NS]
```

A periodic "Ticker" tasklet wakes every second, first at half a second. Each
time, it puts 16 numbered work items into a queue. A queue-activated "Work"
tasklet takes them out and prints them. The program runs until the given
amount of process CPU time has passed (default 3,000,000,000 ns).
`fero.ticker.run(duration, clock, out)` accepts any nanosecond clock in place
of process time. It returns the number of items the ticker produced.

## What it does not do

Scheduling is purely cooperative. Nothing runs unless you call
`Scheduler.invoke`, and a running tasklet is never interrupted. The package
starts no threads and keeps no clock of its own. Queues and schedulers live
only in memory.