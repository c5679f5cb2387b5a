"""Vectors handed between owners, shared work across threads, macros and modules."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

FILL_VALUES = (22, 44, 66)
STRIDE = 5

PEAR = "Pear"
APPLE = "Apple"
CUCUMBER = "Cucumber"
CARROT = "Carrot"

SAUSAGE = "sausage!"


def fill_vec(values: Iterable[int] = ()) -> list[int]:
    """Return a new list holding the given values followed by 22, 44 and 66."""
    return [*values, *FILL_VALUES]


def offset_sums(numbers: Sequence[int], workers: int) -> list[int]:
    """Sum every fifth number starting at each offset, one thread per offset.

    The numbers are shared between the threads, never copied.
    """
    if workers < 0:
        raise ValueError(f"workers must not be negative, got {workers}")

    def sum_from(offset: int) -> int:
        return sum(numbers[offset::STRIDE])

    if workers == 0:
        return []
    with ThreadPoolExecutor(max_workers=workers) as pool:
        sums = list(pool.map(sum_from, range(workers)))
    for offset, total in enumerate(sums):
        print(f"Sum of offset {offset} is {total}")
    return sums


@dataclass
class JobStatus:
    """A count of completed jobs, safe to update from several threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def complete(self) -> None:
        """Record one more finished job."""
        with self._lock:
            self.jobs_completed += 1

    @property
    def completed(self) -> int:
        """The number of finished jobs, read under the lock."""
        with self._lock:
            return self.jobs_completed


def run_jobs(count: int, interval: float) -> JobStatus:
    """Complete jobs on a worker thread while waiting here until all are done."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if interval < 0:
        raise ValueError(f"interval must not be negative, got {interval}")

    status = JobStatus()

    def work() -> None:
        for _ in range(count):
            time.sleep(interval)
            status.complete()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    while status.completed < count:
        print("waiting... ")
        time.sleep(interval * 2)
    worker.join()
    return status


def my_macro(*args: object) -> str:
    """Print and return a message; with one argument the argument is shown."""
    if not args:
        message = "Check out my macro!"
    elif len(args) == 1:
        message = f"Look at this other macro: {args[0]}"
    else:
        raise TypeError(f"my_macro takes at most one argument, got {len(args)}")
    print(message)
    return message


def greet(name: str) -> str:
    """Return a greeting for the name."""
    return f"Hello {name}"


def make_sausage() -> str:
    """Print and return what the factory makes."""
    print(SAUSAGE)
    return SAUSAGE


def favorite_snacks() -> tuple[str, str]:
    """Return the favourite fruit and vegetable."""
    fruit, veggie = PEAR, CUCUMBER
    print(f"favorite snacks: {fruit} and {veggie}")
    return fruit, veggie