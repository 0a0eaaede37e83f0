"""Background counter that ticks on a timer, with an interactive prompt."""

from __future__ import annotations

import argparse
import sys
import threading
from collections.abc import Iterator, Sequence
from typing import TextIO

__all__ = ["TickCounter", "run_prompt", "main"]

PROMPT = "Press 'd' to display counter or 'q' to quit: "


class TickCounter:
    """Counter increased by one every ``interval`` seconds on a worker thread."""

    def __init__(self, interval: float = 1.0) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._value = 0
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def value(self) -> int:
        """The current count."""
        with self._lock:
            return self._value

    def tick(self) -> int:
        """Increase the count by one and return it."""
        with self._lock:
            self._value += 1
            return self._value

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            self.tick()

    def start(self) -> None:
        """Start ticking in the background."""
        if self._thread is not None:
            raise RuntimeError("counter already running")
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop ticking and wait for the worker to finish."""
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None

    def __enter__(self) -> TickCounter:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()


def _keys(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from (char for char in line if not char.isspace())


def run_prompt(counter: TickCounter, stdin: TextIO, stdout: TextIO) -> None:
    """Answer 'd' with the count and stop at 'q' or end of input."""
    keys = _keys(stdin)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        key = next(keys, None)
        if key is None or key == "q":
            return
        if key == "d":
            stdout.write(f"Counter: {counter.value}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the counter with an interactive prompt on standard input."""
    parser = argparse.ArgumentParser(description="Count seconds in the background.")
    parser.add_argument("--interval", type=float, default=1.0,
                        help="seconds between ticks (default: 1)")
    args = parser.parse_args(argv)
    with TickCounter(args.interval) as counter:
        run_prompt(counter, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())