"""Print student names from several threads, with and without a lock.

Illustration only: the unguarded variant may interleave its output, the
guarded one writes each line atomically.
"""

import sys
import threading
from typing import Callable, List, Optional, TextIO

from school.core.exceptions import InsufficientStudentsError, ThreadExecutionError
from school.core.logging import logger

COUNT_NAMES = 6


class NamePrinter:
    """Writes six names: two from the calling thread, two from each of two workers."""

    def __init__(self, sink: Optional[TextIO] = None):
        self.sink = sink if sink is not None else sys.stdout
        self._lock = threading.Lock()

    def _write(self, thread_name: str, name: str) -> None:
        self.sink.write(f"{thread_name}: {name}\n")

    def _write_synchronized(self, thread_name: str, name: str) -> None:
        with self._lock:
            self._write(thread_name, name)

    @staticmethod
    def _check_enough(names: List[str]) -> None:
        if len(names) < COUNT_NAMES:
            logger.warning(
                f"Not enough student names for printing. Required: {COUNT_NAMES}, found: {len(names)}"
            )
            raise InsufficientStudentsError(COUNT_NAMES, len(names))

    def _run(self, names: List[str], write: Callable[[str, str], None], operation: str) -> None:
        self._check_enough(names)

        write("Main Thread", names[0])
        write("Main Thread", names[1])

        def worker(thread_name: str, first: str, second: str) -> None:
            logger.debug(f"{thread_name} started")
            write(thread_name, first)
            write(thread_name, second)

        threads = [
            threading.Thread(target=worker, args=("Parallel Thread 1", names[2], names[3])),
            threading.Thread(target=worker, args=("Parallel Thread 2", names[4], names[5])),
        ]
        for thread in threads:
            thread.start()

        try:
            for thread in threads:
                thread.join()
        except RuntimeError as e:
            logger.error(f"Thread execution failed during {operation}: {e}")
            raise ThreadExecutionError.during(operation) from e

        logger.debug(f"Parallel Threads 1 and 2 completed {operation}")

    def print_parallel(self, names: List[str]) -> None:
        logger.info(f"Starting parallel printing of {COUNT_NAMES} student names")
        self._run(names, self._write, "parallel printing")

    def print_synchronized(self, names: List[str]) -> None:
        logger.info(f"Starting synchronized printing of {COUNT_NAMES} student names")
        self._run(names, self._write_synchronized, "synchronized printing")
