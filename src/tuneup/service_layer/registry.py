"""Ordered queue of registered test cases."""

from collections.abc import Iterator

from tuneup.domain.test_case import TestCase


class Registry:
    """Append-only queue of test cases, drained once in insertion order.

    Registration never executes anything. `drain` hands the queued cases out
    first in, first out and leaves the registry empty.
    """

    def __init__(self) -> None:
        self._queue: list[TestCase] = []

    def __len__(self) -> int:
        return len(self._queue)

    def add(self, test_case: TestCase) -> None:
        """Append *test_case* to the end of the queue."""
        self._queue.append(test_case)

    def drain(self) -> Iterator[TestCase]:
        """Yield queued test cases in registration order, emptying the queue.

        The queue is detached before the first item is yielded, so cases
        registered while draining wait for the next drain.
        """
        queue, self._queue = self._queue, []
        yield from queue
