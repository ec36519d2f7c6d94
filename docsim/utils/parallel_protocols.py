"""Protocol definitions for parallel execution interfaces.

Batch comparison accepts any executor that satisfies this contract,
e.g. ``concurrent.futures.ThreadPoolExecutor``.
"""

from collections.abc import Iterable
from typing import Callable, Protocol, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class ExecutorLike(Protocol):
    """Protocol for executors that support an order-preserving map."""

    def map(
        self,
        fn: Callable[[T], R],
        *iterables: Iterable[T],
        chunksize: int = 1,
    ) -> Iterable[R]:
        """Apply ``fn`` to every item, yielding results in input order."""
        ...
