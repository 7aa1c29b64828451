"""Number sequences."""

from __future__ import annotations

from collections.abc import Iterator


def _fibonacci_terms() -> Iterator[int]:
    previous, current = 0, 1
    while True:
        yield current
        previous, current = current, previous + current


def fibonacci(limit: int) -> list[int]:
    """Return the first ``limit`` Fibonacci numbers, starting 1, 1, 2, ...

    A limit of zero or less gives an empty list.
    """
    if limit <= 0:
        return []
    terms = _fibonacci_terms()
    return [next(terms) for _ in range(limit)]