"""Retry a fallible action a fixed number of times."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")


def retry(
    attempts: int,
    action: Callable[[int], T],
    on_failure: Callable[[int], object],
) -> T | None:
    """Call ``action(i)`` until it succeeds, at most ``attempts`` times.

    ``on_failure(i)`` runs after each failed attempt except the last one.
    The exception of the last attempt is re-raised. Returns the value of
    the first successful call, or None when no attempt was made.
    """
    for attempt in range(attempts):
        try:
            return action(attempt)
        except Exception:
            if attempt + 1 >= attempts:
                raise
            on_failure(attempt)
    return None