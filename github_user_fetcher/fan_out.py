"""Concurrent fan-out/fan-in over a set of keys."""

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TypeVar

from .models import FetchResult

K = TypeVar("K")
T = TypeVar("T")


def fan_out(
    keys: Iterable[K],
    fetch: Callable[[K], T],
    max_workers: int | None = None,
) -> list[FetchResult[K, T]]:
    """Run ``fetch`` once per distinct key and collect every outcome.

    With ``max_workers=None`` every key gets its own worker thread; a positive
    value bounds the pool. Task exceptions are captured in the returned
    FetchResult instead of propagating. Results arrive in completion order,
    and the pool has been joined before the list is returned.
    """
    unique = list(dict.fromkeys(keys))
    if not unique:
        return []
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be positive, got {max_workers}")

    def run_one(key: K) -> FetchResult[K, T]:
        try:
            return FetchResult(key=key, value=fetch(key))
        except Exception as e:
            return FetchResult(key=key, error=e)

    results: list[FetchResult[K, T]] = []
    with ThreadPoolExecutor(max_workers=max_workers or len(unique)) as executor:
        futures = [executor.submit(run_one, key) for key in unique]
        for future in as_completed(futures):
            results.append(future.result())
    return results


def successes(results: Iterable[FetchResult[K, T]]) -> list[T]:
    """Values of the tasks that succeeded, in collection order."""
    return [r.value for r in results if r.ok]


def failures(results: Iterable[FetchResult[K, T]]) -> list[FetchResult[K, T]]:
    """Results of the tasks that failed."""
    return [r for r in results if not r.ok]
