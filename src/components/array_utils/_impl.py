"""
Array utilities functional core.

Pure list helpers: stable deduplication, order-preserving set difference,
fixed-size chunking and chunked filter/map/reduce.

Invariants:
- I1: Inputs are never mutated; every call returns a new list
- I2: Element comparison is value equality (==), never identity
- I3: Elements need not be hashable
- I4: chunk size must be an int >= 1 (bool rejected)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")

# --- Configuration ---


@dataclass(frozen=True)
class ArrayUtilsConfig:
    """Array utilities configuration."""

    default_chunk_size: int = 3
    batch_size: int = 100


DEFAULT_CONFIG = ArrayUtilsConfig()


# --- Errors ---


class ChunkSizeError(ValueError):
    """Raised when a chunk size is not a positive integer."""

    def __init__(self, size: Any, field_name: str = "size") -> None:
        self.size = size
        self.field_name = field_name
        super().__init__(f"{field_name} must be a positive integer, got {size!r}")


def validate_chunk_size(size: Any, field_name: str = "size") -> int:
    """
    Check a chunk size and return it.

    Raises:
        ChunkSizeError: If size is not an int, is a bool, or is below 1.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise ChunkSizeError(size, field_name)
    return size


# --- Membership ---


class _SeenTracker:
    """Equality-based membership for hashable and unhashable values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._hashed: set[Any] = set()
        self._unhashed: list[Any] = []
        for value in values:
            self.add(value)

    def add(self, value: Any) -> None:
        if _is_hashable(value):
            self._hashed.add(value)
        else:
            self._unhashed.append(value)

    def __contains__(self, value: Any) -> bool:
        if _is_hashable(value):
            if value in self._hashed:
                return True
            return any(value == other for other in self._unhashed)
        return any(value == other for other in self._unhashed) or any(
            value == other for other in self._hashed
        )


def _is_hashable(value: Any) -> bool:
    # isinstance(x, Hashable) is not enough: (1, [2]) passes it
    try:
        hash(value)
    except TypeError:
        return False
    return True


# --- Operations ---


def deduplicate(items: Iterable[T]) -> list[T]:
    """
    Remove repeated elements, keeping the first occurrence of each.

    Order of first occurrences is preserved.
    """
    seen = _SeenTracker()
    result: list[T] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def set_difference(items: Iterable[T], exclude: Iterable[T]) -> list[T]:
    """
    Elements of items that do not appear in exclude.

    Keeps the order and multiplicity of items; does not deduplicate.
    """
    excluded = _SeenTracker(exclude)
    return [item for item in items if item not in excluded]


def iter_chunks(items: Sequence[T], size: int) -> Iterator[list[T]]:
    """
    Lazily yield consecutive chunks of at most size elements.

    The size is validated when this is called, not on first iteration.
    """
    validate_chunk_size(size)
    return _generate_chunks(items, size)


def _generate_chunks(items: Sequence[T], size: int) -> Iterator[list[T]]:
    for start in range(0, len(items), size):
        yield list(items[start : start + size])


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """
    Split items into consecutive chunks of at most size elements.

    The last chunk may be shorter. Empty input gives no chunks.

    Raises:
        ChunkSizeError: If size is not a positive integer.
    """
    return list(iter_chunks(items, size))


# --- Chunked processing ---


def process_in_chunks(
    items: Sequence[T],
    processor: Callable[[list[T]], Iterable[R]],
    chunk_size: int = DEFAULT_CONFIG.batch_size,
) -> list[R]:
    """Apply processor to each chunk in order and concatenate the results."""
    validate_chunk_size(chunk_size, "chunk_size")
    results: list[R] = []
    for part in _generate_chunks(items, chunk_size):
        results.extend(processor(part))
    return results


def chunked_filter(
    items: Sequence[T],
    predicate: Callable[[T], bool],
    chunk_size: int = DEFAULT_CONFIG.batch_size,
) -> list[T]:
    """Filter items chunk by chunk."""
    return process_in_chunks(
        items,
        lambda part: [item for item in part if predicate(item)],
        chunk_size,
    )


def chunked_map(
    items: Sequence[T],
    transform: Callable[[T], R],
    chunk_size: int = DEFAULT_CONFIG.batch_size,
) -> list[R]:
    """Map items chunk by chunk."""
    return process_in_chunks(
        items,
        lambda part: [transform(item) for item in part],
        chunk_size,
    )


def chunked_reduce(
    items: Sequence[T],
    reducer: Callable[[A, T], A],
    initial: A,
    chunk_size: int = DEFAULT_CONFIG.batch_size,
) -> A:
    """Left fold over items, carrying the accumulator across chunks."""
    validate_chunk_size(chunk_size, "chunk_size")
    accumulator = initial
    for part in _generate_chunks(items, chunk_size):
        for item in part:
            accumulator = reducer(accumulator, item)
    return accumulator
