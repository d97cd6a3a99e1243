"""
Array utilities component input/output models.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

# --- Validation Error ---


@dataclass(frozen=True)
class ArrayUtilsValidationError:
    """Array utilities validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class DeduplicateInput:
    """Input for stable deduplication."""

    items: Sequence[Any]


@dataclass(frozen=True)
class SetDifferenceInput:
    """Input for removing every element of exclude from items."""

    items: Sequence[Any]
    exclude: Sequence[Any]


@dataclass(frozen=True)
class ChunkInput:
    """Input for fixed-size chunking. size=None uses the configured default."""

    items: Sequence[Any]
    size: int | None = None


@dataclass(frozen=True)
class ChunkedFilterInput:
    """Input for filtering items chunk by chunk."""

    items: Sequence[Any]
    predicate: Callable[[Any], bool]
    chunk_size: int | None = None


@dataclass(frozen=True)
class ChunkedMapInput:
    """Input for mapping items chunk by chunk."""

    items: Sequence[Any]
    transform: Callable[[Any], Any]
    chunk_size: int | None = None


@dataclass(frozen=True)
class ChunkedReduceInput:
    """Input for folding items chunk by chunk."""

    items: Sequence[Any]
    reducer: Callable[[Any, Any], Any]
    initial: Any
    chunk_size: int | None = None


# --- Output Models ---


@dataclass(frozen=True)
class DeduplicateOutput:
    """Output of deduplication."""

    items: list[Any]
    errors: list[ArrayUtilsValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class SetDifferenceOutput:
    """Output of set difference."""

    items: list[Any]
    errors: list[ArrayUtilsValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ChunkOutput:
    """Output of chunking."""

    chunks: list[list[Any]]
    errors: list[ArrayUtilsValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ChunkedProcessOutput:
    """Output of chunked filter or map."""

    items: list[Any]
    errors: list[ArrayUtilsValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ChunkedReduceOutput:
    """Output of chunked reduce."""

    value: Any
    errors: list[ArrayUtilsValidationError] = field(default_factory=list)
    success: bool = True
