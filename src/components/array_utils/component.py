"""
Array utilities component - Deduplicate, set difference, chunking.

Entry points wrap the functional core in _impl and report an invalid
chunk size as a validation error instead of raising.

Invariants:
- I1: Inputs are never mutated
- I2: A rejected chunk size yields success=False and no partial result
- I3: Errors raised by caller-supplied callables propagate unchanged
"""

from __future__ import annotations

import logging

from ._impl import (
    DEFAULT_CONFIG,
    ChunkSizeError,
    chunk,
    chunked_filter,
    chunked_map,
    chunked_reduce,
    deduplicate,
    set_difference,
)
from .models import (
    ArrayUtilsValidationError,
    ChunkedFilterInput,
    ChunkedMapInput,
    ChunkedProcessOutput,
    ChunkedReduceInput,
    ChunkedReduceOutput,
    ChunkInput,
    ChunkOutput,
    DeduplicateInput,
    DeduplicateOutput,
    SetDifferenceInput,
    SetDifferenceOutput,
)
from .ports import RulesPort

logger = logging.getLogger(__name__)


def _default_chunk_size(rules: RulesPort | None) -> int:
    if rules is None:
        return DEFAULT_CONFIG.default_chunk_size
    return rules.get_default_chunk_size()


def _batch_size(rules: RulesPort | None) -> int:
    if rules is None:
        return DEFAULT_CONFIG.batch_size
    return rules.get_batch_size()


def _size_error(exc: ChunkSizeError) -> ArrayUtilsValidationError:
    logger.warning("Rejected chunk size %r for %s", exc.size, exc.field_name)
    return ArrayUtilsValidationError(
        code="invalid_chunk_size",
        message=str(exc),
        field=exc.field_name,
    )


# --- Component Entry Points ---


def run_deduplicate(
    inp: DeduplicateInput,
    *,
    rules: RulesPort | None = None,
) -> DeduplicateOutput:
    """
    Remove repeated elements, keeping first occurrences in order.

    Args:
        inp: Input containing the items.
        rules: Optional rules port (not consulted).

    Returns:
        DeduplicateOutput with the distinct items.
    """
    items = deduplicate(inp.items)
    logger.debug("Deduplicated %d items to %d", len(inp.items), len(items))
    return DeduplicateOutput(items=items)


def run_set_difference(
    inp: SetDifferenceInput,
    *,
    rules: RulesPort | None = None,
) -> SetDifferenceOutput:
    """
    Keep the items that do not appear in inp.exclude.

    Order and multiplicity of inp.items are preserved.
    """
    items = set_difference(inp.items, inp.exclude)
    logger.debug(
        "Set difference kept %d of %d items (%d excluded values)",
        len(items),
        len(inp.items),
        len(inp.exclude),
    )
    return SetDifferenceOutput(items=items)


def run_chunk(
    inp: ChunkInput,
    *,
    rules: RulesPort | None = None,
) -> ChunkOutput:
    """
    Split items into consecutive chunks.

    Args:
        inp: Input containing items and an optional size.
        rules: Optional rules port supplying the default size.

    Returns:
        ChunkOutput with the chunks, or errors if the size is invalid.
    """
    size = inp.size if inp.size is not None else _default_chunk_size(rules)

    try:
        chunks = chunk(inp.items, size)
    except ChunkSizeError as e:
        return ChunkOutput(chunks=[], errors=[_size_error(e)], success=False)

    logger.debug("Chunked %d items into %d chunks of size %d", len(inp.items), len(chunks), size)
    return ChunkOutput(chunks=chunks)


def run_chunked_filter(
    inp: ChunkedFilterInput,
    *,
    rules: RulesPort | None = None,
) -> ChunkedProcessOutput:
    """Filter items chunk by chunk."""
    chunk_size = inp.chunk_size if inp.chunk_size is not None else _batch_size(rules)

    try:
        items = chunked_filter(inp.items, inp.predicate, chunk_size)
    except ChunkSizeError as e:
        return ChunkedProcessOutput(items=[], errors=[_size_error(e)], success=False)

    return ChunkedProcessOutput(items=items)


def run_chunked_map(
    inp: ChunkedMapInput,
    *,
    rules: RulesPort | None = None,
) -> ChunkedProcessOutput:
    """Map items chunk by chunk."""
    chunk_size = inp.chunk_size if inp.chunk_size is not None else _batch_size(rules)

    try:
        items = chunked_map(inp.items, inp.transform, chunk_size)
    except ChunkSizeError as e:
        return ChunkedProcessOutput(items=[], errors=[_size_error(e)], success=False)

    return ChunkedProcessOutput(items=items)


def run_chunked_reduce(
    inp: ChunkedReduceInput,
    *,
    rules: RulesPort | None = None,
) -> ChunkedReduceOutput:
    """
    Fold items chunk by chunk.

    On an invalid chunk size the output value is None.
    """
    chunk_size = inp.chunk_size if inp.chunk_size is not None else _batch_size(rules)

    try:
        value = chunked_reduce(inp.items, inp.reducer, inp.initial, chunk_size)
    except ChunkSizeError as e:
        return ChunkedReduceOutput(value=None, errors=[_size_error(e)], success=False)

    return ChunkedReduceOutput(value=value)


def run(
    inp: (
        DeduplicateInput
        | SetDifferenceInput
        | ChunkInput
        | ChunkedFilterInput
        | ChunkedMapInput
        | ChunkedReduceInput
    ),
    *,
    rules: RulesPort | None = None,
) -> (
    DeduplicateOutput
    | SetDifferenceOutput
    | ChunkOutput
    | ChunkedProcessOutput
    | ChunkedReduceOutput
):
    """
    Main entry point for the array utilities component.

    Dispatches to appropriate handler based on input type.

    Args:
        inp: Input object determining the operation.
        rules: Optional rules port for configuration.

    Returns:
        Appropriate output object based on input type.
    """
    if isinstance(inp, DeduplicateInput):
        return run_deduplicate(inp, rules=rules)
    elif isinstance(inp, SetDifferenceInput):
        return run_set_difference(inp, rules=rules)
    elif isinstance(inp, ChunkInput):
        return run_chunk(inp, rules=rules)
    elif isinstance(inp, ChunkedFilterInput):
        return run_chunked_filter(inp, rules=rules)
    elif isinstance(inp, ChunkedMapInput):
        return run_chunked_map(inp, rules=rules)
    elif isinstance(inp, ChunkedReduceInput):
        return run_chunked_reduce(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
