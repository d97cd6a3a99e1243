"""
Array utilities component - Pure list helpers.

Invariants:
- I1: Operations are pure; inputs are never mutated
- I2: Comparison is value equality
- I3: Chunk sizes must be positive integers
"""

from ._impl import (
    DEFAULT_CONFIG,
    ArrayUtilsConfig,
    ChunkSizeError,
    chunk,
    chunked_filter,
    chunked_map,
    chunked_reduce,
    deduplicate,
    iter_chunks,
    process_in_chunks,
    set_difference,
    validate_chunk_size,
)
from .component import (
    run,
    run_chunk,
    run_chunked_filter,
    run_chunked_map,
    run_chunked_reduce,
    run_deduplicate,
    run_set_difference,
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

__all__ = [
    # Entry points
    "run",
    "run_chunk",
    "run_chunked_filter",
    "run_chunked_map",
    "run_chunked_reduce",
    "run_deduplicate",
    "run_set_difference",
    # Input models
    "ChunkInput",
    "ChunkedFilterInput",
    "ChunkedMapInput",
    "ChunkedReduceInput",
    "DeduplicateInput",
    "SetDifferenceInput",
    # Output models
    "ArrayUtilsValidationError",
    "ChunkOutput",
    "ChunkedProcessOutput",
    "ChunkedReduceOutput",
    "DeduplicateOutput",
    "SetDifferenceOutput",
    # Ports
    "RulesPort",
    # _impl re-exports
    "ArrayUtilsConfig",
    "ChunkSizeError",
    "DEFAULT_CONFIG",
    "chunk",
    "chunked_filter",
    "chunked_map",
    "chunked_reduce",
    "deduplicate",
    "iter_chunks",
    "process_in_chunks",
    "set_difference",
    "validate_chunk_size",
]
