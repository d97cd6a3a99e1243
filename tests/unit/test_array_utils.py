"""
Tests for the array utilities functional core.

Covers:
- Stable deduplication
- Order-preserving set difference
- Fixed-size chunking and size validation
- Chunked filter/map/reduce
"""

from __future__ import annotations

from typing import Any

import pytest

from src.components.array_utils import (
    DEFAULT_CONFIG,
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

SAMPLES: list[list[Any]] = [
    [],
    [1],
    [1, 2, 2, 3, 3, 4, 5],
    [5, 4, 5, 4, 3],
    ["apple", "banana", "apple", "orange", "banana"],
    [[1], [2], [1], {"a": 1}, {"a": 1}],
    list(range(17)),
]

# --- Deduplicate ---


class TestDeduplicate:
    """Test stable deduplication."""

    def test_example(self) -> None:
        assert deduplicate([1, 2, 2, 3, 3, 4, 5]) == [1, 2, 3, 4, 5]

    def test_empty(self) -> None:
        assert deduplicate([]) == []

    def test_keeps_first_occurrence_order(self) -> None:
        assert deduplicate([3, 1, 3, 2, 1]) == [3, 1, 2]

    def test_strings(self) -> None:
        assert deduplicate(["b", "a", "b"]) == ["b", "a"]

    def test_unhashable_elements(self) -> None:
        """Lists and dicts compare by value."""
        assert deduplicate([[1, 2], [1, 2], {"a": 1}, {"a": 1}, [3]]) == [
            [1, 2],
            {"a": 1},
            [3],
        ]

    def test_tuple_containing_list(self) -> None:
        assert deduplicate([(1, [2]), (1, [2]), (1, [3])]) == [(1, [2]), (1, [3])]

    def test_value_not_identity(self) -> None:
        a = [1]
        b = [1]
        assert a is not b
        assert deduplicate([a, b]) == [[1]]

    def test_numeric_equality_merges_bool_and_float(self) -> None:
        """1, True and 1.0 compare equal, so only the first is kept."""
        assert deduplicate([1, True, 1.0, 0, False]) == [1, 0]
        assert set_difference([True, 2], [1]) == [2]

    def test_input_not_mutated(self) -> None:
        items = [1, 1, 2]
        deduplicate(items)
        assert items == [1, 1, 2]

    def test_returns_new_list(self) -> None:
        items = [1, 2, 3]
        result = deduplicate(items)
        assert result == items
        assert result is not items

    def test_accepts_generator(self) -> None:
        assert deduplicate(x % 3 for x in range(7)) == [0, 1, 2]

    @pytest.mark.parametrize("items", SAMPLES)
    def test_no_repeats(self, items: list[Any]) -> None:
        result = deduplicate(items)
        for i, value in enumerate(result):
            assert value not in result[i + 1 :]

    @pytest.mark.parametrize("items", SAMPLES)
    def test_first_occurrence_order(self, items: list[Any]) -> None:
        result = deduplicate(items)
        positions = [items.index(value) for value in result]
        assert positions == sorted(positions)
        assert all(value in result for value in items)

    @pytest.mark.parametrize("items", SAMPLES)
    def test_idempotent(self, items: list[Any]) -> None:
        once = deduplicate(items)
        assert deduplicate(once) == once


# --- Set Difference ---


class TestSetDifference:
    """Test order-preserving set difference."""

    def test_example(self) -> None:
        assert set_difference([1, 2, 3, 4], [3, 4, 5, 6]) == [1, 2]

    def test_keeps_duplicates_from_items(self) -> None:
        assert set_difference([1, 1, 2, 3, 1], [3]) == [1, 1, 2, 1]

    def test_empty_items(self) -> None:
        assert set_difference([], [1, 2]) == []

    def test_empty_exclude(self) -> None:
        assert set_difference([2, 1, 2], []) == [2, 1, 2]

    def test_everything_excluded(self) -> None:
        assert set_difference([1, 2], [2, 1]) == []

    def test_unhashable_elements(self) -> None:
        assert set_difference([[1], [2], [1]], [[1]]) == [[2]]

    def test_mixed_hashable_and_unhashable_exclude(self) -> None:
        assert set_difference([1, [2], "x", (3,)], [[2], (3,)]) == [1, "x"]

    def test_inputs_not_mutated(self) -> None:
        items = [1, 2, 3]
        exclude = [2]
        set_difference(items, exclude)
        assert items == [1, 2, 3]
        assert exclude == [2]

    @pytest.mark.parametrize("items", SAMPLES)
    @pytest.mark.parametrize("exclude", [[], [1], [2, 3, "apple"], [[1]]])
    def test_sub_multiset_in_order(self, items: list[Any], exclude: list[Any]) -> None:
        result = set_difference(items, exclude)
        assert all(value not in exclude for value in result)
        # Result is a subsequence of items
        it = iter(items)
        assert all(any(value == other for other in it) for value in result)
        assert len(result) == sum(1 for value in items if value not in exclude)


# --- Chunk ---


class TestChunk:
    """Test fixed-size chunking."""

    def test_even_split(self) -> None:
        assert chunk([1, 2, 3, 4, 5, 6, 7, 8, 9], 3) == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]

    def test_short_last_chunk(self) -> None:
        assert chunk([1, 2, 3, 4, 5], 3) == [[1, 2, 3], [4, 5]]

    def test_empty(self) -> None:
        assert chunk([], 3) == []

    def test_size_larger_than_input(self) -> None:
        assert chunk([1, 2], 10) == [[1, 2]]

    def test_size_one(self) -> None:
        assert chunk(["a", "b"], 1) == [["a"], ["b"]]

    def test_tuple_input_gives_lists(self) -> None:
        assert chunk((1, 2, 3), 2) == [[1, 2], [3]]

    def test_input_not_mutated(self) -> None:
        items = [1, 2, 3]
        chunk(items, 2)
        assert items == [1, 2, 3]

    @pytest.mark.parametrize("items", SAMPLES)
    @pytest.mark.parametrize("size", [1, 2, 3, 5, 100])
    def test_concatenation_restores_input(self, items: list[Any], size: int) -> None:
        chunks = chunk(items, size)
        assert [value for part in chunks for value in part] == items

    @pytest.mark.parametrize("items", SAMPLES)
    @pytest.mark.parametrize("size", [1, 2, 3, 5, 100])
    def test_chunk_lengths(self, items: list[Any], size: int) -> None:
        chunks = chunk(items, size)
        assert len(chunks) == -(-len(items) // size)
        assert all(len(part) == size for part in chunks[:-1])
        if chunks:
            assert 1 <= len(chunks[-1]) <= size

    @pytest.mark.parametrize("size", [0, -1, -10, 1.5, 3.0, "3", None, True, False])
    def test_invalid_size(self, size: Any) -> None:
        with pytest.raises(ChunkSizeError) as exc_info:
            chunk([1, 2, 3], size)
        assert exc_info.value.size is size
        assert exc_info.value.field_name == "size"

    def test_invalid_size_on_empty_input(self) -> None:
        """Size is validated even when there is nothing to chunk."""
        with pytest.raises(ChunkSizeError):
            chunk([], 0)

    def test_chunk_size_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="must be a positive integer"):
            chunk([1], 0)


class TestIterChunks:
    """Test the lazy chunk generator."""

    def test_yields_chunks(self) -> None:
        assert list(iter_chunks([1, 2, 3, 4, 5], 2)) == [[1, 2], [3, 4], [5]]

    def test_validates_eagerly(self) -> None:
        with pytest.raises(ChunkSizeError):
            iter_chunks([1, 2], 0)


class TestValidateChunkSize:
    """Test chunk size validation."""

    def test_returns_valid_size(self) -> None:
        assert validate_chunk_size(4) == 4

    def test_field_name_in_error(self) -> None:
        with pytest.raises(ChunkSizeError, match="chunk_size"):
            validate_chunk_size(0, "chunk_size")


# --- Chunked Processing ---


class TestChunkedProcessing:
    """Test chunked filter/map/reduce."""

    def test_process_in_chunks_sees_each_chunk(self) -> None:
        seen: list[list[int]] = []

        def processor(part: list[int]) -> list[int]:
            seen.append(part)
            return part

        assert process_in_chunks([1, 2, 3, 4, 5], processor, chunk_size=2) == [1, 2, 3, 4, 5]
        assert seen == [[1, 2], [3, 4], [5]]

    def test_default_chunk_size(self) -> None:
        calls: list[int] = []
        process_in_chunks(list(range(250)), lambda part: calls.append(len(part)) or [])
        assert calls == [DEFAULT_CONFIG.batch_size, DEFAULT_CONFIG.batch_size, 50]

    def test_filter_matches_builtin(self) -> None:
        items = list(range(1, 21))
        assert chunked_filter(items, lambda n: n % 2 == 0, 3) == [n for n in items if n % 2 == 0]

    def test_map_matches_builtin(self) -> None:
        items = list(range(10))
        assert chunked_map(items, lambda n: n * 2, 4) == [n * 2 for n in items]

    def test_reduce_across_chunks(self) -> None:
        assert chunked_reduce(list(range(1, 101)), lambda acc, n: acc + n, 0, 7) == 5050

    def test_reduce_order(self) -> None:
        """Fold is left to right across chunk boundaries."""
        assert chunked_reduce(["a", "b", "c", "d"], lambda acc, s: acc + s, "", 3) == "abcd"

    def test_reduce_empty_returns_initial(self) -> None:
        assert chunked_reduce([], lambda acc, n: acc + n, 42, 3) == 42

    def test_invalid_chunk_size(self) -> None:
        with pytest.raises(ChunkSizeError, match="chunk_size"):
            chunked_map([1], lambda n: n, 0)
        with pytest.raises(ChunkSizeError):
            chunked_reduce([1], lambda acc, n: acc, 0, -1)

    def test_callable_errors_propagate(self) -> None:
        def boom(n: int) -> int:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            chunked_map([1, 2], boom, 1)
