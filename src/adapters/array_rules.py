"""
Rules adapter for the array utilities component.
"""

from __future__ import annotations

from src.rules.models import Rules


class ArrayUtilsRulesAdapter:
    """Adapter to map generic Rules to array_utils component RulesPort."""

    def __init__(self, rules: Rules):
        self._rules = rules.array_utils

    def get_default_chunk_size(self) -> int:
        return self._rules.default_chunk_size

    def get_batch_size(self) -> int:
        return self._rules.batch_size
