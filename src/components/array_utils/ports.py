"""
Array utilities component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for array utilities rules configuration."""

    def get_default_chunk_size(self) -> int:
        """Get chunk size used when a chunk request gives none."""
        ...

    def get_batch_size(self) -> int:
        """Get chunk size used by chunked filter/map/reduce."""
        ...
