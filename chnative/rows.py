"""Iteration over the row blocks a query returns."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

Block = Sequence[Sequence[Any]]


def _num_rows(block: Block | None) -> int:
    if not block:
        return 0
    return len(block[0])


class Rows:
    """Rows of a query result, read block by block.

    A block is a sequence of columns, each a sequence of values. Empty
    blocks are skipped. The totals and extremes blocks, when present, are
    offered as further result sets. Errors raised while producing blocks
    propagate to the reader.
    """

    def __init__(
        self,
        columns: Sequence[str],
        blocks: Iterable[Block],
        totals: Block | None = None,
        extremes: Block | None = None,
    ) -> None:
        self.columns: list[str] = list(columns)
        self._blocks: Iterator[Block] = iter(blocks)
        self._block: Block | None = None
        self._offset = 0
        self._totals = totals if _num_rows(totals) else None
        self._extremes = extremes if _num_rows(extremes) else None
        self._closed = False

    def __iter__(self) -> "Rows":
        return self

    def __next__(self) -> tuple[Any, ...]:
        if self._closed:
            raise StopIteration
        while self._block is None or _num_rows(self._block) <= self._offset:
            self._block = next(self._blocks)
            self._offset = 0
        row = tuple(column[self._offset] for column in self._block)
        self._offset += 1
        return row

    def has_next_result_set(self) -> bool:
        return self._totals is not None or self._extremes is not None

    def next_result_set(self) -> bool:
        """Switch to the totals, then the extremes block; False when none is left."""
        if self._totals is not None:
            self._block, self._totals = self._totals, None
        elif self._extremes is not None:
            self._block, self._extremes = self._extremes, None
        else:
            return False
        self._offset = 0
        return True

    def close(self) -> None:
        """Drain the remaining blocks and stop iteration."""
        if self._closed:
            return
        self.columns = []
        for _ in self._blocks:
            pass
        self._closed = True

    def __enter__(self) -> "Rows":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()