"""Result of a statement execution."""

from __future__ import annotations


class NotSupportedError(Exception):
    """Raised for operations the server protocol does not support."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} is not supported")
        self.operation = operation


class Result:
    """Execution result; the native protocol reports neither ids nor counts."""

    def last_insert_id(self) -> int:
        return self._unsupported("LastInsertId")

    def rows_affected(self) -> int:
        return self._unsupported("RowsAffected")

    @staticmethod
    def _unsupported(operation: str) -> int:
        raise NotSupportedError(operation)