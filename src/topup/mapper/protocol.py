"""RecordMapper プロトコル定義."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RecordMapper(Protocol[T]):
    """users.json / companies.json の1レコードをエンティティに変換するもの.

    ``process_batch`` の ``user_mapper`` / ``company_mapper`` に渡せる。
    """

    def map_row(self, row: dict[str, Any]) -> T: ...

    def map_rows(self, rows: list[dict[str, Any]]) -> list[T]: ...
