"""EntityMapper / ManualMapper: レコードからエンティティへの変換."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import fields, is_dataclass
from typing import Any

from topup.exceptions import MappingError


def _key_candidates(field_name: str) -> tuple[str, ...]:
    # 比較は小文字で行う: first_name → ("firstname", "first_name")
    head, *rest = field_name.split("_")
    camel = (head + "".join(rest)).lower()
    return (camel, field_name.lower()) if rest else (camel,)


class EntityMapper:
    """User / Company のレコードを dataclass エンティティに変換する.

    ``first_name`` フィールドには ``firstName`` と ``first_name`` のどちらの
    キーも使え、大文字小文字は区別しない。``init=False`` のフィールド
    （Company の所属ユーザーなど）はレコードから受け取らない。

    レコードに無いキーはコンストラクタに渡さないため、欠損は
    エンティティ自身の検証メッセージ（``Tokens can't be nil`` など）になる。
    """

    def __init__(self, entity_cls: type) -> None:
        if not is_dataclass(entity_cls):
            msg = f"{entity_cls} is not a dataclass"
            raise TypeError(msg)
        self.entity_cls = entity_cls
        self._keys = {f.name: _key_candidates(f.name) for f in fields(entity_cls) if f.init}

    def map_row(self, row: dict[str, Any]) -> Any:
        """1レコードをエンティティに変換.

        Raises:
            MappingError: レコードがオブジェクト（マッピング）でない場合
            ValidationError: エンティティの検証に失敗した場合

        """
        if not isinstance(row, Mapping):
            msg = f"{self.entity_cls.__name__} record must be an object, got {type(row).__name__}"
            raise MappingError(msg)
        folded = {str(key).lower(): value for key, value in row.items()}
        kwargs: dict[str, Any] = {}
        for field_name, candidates in self._keys.items():
            for key in candidates:
                if key in folded:
                    kwargs[field_name] = folded[key]
                    break
        return self.entity_cls(**kwargs)

    def map_rows(self, rows: list[dict[str, Any]]) -> list[Any]:
        """入力順に変換し、最初に失敗したレコードの例外を送出する."""
        return [self.map_row(row) for row in rows]


class ManualMapper:
    """関数をそのまま RecordMapper として使うためのラッパー."""

    def __init__(self, func: Callable[[dict[str, Any]], Any]) -> None:
        self._func = func

    def map_row(self, row: dict[str, Any]) -> Any:
        return self._func(row)

    def map_rows(self, rows: list[dict[str, Any]]) -> list[Any]:
        return [self._func(row) for row in rows]
