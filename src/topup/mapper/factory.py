"""create_mapper ファクトリ関数."""

from __future__ import annotations

from typing import Any

from topup.mapper.protocol import RecordMapper
from topup.mapper.record import EntityMapper, ManualMapper


def create_mapper(entity_cls: type, *, mapper: Any = None) -> RecordMapper[Any]:
    """``process_batch`` が使うマッパーを決める.

    Args:
        entity_cls: 変換先のエンティティ（User または Company）
        mapper: RecordMapper インスタンス、Callable、または None

    Returns:
        ``mapper`` が RecordMapper ならそのまま、Callable なら ManualMapper、
        None なら ``entity_cls`` の EntityMapper

    Raises:
        TypeError: ``mapper`` が RecordMapper でも Callable でもない場合

    """
    if mapper is None:
        return EntityMapper(entity_cls)
    if isinstance(mapper, RecordMapper):
        return mapper
    if callable(mapper):
        return ManualMapper(mapper)
    msg = f"mapper must be a RecordMapper or a callable, got {type(mapper).__name__}"
    raise TypeError(msg)
