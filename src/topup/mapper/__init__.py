"""topup マッパーパッケージ."""

from topup.mapper.factory import create_mapper
from topup.mapper.protocol import RecordMapper
from topup.mapper.record import EntityMapper, ManualMapper

__all__ = ["EntityMapper", "ManualMapper", "RecordMapper", "create_mapper"]
