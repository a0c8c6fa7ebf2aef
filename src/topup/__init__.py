"""topup: company token top-up report generator."""

from topup.config import ReportSettings
from topup.exceptions import MappingError, RecordFileNotFoundError, TopupError, ValidationError
from topup.loader import RecordLoader
from topup.mapper import EntityMapper, ManualMapper, RecordMapper, create_mapper
from topup.models import Company, TokenCredit, User
from topup.pipeline import associate, build_companies, build_users, process_batch, render_report
from topup.runner import ReportRunner
from topup.writer import ReportWriter

__all__ = [
    "Company",
    "EntityMapper",
    "ManualMapper",
    "MappingError",
    "RecordFileNotFoundError",
    "RecordLoader",
    "RecordMapper",
    "ReportRunner",
    "ReportSettings",
    "ReportWriter",
    "TokenCredit",
    "TopupError",
    "User",
    "ValidationError",
    "associate",
    "build_companies",
    "build_users",
    "create_mapper",
    "process_batch",
    "render_report",
]
