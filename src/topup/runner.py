"""ReportRunner: 高レベル API."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from topup.config import ReportSettings
from topup.exceptions import MappingError
from topup.loader import RecordLoader
from topup.pipeline import process_batch
from topup.writer import ReportWriter

logger = logging.getLogger("topup.runner")


class ReportRunner:
    """topup の高レベル API.

    レコードファイルの読み込み、検証、紐付け、レポート出力を統合する。

    Examples:
        >>> runner = ReportRunner(ReportSettings(data_dir="data", output_dir="output"))
        >>> path = runner.run()  # output/output.txt

        検証エラー時は output/error_logs.txt に ``Error: ...`` を書き出し、
        ValidationError を送出する。

    """

    def __init__(
        self,
        settings: ReportSettings | None = None,
        *,
        loader: RecordLoader | None = None,
        writer: ReportWriter | None = None,
    ) -> None:
        """初期化.

        Args:
            settings: 設定（None の場合は環境変数から読み込む）
            loader: レコードローダー（省略時は settings.data_dir から生成）
            writer: レポートライター（省略時は settings.output_dir から生成）

        """
        self._settings = settings if settings is not None else ReportSettings()
        self._loader = loader if loader is not None else RecordLoader(self._settings.data_dir)
        self._writer = (
            writer
            if writer is not None
            else ReportWriter(
                self._settings.output_dir,
                report_name=self._settings.report_file,
                error_log_name=self._settings.error_log_file,
            )
        )

    @property
    def settings(self) -> ReportSettings:
        """現在の設定."""
        return self._settings

    def build(self, *, user_mapper: Any = None, company_mapper: Any = None) -> str:
        """レコードファイルを読み込み、レポート文字列を生成する.

        Args:
            user_mapper: User 用のカスタムマッパー
            company_mapper: Company 用のカスタムマッパー

        Returns:
            レポート文字列

        """
        user_records = self._load(self._settings.users_file)
        company_records = self._load(self._settings.companies_file)
        return process_batch(
            user_records,
            company_records,
            on_error=self._writer.write_error,
            user_mapper=user_mapper,
            company_mapper=company_mapper,
        )

    def _load(self, name: str) -> list[dict[str, Any]]:
        # JSON として読めないファイルもレコードの検証エラーと同じく記録する
        try:
            return self._loader.load(name)
        except MappingError as e:
            self._writer.write_error(str(e))
            logger.error("Malformed %s file", name)
            raise

    def run(self, *, user_mapper: Any = None, company_mapper: Any = None) -> Path:
        """レポートを生成してファイルに書き出し、そのパスを返す."""
        report = self.build(user_mapper=user_mapper, company_mapper=company_mapper)
        path = self._writer.write_report(report)
        logger.info("Report written to %s", path)
        return path
