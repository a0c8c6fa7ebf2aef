"""ReportSettings: 環境変数から読み込む設定."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportSettings(BaseSettings):
    """レポート生成の設定.

    ``TOPUP_`` で始まる環境変数（例: ``TOPUP_DATA_DIR``）と ``.env`` から読み込む。
    """

    model_config = SettingsConfigDict(env_prefix="TOPUP_", env_file=".env", extra="ignore")

    # 入力
    data_dir: Path = Path("data")
    users_file: str = "users.json"
    companies_file: str = "companies.json"

    # 出力
    output_dir: Path = Path("output")
    report_file: str = "output.txt"
    error_log_file: str = "error_logs.txt"

    log_level: str = "INFO"
