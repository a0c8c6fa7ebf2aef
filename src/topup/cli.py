"""コマンドラインインターフェース."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from topup.config import ReportSettings
from topup.exceptions import MappingError, TopupError, ValidationError
from topup.runner import ReportRunner

logger = logging.getLogger("topup.cli")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the company token top-up report")
    parser.add_argument("--data-dir", help="Directory containing the record files")
    parser.add_argument("--output-dir", help="Directory for the report and error log")
    parser.add_argument("--users", dest="users_file", help="User records file (default: users.json)")
    parser.add_argument(
        "--companies",
        dest="companies_file",
        help="Company records file (default: companies.json)",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> ReportSettings:
    """環境変数の設定に CLI 引数を上書きした設定を返す."""
    overrides = {key: value for key, value in vars(args).items() if value is not None}
    return ReportSettings(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    """レポートを生成し、終了コードを返す."""
    args = _parse_args(argv)
    settings = build_settings(args)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        ReportRunner(settings).run()
    except (ValidationError, MappingError):
        # 診断は出力済み
        return 1
    except TopupError as exc:
        logger.error("%s", exc)
        return 1
    return 0
