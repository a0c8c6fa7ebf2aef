"""process_batch: レコードの検証・紐付け・レポート生成."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from topup.exceptions import MappingError, ValidationError
from topup.mapper.factory import create_mapper
from topup.models.company import Company
from topup.models.user import User

logger = logging.getLogger("topup.pipeline")

ErrorHandler = Callable[[str], Any]


def process_batch(
    user_records: Sequence[dict[str, Any]],
    company_records: Sequence[dict[str, Any]],
    *,
    on_error: ErrorHandler | None = None,
    user_mapper: Any = None,
    company_mapper: Any = None,
) -> str:
    """ユーザーと会社のレコードからレポート文字列を生成する.

    1件でも検証に失敗した場合は ``on_error`` にメッセージを渡した上で
    例外を再送出する。部分的なレポートは生成しない。

    Args:
        user_records: ユーザーレコードのシーケンス
        company_records: 会社レコードのシーケンス
        on_error: 検証エラーのメッセージを受け取るコールバック（エラーログ出力用）
        user_mapper: User 用のカスタムマッパー（省略時は自動生成）
        company_mapper: Company 用のカスタムマッパー（省略時は自動生成）

    Returns:
        レポート文字列

    Raises:
        ValidationError: レコードの検証に失敗した場合
        MappingError: レコードがオブジェクトでない場合

    """
    users = build_users(user_records, on_error=on_error, mapper=user_mapper)
    companies = build_companies(company_records, on_error=on_error, mapper=company_mapper)
    associate(users, companies)
    return render_report(companies)


def build_users(
    records: Sequence[dict[str, Any]],
    *,
    on_error: ErrorHandler | None = None,
    mapper: Any = None,
) -> list[User]:
    """ユーザーレコードを入力順に User へ変換する."""
    return _build(User, records, "users", on_error=on_error, mapper=mapper)


def build_companies(
    records: Sequence[dict[str, Any]],
    *,
    on_error: ErrorHandler | None = None,
    mapper: Any = None,
) -> list[Company]:
    """会社レコードを入力順に Company へ変換する."""
    return _build(Company, records, "companies", on_error=on_error, mapper=mapper)


def associate(users: Sequence[User], companies: Iterable[Company]) -> None:
    """``company_id`` が一致するユーザーを各会社に追加する.

    会社ごとに全ユーザーを入力順に走査する。どの会社にも一致しないユーザーは
    無視され、複数の会社に一致するユーザーはそれぞれに追加される。
    """
    for company in companies:
        for user in users:
            if user.company_id == company.id:
                company.add_user(user)


def render_report(companies: Iterable[Company]) -> str:
    """会社ごとのブロックを連結したレポートを返す.

    出力の過程で各アクティブユーザーのトークン残高が更新される。
    """
    parts: list[str] = []
    for company in companies:
        parts.append("\n")
        parts.append(company.render())
        parts.append(company.users_section())
        parts.append(company.total_top_up())
    return "".join(parts)


def _build(
    entity_cls: type,
    records: Sequence[dict[str, Any]],
    label: str,
    *,
    on_error: ErrorHandler | None,
    mapper: Any,
) -> list[Any]:
    record_mapper = create_mapper(entity_cls, mapper=mapper)
    try:
        entities = record_mapper.map_rows(list(records))
    except (ValidationError, MappingError) as e:
        if on_error is not None:
            on_error(str(e))
        logger.error("Malformed %s.json file", label)
        raise
    logger.info("Loaded %d %s", len(entities), label)
    return entities
