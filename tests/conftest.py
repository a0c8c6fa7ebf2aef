"""pytest 共通設定: レコードとエンティティの fixture."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from topup.models import Company, User


def _user_record(**overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": 1,
        "first_name": "John",
        "last_name": "Doe",
        "email": "john@example.com",
        "company_id": 1,
        "email_status": True,
        "active_status": True,
        "tokens": 100,
    }
    record.update(overrides)
    return record


def _company_record(**overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": 1,
        "name": "Test Company",
        "top_up": 100,
        "email_status": True,
    }
    record.update(overrides)
    return record


@pytest.fixture
def user_record() -> Callable[..., dict[str, Any]]:
    """ユーザーレコードを生成する（キーワード引数で上書き可）."""
    return _user_record


@pytest.fixture
def company_record() -> Callable[..., dict[str, Any]]:
    """会社レコードを生成する（キーワード引数で上書き可）."""
    return _company_record


@pytest.fixture
def make_user() -> Callable[..., User]:
    """User を生成する."""

    def factory(**overrides: Any) -> User:
        return User(**_user_record(**overrides))

    return factory


@pytest.fixture
def make_company() -> Callable[..., Company]:
    """Company を生成する."""

    def factory(**overrides: Any) -> Company:
        return Company(**_company_record(**overrides))

    return factory


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """users.json と companies.json を置いたデータディレクトリを作成する."""
    directory = tmp_path / "data"
    directory.mkdir()
    users = [
        _user_record(id=1, first_name="John", last_name="Doe", email_status=True, tokens=0),
        _user_record(
            id=2,
            first_name="Jane",
            last_name="Smith",
            email="jane@example.com",
            email_status=False,
            tokens=0,
        ),
    ]
    companies = [_company_record(id=1, name="Acme", top_up=10, email_status=True)]
    (directory / "users.json").write_text(json.dumps(users), encoding="utf-8")
    (directory / "companies.json").write_text(json.dumps(companies), encoding="utf-8")
    return directory
