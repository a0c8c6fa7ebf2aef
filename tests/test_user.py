"""User エンティティのテスト."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from topup.exceptions import ValidationError
from topup.models import TokenCredit, User
from topup.models.user import is_valid_email


class TestUserConstruction:
    """生成時のバリデーション."""

    def test_valid_record(self, user_record: Callable[..., dict[str, Any]]) -> None:
        """正しいレコードから生成できる."""
        user = User(**user_record())
        assert user.id == 1
        assert user.tokens == 100

    @pytest.mark.parametrize(
        ("field_name", "message"),
        [
            ("id", "Id can't be nil"),
            ("first_name", "First name can't be nil"),
            ("last_name", "Last name can't be nil"),
            ("email", "Email can't be nil"),
            ("company_id", "Company id can't be nil"),
            ("email_status", "Email status can't be nil"),
            ("active_status", "Active status can't be nil"),
            ("tokens", "Tokens can't be nil"),
        ],
    )
    def test_missing_field(
        self,
        user_record: Callable[..., dict[str, Any]],
        field_name: str,
        message: str,
    ) -> None:
        """必須項目が None の場合、項目ごとのメッセージで失敗する."""
        with pytest.raises(ValidationError) as exc_info:
            User(**user_record(**{field_name: None}))
        assert str(exc_info.value) == message

    def test_omitted_field_is_missing(self, user_record: Callable[..., dict[str, Any]]) -> None:
        """キーが無い場合も None と同じ扱い."""
        record = user_record()
        del record["tokens"]
        with pytest.raises(ValidationError, match="Tokens can't be nil"):
            User(**record)

    def test_malformed_email(self, user_record: Callable[..., dict[str, Any]]) -> None:
        with pytest.raises(ValidationError) as exc_info:
            User(**user_record(email="invalid_email"))
        assert str(exc_info.value) == "Malformed email"

    def test_first_failure_wins(self, user_record: Callable[..., dict[str, Any]]) -> None:
        """複数の不備がある場合は検証順で最初のものを報告する."""
        record = user_record(first_name=None, email="invalid_email", tokens=None)
        with pytest.raises(ValidationError, match="First name can't be nil"):
            User(**record)

    def test_email_checked_before_company_id(
        self, user_record: Callable[..., dict[str, Any]]
    ) -> None:
        with pytest.raises(ValidationError, match="Malformed email"):
            User(**user_record(email="nobody", company_id=None))

    def test_falsy_values_are_present(self, user_record: Callable[..., dict[str, Any]]) -> None:
        """False や 0 は欠損扱いしない."""
        user = User(**user_record(email_status=False, active_status=False, tokens=0, id=0))
        assert user.tokens == 0
        assert user.active_status is False


class TestEmailFormat:
    """メールアドレス形式の判定."""

    @pytest.mark.parametrize(
        "email",
        ["john@example.com", "a.b+c@sub.example.co.uk", "JOHN_DOE@EXAMPLE.COM", "x-y@my-host.io"],
    )
    def test_accepts(self, email: str) -> None:
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        [
            "invalid_email",
            "john.example.com",
            "john@example",
            "john@example.",
            "john@example.c0m",
            "john doe@example.com",
            "john@example.com\n",
            "",
        ],
    )
    def test_rejects(self, email: str) -> None:
        assert not is_valid_email(email)

    def test_rejects_non_string(self) -> None:
        assert not is_valid_email(42)


class TestUserRender:
    """レポート行の出力."""

    def test_render(self, make_user: Callable[..., User]) -> None:
        user = make_user()
        assert user.render() == "Doe, John, john@example.com\n"

    def test_str_matches_render(self, make_user: Callable[..., User]) -> None:
        user = make_user()
        assert str(user) == user.render()


class TestAddTokens:
    """トークン付与."""

    def test_add_tokens(self, make_user: Callable[..., User]) -> None:
        """残高を加算し、付与前後の2行を返す."""
        user = make_user(tokens=100)
        result = user.add_tokens(50)
        assert user.tokens == 150
        assert result == "Previous Token Balance, 100\n      New Token Balance 150\n"

    def test_negative_amount_is_not_rejected(self, make_user: Callable[..., User]) -> None:
        user = make_user(tokens=10)
        user.add_tokens(-30)
        assert user.tokens == -20

    def test_add_tokens_accumulates(self, make_user: Callable[..., User]) -> None:
        user = make_user(tokens=0)
        user.add_tokens(10)
        assert user.add_tokens(10) == "Previous Token Balance, 10\n      New Token Balance 20\n"


class TestTokenCredit:
    """付与の計算と反映の分離."""

    def test_preview_does_not_mutate(self, make_user: Callable[..., User]) -> None:
        user = make_user(tokens=100)
        credit = user.preview_credit(25)
        assert credit == TokenCredit(previous=100, amount=25)
        assert credit.new == 125
        assert user.tokens == 100

    def test_apply_credit(self, make_user: Callable[..., User]) -> None:
        user = make_user(tokens=100)
        user.apply_credit(user.preview_credit(25))
        assert user.tokens == 125

    def test_render_credit(self) -> None:
        credit = TokenCredit(previous=0, amount=10)
        assert credit.render() == "Previous Token Balance, 0\n      New Token Balance 10\n"
