"""User エンティティ."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from topup.exceptions import ValidationError
from topup.models.credit import TokenCredit

EMAIL_PATTERN = re.compile(r"\A[\w+\-.]+@[a-z\d-]+(?:\.[a-z]+)*\.[a-z]+\Z", re.IGNORECASE | re.ASCII)


@dataclass(eq=False)
class User:
    """ユーザー.

    生成時に自身を検証し、不正な場合は ValidationError を送出する。
    生成後に変更されるのは ``tokens`` のみ。

    Attributes:
        id: ユーザー ID
        first_name: 名
        last_name: 姓
        email: メールアドレス
        company_id: 所属会社の ID
        email_status: トップアップメール送信済みか
        active_status: レポート対象か
        tokens: トークン残高

    """

    id: Any = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    company_id: Any = None
    email_status: bool | None = None
    active_status: bool | None = None
    tokens: Any = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """必須項目とメールアドレス形式を検証する.

        最初に失敗した検証のメッセージで ValidationError を送出する。

        Raises:
            ValidationError: 検証に失敗した場合

        """
        if self.id is None:
            raise ValidationError("Id can't be nil")
        if self.first_name is None:
            raise ValidationError("First name can't be nil")
        if self.last_name is None:
            raise ValidationError("Last name can't be nil")
        if self.email is None:
            raise ValidationError("Email can't be nil")
        if not is_valid_email(self.email):
            raise ValidationError("Malformed email")
        if self.company_id is None:
            raise ValidationError("Company id can't be nil")
        if self.email_status is None:
            raise ValidationError("Email status can't be nil")
        if self.active_status is None:
            raise ValidationError("Active status can't be nil")
        if self.tokens is None:
            raise ValidationError("Tokens can't be nil")

    def render(self) -> str:
        """レポート用の1行を返す."""
        return f"{self.last_name}, {self.first_name}, {self.email}\n"

    def __str__(self) -> str:
        return self.render()

    def preview_credit(self, amount: Any) -> TokenCredit:
        """残高を変更せずに付与結果を計算する."""
        return TokenCredit(previous=self.tokens, amount=amount)

    def apply_credit(self, credit: TokenCredit) -> None:
        """計算済みの付与を残高に反映する."""
        self.tokens = self.tokens + credit.amount

    def add_tokens(self, amount: Any) -> str:
        """トークンを付与し、付与前後の残高を示す2行を返す.

        amount は検証しない（負数も受け付ける）。

        Args:
            amount: 付与するトークン数

        Returns:
            ``"Previous Token Balance, {old}\\n      New Token Balance {new}\\n"``

        """
        credit = self.preview_credit(amount)
        self.apply_credit(credit)
        return credit.render()


def is_valid_email(value: Any) -> bool:
    """メールアドレスとして有効な文字列か判定する."""
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None
