"""Company エンティティ."""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any

from topup.exceptions import ValidationError
from topup.models.user import User


@dataclass(eq=False)
class Company:
    """会社.

    所属ユーザーの集計とレポート出力を担う。``users`` は ``add_user`` でのみ
    追加でき、外部には読み取り専用のタプルとして公開する。

    Note:
        ``users_emailed`` / ``users_not_emailed`` は出力と同時に各アクティブ
        ユーザーへ ``top_up`` を付与する。同じインスタンスで2回出力すると
        2回付与される。

    """

    id: Any = None
    name: str | None = None
    top_up: Any = None
    email_status: bool | None = None
    _users: list[User] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """必須項目を検証する.

        Raises:
            ValidationError: 検証に失敗した場合

        """
        if self.id is None:
            raise ValidationError("Id can't be blank")
        if self.name is None:
            raise ValidationError("Name can't be blank")
        if self.top_up is None:
            raise ValidationError("Top up can't be blank")
        if self.email_status is None:
            raise ValidationError("Email status can't be blank")

    @property
    def users(self) -> tuple[User, ...]:
        """所属ユーザー（追加順）."""
        return tuple(self._users)

    def add_user(self, user: User) -> None:
        """ユーザーを追加する.

        重複や ``company_id`` の一致は確認しない。
        """
        self._users.append(user)

    def active_users(self) -> list[User]:
        """アクティブなユーザーを姓の昇順で返す（安定ソート）."""
        return sorted((u for u in self._users if u.active_status), key=attrgetter("last_name"))

    def render(self) -> str:
        """会社 ID と会社名の2行を返す."""
        return f"  Company Id: {self.id}\n  Company Name: {self.name}\n"

    def __str__(self) -> str:
        return self.render()

    def users_section(self) -> str:
        """メール送信済み・未送信の両セクションをこの順で返す."""
        return self.users_emailed() + self.users_not_emailed()

    def users_emailed(self) -> str:
        """メール送信済みユーザーのセクションを返す.

        会社の ``email_status`` が偽の場合は見出しのみ。
        """
        parts = ["  Users Emailed:\n"]
        if not self.email_status:
            return parts[0]

        for user in self.active_users():
            if user.email_status:
                parts.append(self._credit_user(user))
        return "".join(parts)

    def users_not_emailed(self) -> str:
        """メール未送信ユーザーのセクションを返す.

        会社の ``email_status`` が偽の場合は全アクティブユーザーを対象とする。
        """
        parts = ["  Users Not Emailed:\n"]
        for user in self.active_users():
            if not self.email_status or not user.email_status:
                parts.append(self._credit_user(user))
        return "".join(parts)

    @property
    def total_top_up_amount(self) -> Any:
        """アクティブユーザー数 × ``top_up``."""
        return len(self.active_users()) * self.top_up

    def total_top_up(self) -> str:
        """トップアップ合計の行を返す."""
        return f"    Total amount of top ups for {self.name}: {self.total_top_up_amount}\n"

    def _credit_user(self, user: User) -> str:
        # ユーザー行に続けて付与結果を出力する
        return f"    {user.render()}      {user.add_tokens(self.top_up)}"
