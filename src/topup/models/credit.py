"""TokenCredit: トークン付与1回分の値オブジェクト."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TokenCredit:
    """付与前残高・付与量・付与後残高の組."""

    previous: Any
    amount: Any

    @property
    def new(self) -> Any:
        """付与後の残高を返す."""
        return self.previous + self.amount

    def render(self) -> str:
        """レポート用の2行を返す.

        2行目は6桁のインデント付きで出力する。
        """
        return f"Previous Token Balance, {self.previous}\n      New Token Balance {self.new}\n"
