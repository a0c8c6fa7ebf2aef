"""topup エンティティパッケージ."""

from topup.models.company import Company
from topup.models.credit import TokenCredit
from topup.models.user import User, is_valid_email

__all__ = ["Company", "TokenCredit", "User", "is_valid_email"]
