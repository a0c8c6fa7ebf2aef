"""topup 例外クラス."""


class TopupError(Exception):
    """topup の基底例外."""


class ValidationError(TopupError):
    """エンティティのバリデーションエラー."""


class MappingError(TopupError):
    """レコードのマッピングエラー."""


class RecordFileNotFoundError(TopupError):
    """レコードファイルが見つからない."""
