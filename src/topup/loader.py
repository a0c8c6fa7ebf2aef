"""RecordLoader: JSON レコードファイルの読み込み."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from topup.exceptions import MappingError, RecordFileNotFoundError


class RecordLoader:
    """JSON レコードファイルの読み込み."""

    def __init__(self, base_path: str | Path = "data") -> None:
        self.base_path = Path(base_path)

    def load(self, path: str) -> list[dict[str, Any]]:
        """レコードファイルを読み込む.

        ファイルはトップレベルがオブジェクトの配列である UTF-8 の JSON とする。

        Args:
            path: base_path からの相対パス

        Returns:
            レコード（辞書）のリスト

        Raises:
            RecordFileNotFoundError: ファイルが存在しない場合
            MappingError: JSON として不正、またはオブジェクトの配列でない場合

        Examples:
            >>> loader = RecordLoader("data")
            >>> users = loader.load("users.json")

        """
        base_path = self.base_path.resolve()
        file_path = (base_path / path).resolve()
        if not self._is_valid_path(base_path, file_path):
            msg = f"Record file not found: {file_path}"
            raise RecordFileNotFoundError(msg)

        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            msg = f"Invalid JSON in {file_path}: {e}"
            raise MappingError(msg) from e

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            msg = f"Record file must contain a list of objects: {file_path}"
            raise MappingError(msg)
        return data

    @staticmethod
    def _is_valid_path(base_path: Path, file_path: Path) -> bool:
        """ファイルパスが有効か（base_path 配下に存在するか）を判定する."""
        if file_path != base_path and base_path not in file_path.parents:
            return False
        return file_path.is_file()
