"""ReportWriter: レポートとエラーログの書き出し."""

from __future__ import annotations

from pathlib import Path


class ReportWriter:
    """レポートとエラーログの書き出し.

    いずれのファイルも追記せず上書きする。エラーログには最後のエラーのみが残る。
    """

    def __init__(
        self,
        output_dir: str | Path = "output",
        *,
        report_name: str = "output.txt",
        error_log_name: str = "error_logs.txt",
    ) -> None:
        self.output_dir = Path(output_dir)
        self.report_path = self.output_dir / report_name
        self.error_log_path = self.output_dir / error_log_name

    def write_report(self, text: str) -> Path:
        """レポートを書き出し、そのパスを返す."""
        return self._write(self.report_path, text)

    def write_error(self, message: str) -> Path:
        """``"Error: {message}"`` をエラーログに書き出し、そのパスを返す."""
        return self._write(self.error_log_path, f"Error: {message}")

    def _write(self, path: Path, text: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            f.write(text)
        return path
