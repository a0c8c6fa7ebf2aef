#!/usr/bin/env python3
"""topup report example.

Reads examples/data/users.json and examples/data/companies.json and writes
examples/output/output.txt.

Usage:
    python examples/run_report.py
"""

from __future__ import annotations

import logging
from pathlib import Path

from topup import ReportRunner, ReportSettings

HERE = Path(__file__).resolve().parent


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    settings = ReportSettings(data_dir=HERE / "data", output_dir=HERE / "output")
    path = ReportRunner(settings).run()
    print(path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
