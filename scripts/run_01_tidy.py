from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from linefish.pipeline import run_01_tidy_and_write  # noqa: E402


def _ask_for_csv() -> str:
    return input("Path to QFish export CSV: ")


def main() -> None:
    parser = argparse.ArgumentParser(description="Runbook 01: tidy commercial line fishery totals")
    parser.add_argument("--input", type=Path, default=None, help="Explicit path to the export CSV.")
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=Path("."),
        help="Directory probed for export.csv / code/export.csv and sibling data/reports dirs.",
    )
    parser.add_argument("--output-dir", type=Path, default=None)
    parser.add_argument(
        "--prompt",
        action="store_true",
        help="Ask for the CSV path on stdin when no default file is found.",
    )
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_01_tidy_and_write(
        base_dir=args.base_dir,
        input_path=args.input,
        output_dir=args.output_dir,
        prompt=_ask_for_csv if args.prompt else None,
        project_root=PROJECT_ROOT,
    )


if __name__ == "__main__":
    main()
