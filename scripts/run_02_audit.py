from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from linefish.workflows.audit import run_artifact_audit  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Runbook 02: tidy artifact audit")
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding the tidy CSVs (defaults to --output-dir).",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    result = run_artifact_audit(
        data_dir=args.data_dir or args.output_dir,
        reports_dir=args.output_dir / "reports",
    )
    if not result.ok:
        for err in result.errors:
            print(err, file=sys.stderr)
        sys.exit(1)
    print("Artifact audit passed.")


if __name__ == "__main__":
    main()
