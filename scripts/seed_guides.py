"""Seed the guide store from JSON knowledge documents.

Usage:
    python scripts/seed_guides.py            # seed gemini_guide.json only
    python scripts/seed_guides.py --all      # seed every *.json guide
    python scripts/seed_guides.py --all --dir path/to/guides
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from constants import GUIDES_DIR
from prompt_enhancer.services.guide.seeder import DEFAULT_GUIDE_FILE, seed_guides


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--all", action="store_true", help="seed every guide file in the directory")
    parser.add_argument("--dir", type=Path, default=GUIDES_DIR, help="directory holding guide JSON files")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    only = None if args.all else [DEFAULT_GUIDE_FILE]
    report = seed_guides(args.dir, only=only)

    print(f"Inserted: {len(report.inserted)}  Skipped: {len(report.skipped)}  Failed: {len(report.failed)}")
    for name, reason in report.failed.items():
        print(f"FAILED {name}: {reason}")
    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
