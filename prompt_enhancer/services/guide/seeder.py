"""Load knowledge documents from JSON files into the guide store."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from prompt_enhancer.db import get_default_adapter
from prompt_enhancer.db_managers import GuideManager

logger = logging.getLogger(__name__)

DEFAULT_GUIDE_FILE: str = "gemini_guide.json"


@dataclass
class SeedReport:
    inserted: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def seed_guides(guides_dir: Path, *, only: Iterable[str] | None = None) -> SeedReport:
    """
    Insert every ``*.json`` guide file in ``guides_dir`` (sorted by name).

    ``only`` restricts seeding to the given file names. A guide whose
    (platform, version) is already stored is skipped. A file that cannot be
    read or lacks a platform is recorded as failed and seeding continues.
    """
    files = sorted(guides_dir.glob("*.json"))
    if only is not None:
        wanted = set(only)
        files = [f for f in files if f.name in wanted]
        missing = wanted - {f.name for f in files}
    else:
        missing = set()
    logger.info("Seeding %d guide files from %s", len(files), guides_dir)

    report = SeedReport()
    for name in sorted(missing):
        logger.error("Guide file not found: %s", guides_dir / name)
        report.failed[name] = "file not found"

    adapter = get_default_adapter()
    adapter.create_tables()
    for path in files:
        try:
            platform, version, guide = _read_guide_file(path)
        except ValueError as exc:
            logger.error("Skipping unreadable guide file %s: %s", path.name, exc)
            report.failed[path.name] = str(exc)
            continue

        with adapter.session() as session:
            manager = GuideManager(session)
            if manager.get_by_platform_version(platform, version) is not None:
                logger.warning("Guide for %s v%s already exists, skipping.", platform, version)
                report.skipped.append(path.name)
                continue
            row = manager.add_guide(platform=platform, version=version, guide=guide)
            logger.info("Inserted guide %s v%s guide_id=%d", platform, version, row.guide_id)
            report.inserted.append(path.name)

    return report


def _read_guide_file(path: Path) -> tuple[str, str, dict[str, object]]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    platform = str(data.get("platform") or "").strip()
    if not platform:
        raise ValueError("missing 'platform'")
    version = str(data.get("version") or "")
    guide = data.get("guide")
    return platform, version, guide if isinstance(guide, dict) else {}
