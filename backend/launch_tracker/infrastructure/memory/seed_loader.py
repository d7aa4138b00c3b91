"""Seed loader — reads the baseline launch records from a JSON file.

Each entry goes through the same validation as an API submission, so a
malformed seed date fails startup instead of producing a broken timeline.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from launch_tracker.application.schemas.launch import LaunchCreate
from launch_tracker.application.services.launch_service import build_launch_record
from launch_tracker.domain.entities import LaunchRecord
from launch_tracker.domain.exceptions import LaunchValidationError

logger = logging.getLogger(__name__)


class SeedDataError(Exception):
    """Raised when the seed file is unreadable or contains an invalid record."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


def load_seed_records(path: str | Path) -> list[LaunchRecord]:
    """Parse and validate the seed file. A missing file yields no records."""
    seed_path = Path(path)
    if not seed_path.exists():
        logger.warning("Seed file %s not found — starting with an empty store", seed_path)
        return []

    try:
        raw = json.loads(seed_path.read_text("utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SeedDataError(seed_path, f"could not read seed file ({exc})") from exc

    if not isinstance(raw, list):
        raise SeedDataError(seed_path, "expected a JSON array of launch records")

    records: list[LaunchRecord] = []
    seen_ids: set[str] = set()
    for index, item in enumerate(raw):
        try:
            data = LaunchCreate.model_validate(item)
            if not data.id:
                raise SeedDataError(seed_path, f"entry {index} has no id")
            record = build_launch_record(data)
        except (ValidationError, LaunchValidationError) as exc:
            raise SeedDataError(seed_path, f"entry {index}: {exc}") from exc

        if record.id in seen_ids:
            raise SeedDataError(seed_path, f"duplicate id '{record.id}'")
        seen_ids.add(record.id)
        records.append(record)

    logger.info("Loaded %d seed launches from %s", len(records), seed_path)
    return records
