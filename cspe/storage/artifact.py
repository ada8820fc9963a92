# cspe/storage/artifact.py

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Sequence

from cspe.models.card import CardRecord
from cspe.logging.logger import setup_logger

log = setup_logger(__name__)

FILENAME_DATE_FORMAT = "%m-%d-%Y"
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def epoch_millis(ts: datetime) -> int:
    # integer arithmetic; float timestamps can land one millisecond short
    delta = ts.astimezone(timezone.utc) - EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def artifact_filename(started_at: datetime) -> str:
    return f"{started_at.strftime(FILENAME_DATE_FORMAT)}--{epoch_millis(started_at)}.json"


def dump_records(records: Sequence[CardRecord]) -> str:
    return json.dumps(
        [r.to_json_row() for r in records],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def write_artifact(
    records: Sequence[CardRecord],
    output_dir: str | Path,
    started_at: datetime,
) -> Path:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / artifact_filename(started_at)
    path.write_text(dump_records(records), encoding="utf-8")

    log.info("Wrote %d cards to %s", len(records), path)
    return path


def _run_millis(path: Path) -> int:
    millis = path.stem.rsplit("--", 1)[-1]
    return int(millis) if millis.isdigit() else -1


def latest_artifact(output_dir: str | Path) -> Path | None:
    # sort on the epoch part; the MM-DD-YYYY prefix does not order across years
    candidates = sorted(Path(output_dir).glob("*--*.json"), key=_run_millis)
    return candidates[-1] if candidates else None


def read_artifact(path: str | Path) -> List[CardRecord]:
    with Path(path).open(encoding="utf-8") as f:
        rows = json.load(f)
    return [CardRecord.from_json_row(r) for r in rows]
