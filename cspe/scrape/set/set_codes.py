# cspe/scrape/set/set_codes.py

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from cspe.scrape.errors import SetCodeError
from cspe.logging.logger import setup_logger

log = setup_logger(__name__)


def load_set_codes(path: str | Path) -> Mapping[str, str]:
    """Load the set name -> set code table. The result is read-only."""
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        table = json.load(f)

    if not isinstance(table, dict):
        raise ValueError(f"Set code table must be a JSON object: {path}")

    log.info("Loaded %d set codes from %s", len(table), path)
    return MappingProxyType(dict(table))


def resolve_set_code(set_name: str, set_codes: Mapping[str, str]) -> str:
    code = set_codes.get(set_name)
    if not code:
        raise SetCodeError(set_name)
    return code
