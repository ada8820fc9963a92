# cspe/models/set.py

from dataclasses import dataclass
from typing import List

from cspe.models.card import CardRecord


@dataclass
class SetPage:
    set_link: str
    set_name: str
    set_code: str
    records: List[CardRecord]
