# cspe/pipeline/aggregate.py

from typing import Iterable, List

from cspe.models.card import CardRecord


class CardAggregator:
    def __init__(self) -> None:
        self._records: List[CardRecord] = []

    def append(self, records: Iterable[CardRecord]) -> None:
        self._records.extend(records)

    @property
    def records(self) -> List[CardRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)
