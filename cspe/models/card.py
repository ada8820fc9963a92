# cspe/models/card.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from cspe.scrape.set.parse_set import RawCardRow


@dataclass(frozen=True)
class CardRecord:
    name: str
    link: str
    price1: str
    price2: str
    set_icon: str
    set_code: str
    set_name: str
    is_only_foil: bool = False

    # ---- artifact schema (key order is the on-disk order) ----
    JSON_KEYS = (
        "name",
        "link",
        "price1",
        "price2",
        "setIcon",
        "setCode",
        "setName",
        "isOnlyFoil",
    )

    def to_json_row(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "link": self.link,
            "price1": self.price1,
            "price2": self.price2,
            "setIcon": self.set_icon,
            "setCode": self.set_code,
            "setName": self.set_name,
            "isOnlyFoil": self.is_only_foil,
        }

    @classmethod
    def from_json_row(cls, r: Dict[str, Any]) -> "CardRecord":
        return cls(
            name=r["name"],
            link=r["link"],
            price1=r.get("price1") or "",
            price2=r.get("price2") or "",
            set_icon=r.get("setIcon", ""),
            set_code=r["setCode"],
            set_name=r.get("setName", ""),
            is_only_foil=bool(r.get("isOnlyFoil", False)),
        )


def is_only_foil(price1: str, price2: str) -> bool:
    # only the foil column carries a price
    return not price1 and bool(price2)


def normalize_card(row: RawCardRow, set_code: str) -> CardRecord:
    return CardRecord(
        name=row.name,
        link=row.link,
        price1=row.price1,
        price2=row.price2,
        set_icon=row.set_icon,
        set_code=set_code,
        set_name=row.set_name,
        is_only_foil=is_only_foil(row.price1, row.price2),
    )
