# cspe/scrape/set/parse_set.py

from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from cspe.scrape.errors import ParseError
from cspe.logging.logger import setup_logger

log = setup_logger(__name__)

CARDS_BLOCK = ".cards"
CARD_ROWS = ".cards ul > li"
SET_HEADING = "h3"


@dataclass(frozen=True)
class RawCardRow:
    name: str
    link: str
    price1: str
    price2: str
    set_icon: str
    set_name: str


# -----------------------------
# Normalization helpers
# -----------------------------

def clean_text(el: Optional[Tag]) -> str:
    # match rendered innerText: runs of whitespace collapse to one space
    if el is None:
        return ""
    return " ".join(el.get_text().split())


def clean_class_attr(el: Tag) -> Optional[str]:
    classes = el.get("class")
    if classes is None:
        return None
    if isinstance(classes, str):
        return classes.strip()
    return " ".join(classes).strip()


# -----------------------------
# Extractors (raw -> structured)
# -----------------------------

def extract_set_name(soup: BeautifulSoup) -> str:
    h3 = soup.select_one(SET_HEADING)
    if h3 is None:
        raise ParseError(f"Could not find set name heading: {SET_HEADING}")
    return clean_text(h3)


def parse_card_row(row: Tag, index: int, set_link: str, set_name: str) -> RawCardRow:
    a_tag = row.find("a")
    if a_tag is None:
        raise ParseError(f"Card row {index} on {set_link} has no anchor")

    icon = row.find("i")
    if icon is None:
        raise ParseError(f"Card row {index} on {set_link} has no set icon")

    set_icon = clean_class_attr(icon)
    if set_icon is None:
        raise ParseError(f"Card row {index} on {set_link} has a set icon without a class")

    # 2nd and 3rd inline children: regular price, then foil price
    price1 = clean_text(row.select_one("span:nth-child(2)"))
    price2 = clean_text(row.select_one("span:nth-child(3)"))

    return RawCardRow(
        name=clean_text(a_tag),
        link=urljoin(set_link, a_tag.get("href", "")),
        price1=price1,
        price2=price2,
        set_icon=set_icon,
        set_name=set_name,
    )


def extract_card_rows(soup: BeautifulSoup, set_link: str, set_name: str) -> List[RawCardRow]:
    if soup.select_one(CARDS_BLOCK) is None:
        raise ParseError(f"Could not find cards listing on {set_link}: {CARDS_BLOCK}")

    rows = soup.select(CARD_ROWS)
    log.debug("Found %d card rows on %s", len(rows), set_link)

    return [
        parse_card_row(row, i, set_link, set_name)
        for i, row in enumerate(rows)
    ]


# -----------------------------
# Composition / "public API"
# -----------------------------

def parse_set_page(
    html: str,
    set_link: str,
    set_name: Optional[str] = None,
) -> List[RawCardRow]:
    log.debug("Parsing set page: %s", set_link)

    # keep class attributes as the raw string so the icon class survives verbatim
    soup = BeautifulSoup(html, "lxml", multi_valued_attributes=None)

    if set_name is None:
        set_name = extract_set_name(soup)

    rows = extract_card_rows(soup, set_link, set_name)

    log.info("Parsed %d card rows from %s", len(rows), set_link)
    return rows
