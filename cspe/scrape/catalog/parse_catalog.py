# cspe/scrape/catalog/parse_catalog.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from bs4 import BeautifulSoup, Tag

from cspe.scrape.errors import ParseError
from cspe.scrape.sources.base import SourceConfig
from cspe.logging.logger import setup_logger

log = setup_logger(__name__)

SETS_BLOCK = ".sets.row"
SET_ANCHORS = "ul > li > a"


@dataclass
class CatalogPage:
    config: SourceConfig
    set_links: List[str]


def extract_set_hrefs(soup: BeautifulSoup) -> List[str]:
    log.debug("Extracting set links from catalog HTML")

    blocks = soup.select(SETS_BLOCK)
    if not blocks:
        raise ParseError(f"Could not find sets listing: {SETS_BLOCK}")

    # nested blocks would match the same anchor twice
    anchors: List[Tag] = []
    seen = set()
    for block in blocks:
        for a in block.select(SET_ANCHORS):
            if id(a) in seen:
                continue
            seen.add(id(a))
            anchors.append(a)
    log.debug("Found %d anchor tags in %d blocks", len(anchors), len(blocks))

    hrefs: List[str] = []
    for a in anchors:
        href = a.get("href")
        if not href:
            log.debug("Skipping set anchor without href: %r", a.get_text(strip=True))
            continue
        hrefs.append(href)

    return hrefs


def parse_catalog_page(
    html: str,
    source_config: SourceConfig,
) -> CatalogPage:
    log.info("Parsing catalog page")

    soup = BeautifulSoup(html, "lxml")

    set_links = [source_config.resolve(href) for href in extract_set_hrefs(soup)]

    log.info("Parsed catalog page: %d set links", len(set_links))

    return CatalogPage(
        config=source_config,
        set_links=set_links,
    )
