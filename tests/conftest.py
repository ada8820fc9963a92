from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List

import pytest
from bs4 import BeautifulSoup

from cspe.config.scraper import ScraperConfig
from cspe.scrape.errors import NavigationError, ParseError
from cspe.scrape.sources.base import SourceConfig

BASE_URL = "https://cards.example"

CATALOG_HTML = """
<html><body>
  <nav><ul><li><a href="/about">About</a></li></ul></nav>
  <div class="sets row">
    <ul>
      <li><a href="/sets/alpha">Alpha Edition</a></li>
      <li><a href="/sets/beta">Beta Edition</a></li>
    </ul>
  </div>
</body></html>
"""


def set_page_html(set_name: str, rows: List[str]) -> str:
    return f"""
    <html><body>
      <h3>
        {set_name}
      </h3>
      <div class="cards"><ul>{''.join(rows)}</ul></div>
    </body></html>
    """


def card_row(name: str, href: str, price1: str = "", price2: str = "", icon: str = "ss ss-alp") -> str:
    return (
        "<li>"
        f'<a href="{href}"> {name} </a>'
        f"<span> {price1} </span>"
        f"<span> {price2} </span>"
        f'<i class="{icon}"></i>'
        "</li>"
    )


ALPHA_HTML = set_page_html("Alpha Edition", [card_row("Bolt", "/cards/bolt", "$1", "", "icon-alp")])
BETA_HTML = set_page_html("Beta Edition", [card_row("Spark", "/cards/spark", "", "$5", "icon-bet")])


class FakePage:
    """In-memory stand-in for BrowserPage, keyed by URL."""

    def __init__(self, pages: Dict[str, str]):
        self.pages = pages
        self.current: str | None = None
        self.visited: List[str] = []
        self.pauses: List[float] = []

    def goto(self, url: str) -> None:
        if url not in self.pages:
            raise NavigationError(url, "net::ERR_NAME_NOT_RESOLVED")
        self.current = url
        self.visited.append(url)

    def pause(self, seconds: float) -> None:
        self.pauses.append(seconds)

    def wait_for(self, selector: str, timeout_s: float) -> None:
        if self._soup().select_one(selector) is None:
            raise ParseError(f"{selector} did not appear within {timeout_s}s on {self.current}")

    def text(self, selector: str) -> str:
        el = self._soup().select_one(selector)
        if el is None:
            raise ParseError(f"Could not read {selector} on {self.current}")
        return " ".join(el.get_text().split())

    def html(self) -> str:
        return self.pages[self.current]

    @property
    def url(self) -> str:
        return self.current or ""

    def _soup(self) -> BeautifulSoup:
        return BeautifulSoup(self.html(), "lxml")


@pytest.fixture
def source_config() -> SourceConfig:
    return SourceConfig(source="Test", catalog_path="/sets", base_url=BASE_URL)


@pytest.fixture
def set_codes():
    return MappingProxyType({"Alpha Edition": "ALP", "Beta Edition": "BET"})


@pytest.fixture
def scraper_config(tmp_path) -> ScraperConfig:
    return ScraperConfig(settle_delay_s=0.75, ready_timeout_s=1, output_dir=tmp_path / "scraped_data")


@pytest.fixture
def site_pages() -> Dict[str, str]:
    return {
        f"{BASE_URL}/sets": CATALOG_HTML,
        f"{BASE_URL}/sets/alpha": ALPHA_HTML,
        f"{BASE_URL}/sets/beta": BETA_HTML,
    }


@pytest.fixture
def fake_page(site_pages) -> FakePage:
    return FakePage(site_pages)
