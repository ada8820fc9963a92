# cspe/pipeline/navigator.py

from __future__ import annotations

from enum import Enum
from typing import List, Mapping, Sequence

from cspe.browser.session import BrowserPage
from cspe.config.scraper import ScraperConfig
from cspe.models.card import CardRecord
from cspe.pipeline.aggregate import CardAggregator
from cspe.pipeline.set import settle, extract_set_page
from cspe.scrape.set.parse_set import SET_HEADING
from cspe.logging.logger import setup_logger

log = setup_logger(__name__)


class NavState(str, Enum):
    IDLE = "idle"
    NAVIGATING = "navigating"
    SETTLING = "settling"
    EXTRACTING = "extracting"
    DONE = "done"


class SetNavigator:
    """
    Walks one browser page through the set links in order.

    The first exception from any step propagates out of `run`; whatever
    was aggregated so far is dropped with the navigator.
    """

    def __init__(
        self,
        page: BrowserPage,
        set_codes: Mapping[str, str],
        scraper_config: ScraperConfig,
    ):
        self._page = page
        self._set_codes = set_codes
        self._config = scraper_config
        self._aggregator = CardAggregator()
        self.state = NavState.IDLE

    def _transition(self, state: NavState) -> None:
        log.debug("Navigator state %s -> %s", self.state.value, state.value)
        self.state = state

    def visit(self, set_link: str) -> List[CardRecord]:
        self._transition(NavState.NAVIGATING)
        self._page.goto(set_link)

        self._transition(NavState.SETTLING)
        settle(self._page, self._config)

        self._transition(NavState.EXTRACTING)
        set_name = self._page.text(SET_HEADING)
        set_page = extract_set_page(
            html=self._page.html(),
            set_link=set_link,
            set_name=set_name,
            set_codes=self._set_codes,
        )

        self._aggregator.append(set_page.records)

        log.info("%s | %s | scraped", set_page.set_name, set_page.set_code)
        log.debug("%d cards from %s", len(set_page.records), set_link)

        return set_page.records

    def run(self, set_links: Sequence[str]) -> List[CardRecord]:
        log.info("Scraping %d sets", len(set_links))

        for i, set_link in enumerate(set_links, start=1):
            log.debug("Set %d/%d: %s", i, len(set_links), set_link)
            try:
                self.visit(set_link)
            except Exception:
                log.exception("Scrape aborted at %s", set_link)
                raise

        self._transition(NavState.DONE)
        log.info("Scraped %d cards across %d sets", len(self._aggregator), len(set_links))

        return self._aggregator.records
