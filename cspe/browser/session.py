# cspe/browser/session.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from seleniumbase import SB

from cspe.config.scraper import ScraperConfig
from cspe.scrape.errors import NavigationError, ParseError
from cspe.logging.logger import setup_logger

log = setup_logger(__name__)


class BrowserPage:
    """The single browser tab every pipeline step goes through."""

    def __init__(self, sb):
        self._sb = sb

    def goto(self, url: str) -> None:
        log.debug("Navigating to %s", url)
        try:
            self._sb.open(url)
        except Exception as e:
            raise NavigationError(url, str(e)) from e

    def pause(self, seconds: float) -> None:
        self._sb.sleep(seconds)

    def wait_for(self, selector: str, timeout_s: float) -> None:
        try:
            self._sb.wait_for_element_present(selector, timeout=timeout_s)
        except Exception as e:
            raise ParseError(
                f"{selector} did not appear within {timeout_s}s on {self.url}"
            ) from e

    def text(self, selector: str) -> str:
        try:
            return " ".join(self._sb.get_text(selector).split())
        except Exception as e:
            raise ParseError(f"Could not read {selector} on {self.url}") from e

    def html(self) -> str:
        return self._sb.get_page_source()

    @property
    def url(self) -> str:
        return self._sb.get_current_url()


@contextmanager
def open_browser(config: ScraperConfig) -> Iterator[BrowserPage]:
    log.info(
        "Launching browser (headless=%s, user_data_dir=%s)",
        config.headless,
        config.user_data_dir,
    )
    with SB(uc=True, headless=config.headless, user_data_dir=config.user_data_dir) as sb:
        try:
            yield BrowserPage(sb)
        finally:
            log.info("Browser closed")
