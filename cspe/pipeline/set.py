# cspe/pipeline/set.py

from typing import Mapping

from cspe.browser.session import BrowserPage
from cspe.config.scraper import ScraperConfig
from cspe.models.card import normalize_card
from cspe.models.set import SetPage
from cspe.scrape.set.parse_set import parse_set_page
from cspe.scrape.set.set_codes import resolve_set_code
from cspe.logging.logger import setup_logger

log = setup_logger(__name__)


def settle(page: BrowserPage, scraper_config: ScraperConfig) -> None:
    """Wait for the card list, then give pseudo-element icons time to populate."""
    page.wait_for(scraper_config.ready_selector, scraper_config.ready_timeout_s)
    if scraper_config.settle_delay_s > 0:
        page.pause(scraper_config.settle_delay_s)


def extract_set_page(
    html: str,
    set_link: str,
    set_name: str,
    set_codes: Mapping[str, str],
) -> SetPage:
    log.debug("Extracting set page %s (%d characters)", set_link, len(html))

    rows = parse_set_page(html=html, set_link=set_link, set_name=set_name)

    # validate this page's set before anything reaches the aggregate
    set_code = resolve_set_code(set_name, set_codes)

    return SetPage(
        set_link=set_link,
        set_name=set_name,
        set_code=set_code,
        records=[normalize_card(row, set_code) for row in rows],
    )
