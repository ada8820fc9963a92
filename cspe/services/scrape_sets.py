# cspe/services/scrape_sets.py

import time
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional

from cspe.browser.session import BrowserPage, open_browser
from cspe.config.scraper import SAMPLE_SET_CODES_PATH, ScraperConfig
from cspe.pipeline.catalog import run_catalog_pipeline
from cspe.pipeline.navigator import SetNavigator
from cspe.scrape.errors import ScrapeError
from cspe.scrape.set.set_codes import load_set_codes
from cspe.scrape.sources.base import SourceConfig
from cspe.storage.artifact import write_artifact
from cspe.logging.logger import setup_logger

logger = setup_logger(__name__)


def scrape_sets(
    page: BrowserPage,
    source_config: SourceConfig,
    set_codes: Mapping[str, str],
    scraper_config: ScraperConfig,
    started_at: Optional[datetime] = None,
) -> Path:
    started_at = started_at or datetime.now()
    t0 = time.perf_counter()

    # 1. DISCOVER SET LINKS
    catalog_page = run_catalog_pipeline(page, source_config)

    # 2. VISIT EVERY SET, IN CATALOG ORDER
    navigator = SetNavigator(page, set_codes, scraper_config)
    cards = navigator.run(catalog_page.set_links)

    # 3. SINGLE WRITE, ONLY AFTER EVERY SET SUCCEEDED
    path = write_artifact(cards, scraper_config.output_dir, started_at)

    logger.info("Scrape finished in %.1fs", time.perf_counter() - t0)
    return path


def run(source_config: SourceConfig, scraper_config: ScraperConfig) -> Path:
    started_at = datetime.now()
    if Path(scraper_config.set_codes_path) == SAMPLE_SET_CODES_PATH:
        logger.warning(
            "Using the sample set-code table %s; set CSPE_SET_CODES for a full run",
            SAMPLE_SET_CODES_PATH,
        )
    set_codes = load_set_codes(scraper_config.set_codes_path)

    logger.info("Starting scrape of %s", source_config.source)

    with open_browser(scraper_config) as page:
        return scrape_sets(
            page=page,
            source_config=source_config,
            set_codes=set_codes,
            scraper_config=scraper_config,
            started_at=started_at,
        )


def main() -> int:
    from cspe.scrape.sources.cardsphere import CARDSPHERE

    try:
        run(CARDSPHERE, ScraperConfig())
    except ScrapeError as e:
        logger.error("Scrape failed, no output written: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
