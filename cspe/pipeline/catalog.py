# cspe/pipeline/catalog.py

from __future__ import annotations

from cspe.browser.session import BrowserPage
from cspe.scrape.sources.base import SourceConfig
from cspe.scrape.catalog.parse_catalog import parse_catalog_page, CatalogPage
from cspe.logging.logger import setup_logger

log = setup_logger(__name__)


def run_catalog_pipeline(
    page: BrowserPage,
    source_config: SourceConfig,
) -> CatalogPage:
    log.info("Starting catalog pipeline")
    log.debug("Fetching catalog page: %s", source_config.catalog_link)

    page.goto(source_config.catalog_link)
    html = page.html()

    log.debug("Fetched catalog HTML (%d characters)", len(html))

    catalog_page = parse_catalog_page(
        html=html,
        source_config=source_config,
    )

    log.info(
        "Catalog pipeline finished: %d set links discovered",
        len(catalog_page.set_links),
    )

    return catalog_page
