# cspe/scrape/sources/cardsphere.py

from cspe.scrape.sources.base import SourceConfig

CARDSPHERE = SourceConfig(
    source="Cardsphere",
    catalog_path="/sets",
    base_url="https://www.cardsphere.com",
)
