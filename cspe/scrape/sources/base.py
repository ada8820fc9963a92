# cspe/scrape/sources/base.py

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceConfig:
    source: str
    catalog_path: str
    base_url: str

    @property
    def catalog_link(self) -> str:
        return self.resolve(self.catalog_path)

    def resolve(self, path: str) -> str:
        # plain concatenation: site-relative hrefs already start with "/"
        return self.base_url + path
