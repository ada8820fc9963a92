import os
from dataclasses import dataclass, field
from pathlib import Path

# partial hand-made table; real runs point CSPE_SET_CODES at a table keyed on the site's headings
SAMPLE_SET_CODES_PATH = Path(__file__).resolve().parent.parent / "scrape" / "sources" / "setcodes.sample.json"


def default_set_codes_path() -> Path:
    return Path(os.getenv("CSPE_SET_CODES", str(SAMPLE_SET_CODES_PATH)))


@dataclass
class ScraperConfig:
    headless: bool = True
    user_data_dir: str = "data/browser_session"
    settle_delay_s: float = 0.75
    ready_selector: str = ".cards"
    ready_timeout_s: int = 10
    output_dir: Path = Path("data/scraped_data")
    set_codes_path: Path = field(default_factory=default_set_codes_path)
