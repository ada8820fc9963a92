# cspe/scripts/print_artifact.py

import sys
from pathlib import Path

from cspe.config.scraper import ScraperConfig
from cspe.storage.artifact import latest_artifact, read_artifact


def print_cards(path: Path) -> None:
    cards = read_artifact(path)

    print("\n" + "=" * 100)
    print(f"ARTIFACT: {path.name} ({len(cards)} cards)")
    print("=" * 100)

    if not cards:
        print("(no cards)")
        return

    print(f"{'SET':6}  {'CARD':50}  {'PRICE':>10}  {'FOIL':>10}  {'FOIL ONLY'}")
    print("-" * 100)

    for c in cards:
        name = c.name if len(c.name) <= 50 else c.name[:47] + "..."
        print(f"{c.set_code:6}  {name:50}  {c.price1 or '-':>10}  {c.price2 or '-':>10}  {'yes' if c.is_only_foil else ''}")


def main() -> None:
    if len(sys.argv) > 1:
        path = Path(sys.argv[1])
    else:
        path = latest_artifact(ScraperConfig().output_dir)

    if path is None or not path.exists():
        print("No scrape artifact found.")
        return

    print(f"Artifact: {path.resolve()}")
    print_cards(path)


if __name__ == "__main__":
    main()
