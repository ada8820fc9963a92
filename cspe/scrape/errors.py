# cspe/scrape/errors.py


class ScrapeError(Exception):
    """Base class for every failure that aborts a scrape run."""


class ParseError(ScrapeError, ValueError):
    """An expected structural element is missing from a rendered page."""


class SetCodeError(ScrapeError, ValueError):
    def __init__(self, set_name: str):
        self.set_name = set_name
        super().__init__(f"Set code was not defined in JSON mapper for {set_name}")


class NavigationError(ScrapeError, RuntimeError):
    def __init__(self, url: str, reason: str = ""):
        self.url = url
        msg = f"Could not load {url}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
