# core/exceptions.py
from typing import Optional


class ScraperException(Exception):
    """Base class for every error raised inside the scraper."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url


class FetchError(ScraperException):
    """Transport failure, timeout or non-success HTTP status."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, url)
        self.status_code = status_code


class InvalidMemeUrlError(ScraperException):
    """Raised when a meme URL does not belong to the target site."""

    def __init__(self, url: str, base_url: str):
        super().__init__(f"Not a {base_url} URL: {url!r}", url)
        self.base_url = base_url
