"""Word count result data model."""
from typing import NamedTuple, Optional


class Result(NamedTuple):
    """Outcome of counting a word on one page.

    `count` is 0 whenever the page could not be fetched. If the body stream
    failed part-way through scanning, `count` holds the partial count and
    `error` holds the read error.
    """
    link: str
    """The URL that was requested"""

    count: int = 0
    """Number of exact-match tokens found"""

    error: Optional[Exception] = None
    """First error encountered, or None"""

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        error = "<nil>" if self.error is None else self.error
        return f"{self.link}\n\tcount: {self.count}\n\terror: {error}"
