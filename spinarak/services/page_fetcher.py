from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from spinarak.domain.result import Result
from spinarak.exceptions import HttpFetchError, NonOkStatusError
from spinarak.services.http_service import HttpService
from spinarak.services.word_counter import MAX_TOKEN_SIZE, count_occurrences

logger = logging.getLogger(__name__)


class WordFetcher(Protocol):
    """Fetch a URL and report how often a word occurs on it.

    Workers depend only on this so the HTTP-backed fetcher can be swapped
    for a fake in tests.
    """

    def count_word(self, url: str, word: str) -> Result: ...


class PageFetcher:
    def __init__(
        self,
        http_service: HttpService,
        counter: Callable = count_occurrences,
        max_token_size: Optional[int] = None,
    ):
        self._http_service = http_service
        self._counter = counter
        self.max_token_size = max_token_size or MAX_TOKEN_SIZE

    def count_word(self, url: str, word: str) -> Result:
        try:
            with self._http_service.open_body(url) as body:
                count, scan_err = self._counter(word, body, max_token_size=self.max_token_size)
        except (HttpFetchError, NonOkStatusError) as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            return Result(url, 0, e)

        if scan_err is not None:
            logger.warning("Scan of %s stopped after %d matches: %s", url, count, scan_err)
        else:
            logger.debug("Counted %d x %r on %s", count, word, url)
        return Result(url, count, scan_err)
