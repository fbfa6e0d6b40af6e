import logging
from contextlib import closing, contextmanager
from typing import Callable, Iterator

import requests

from spinarak.exceptions import HttpFetchError, NonOkStatusError

logger = logging.getLogger(__name__)


class HttpService:
    """
    HTTP client wrapper that streams page bodies.

    Requires http_client callable for dependency injection so tests can
    supply a fake client instead of patching `requests`.
    """

    def __init__(self, http_client: Callable, chunk_size: int = 8192):
        self.http_client = http_client
        self.chunk_size = chunk_size

    @contextmanager
    def open_body(self, url: str) -> Iterator[Iterator[bytes]]:
        """Yield the body of a 200 response as an iterator of byte chunks.

        Raises HttpFetchError on transport failure and NonOkStatusError for
        any status other than 200. The response is closed on every path.
        """
        try:
            resp = self.http_client(url, stream=True)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        with closing(resp):
            if resp.status_code != 200:
                logger.debug("Non-200 status for %s: %s", url, resp.status_code)
                raise NonOkStatusError(url, resp.status_code)
            yield resp.iter_content(chunk_size=self.chunk_size)
