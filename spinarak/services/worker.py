import logging
import queue
import threading

from spinarak.domain.result import Result
from spinarak.services.page_fetcher import WordFetcher
from spinarak.services.work_queue import WorkQueue

logger = logging.getLogger(__name__)


def worker(word: str, links: WorkQueue, results: "queue.Queue[Result]", fetcher: WordFetcher) -> None:
    """Count `word` on every link pulled from `links`, pushing one Result each.

    Returns once `links` is closed and drained. Errors for a single link are
    packed into its Result so the remaining links still get processed.
    """
    name = threading.current_thread().name
    logger.debug("Worker %s started", name)
    processed = 0
    for link in links:
        try:
            result = fetcher.count_word(link, word)
        except Exception as e:
            logger.error("Unexpected error counting %r on %s: %s", word, link, e, exc_info=True)
            result = Result(link, 0, e)
        results.put(result)
        processed += 1
    logger.debug("Worker %s finished after %d links", name, processed)
