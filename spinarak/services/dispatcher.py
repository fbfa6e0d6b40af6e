import logging
import queue
import sys
import threading
from typing import Callable, Iterator, List, Optional, Sequence, TextIO

from spinarak.domain.result import Result
from spinarak.domain.run_config import RunConfig
from spinarak.services.page_fetcher import WordFetcher
from spinarak.services.work_queue import WorkQueue
from spinarak.services.worker import worker

logger = logging.getLogger(__name__)


class Dispatcher:
    """Fans links out to a fixed pool of worker threads and collects their results.

    The dispatcher owns the work queue and the results sink for a single run.
    Both are sized to the number of links, so neither producers nor workers
    ever wait on capacity. Worker threads are daemons and are not joined: they
    exit once the closed queue is drained.
    """

    def __init__(self, fetcher: WordFetcher, thread_factory: Callable[..., threading.Thread] = threading.Thread):
        self.fetcher = fetcher
        self.thread_factory = thread_factory

    def dispatch(self, word: str, num_workers: int, links: Sequence[str]) -> Iterator[Result]:
        """Yield exactly one Result per link, in completion order."""
        if not word:
            raise ValueError("word is required")
        if num_workers < 1:
            raise ValueError("num_workers must be >= 1")
        if not links:
            raise ValueError("at least one link is required")

        work: WorkQueue[str] = WorkQueue(maxsize=len(links))
        sink: "queue.Queue[Result]" = queue.Queue(maxsize=len(links))

        logger.info("Starting %d workers for %d links", num_workers, len(links))
        for i in range(num_workers):
            t = self.thread_factory(
                target=worker,
                args=(word, work, sink, self.fetcher),
                name=f"spinarak-worker-{i}",
                daemon=True,
            )
            t.start()

        for link in links:
            work.put(link)
        work.close()

        for _ in range(len(links)):
            yield sink.get()

    def run(self, config: RunConfig, out: Optional[TextIO] = None) -> List[Result]:
        """Dispatch a RunConfig, printing each Result to `out` as it arrives."""
        out = out if out is not None else sys.stdout
        collected = []
        for result in self.dispatch(config.word, config.num_workers, config.links):
            print(result, file=out, flush=True)
            collected.append(result)
        failed = sum(1 for r in collected if not r.ok)
        logger.info("Finished %d links (%d with errors)", len(collected), failed)
        return collected
