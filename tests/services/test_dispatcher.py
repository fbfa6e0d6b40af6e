import io
import threading
from collections import Counter

import pytest

from spinarak.domain.result import Result
from spinarak.domain.run_config import RunConfig
from spinarak.services.dispatcher import Dispatcher


class _CountingFetcher:
    """Reports the number of "x" characters in the URL as the count."""

    def __init__(self):
        self.calls = Counter()
        self._lock = threading.Lock()

    def count_word(self, url, word):
        with self._lock:
            self.calls[url] += 1
        return Result(url, url.count("x"), None)


class _RecordingThreadFactory:
    def __init__(self):
        self.threads = []

    def __call__(self, **kwargs):
        t = threading.Thread(**kwargs)
        self.threads.append(t)
        return t


LINKS = ["http://x", "http://xx", "http://xxx", "http://y"]


@pytest.mark.parametrize("num_workers", [1, len(LINKS), len(LINKS) + 5])
def test_dispatch_yields_one_result_per_link(num_workers):
    fetcher = _CountingFetcher()
    results = list(Dispatcher(fetcher).dispatch("w", num_workers, LINKS))

    assert len(results) == len(LINKS)
    assert Counter(results) == Counter(Result(link, link.count("x"), None) for link in LINKS)
    assert fetcher.calls == Counter(LINKS)


def test_dispatch_result_multiset_independent_of_pool_size():
    baseline = Counter(Dispatcher(_CountingFetcher()).dispatch("w", 1, LINKS))
    for n in (2, 8, 32):
        assert Counter(Dispatcher(_CountingFetcher()).dispatch("w", n, LINKS)) == baseline


def test_dispatch_handles_duplicate_links():
    links = ["http://x", "http://x"]
    fetcher = _CountingFetcher()
    results = list(Dispatcher(fetcher).dispatch("w", 2, links))
    assert results == [Result("http://x", 1, None)] * 2
    assert fetcher.calls["http://x"] == 2


def test_dispatch_starts_exactly_num_workers_daemon_threads():
    factory = _RecordingThreadFactory()
    list(Dispatcher(_CountingFetcher(), thread_factory=factory).dispatch("w", 3, LINKS))

    assert len(factory.threads) == 3
    assert all(t.daemon for t in factory.threads)


def test_workers_exit_after_queue_drained():
    factory = _RecordingThreadFactory()
    list(Dispatcher(_CountingFetcher(), thread_factory=factory).dispatch("w", 6, LINKS))

    for t in factory.threads:
        t.join(timeout=5)
        assert not t.is_alive()


def test_workers_run_in_parallel():
    barrier = threading.Barrier(3, timeout=5)

    class _BarrierFetcher:
        def count_word(self, url, word):
            # only passes if all three workers are fetching at the same time
            barrier.wait()
            return Result(url, 0, None)

    results = list(Dispatcher(_BarrierFetcher()).dispatch("w", 3, ["http://a", "http://b", "http://c"]))
    assert all(r.ok for r in results)


@pytest.mark.parametrize(
    "word,num_workers,links",
    [("", 1, ["http://x"]), ("w", 0, ["http://x"]), ("w", 1, [])],
)
def test_dispatch_validates_inputs(word, num_workers, links):
    with pytest.raises(ValueError):
        list(Dispatcher(_CountingFetcher()).dispatch(word, num_workers, links))


def test_run_prints_each_result():
    out = io.StringIO()
    config = RunConfig(word="w", num_workers=2, links=("http://x", "http://y"))

    results = Dispatcher(_CountingFetcher()).run(config, out=out)

    text = out.getvalue()
    assert "http://x\n\tcount: 1\n\terror: <nil>\n" in text
    assert "http://y\n\tcount: 0\n\terror: <nil>\n" in text
    assert len(results) == 2
