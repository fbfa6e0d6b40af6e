"""Whitespace tokenizer and exact-match word counter for streamed bodies."""
import codecs
import logging
import re
from typing import Iterable, Iterator, Optional, Tuple, Union

from spinarak.exceptions import TokenTooLongError

logger = logging.getLogger(__name__)

# Longest single token the scanner will buffer before giving up.
MAX_TOKEN_SIZE = 64 * 1024

# Unicode White_Space characters; ASCII control separators \x1c-\x1f are not included.
_SPACE = "[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]"
_SPACE_RUN = re.compile(_SPACE + "+")
_SPACE_CHAR = re.compile(_SPACE)

Chunk = Union[bytes, bytearray, str]


def _decode_chunks(stream: Iterable[Chunk]) -> Iterator[str]:
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    for chunk in stream:
        text = decoder.decode(chunk) if isinstance(chunk, (bytes, bytearray)) else chunk
        if text:
            yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def iter_tokens(stream: Iterable[Chunk], max_token_size: int = MAX_TOKEN_SIZE) -> Iterator[str]:
    """Yield whitespace-delimited tokens from a stream of text or byte chunks.

    Tokens that straddle chunk boundaries are stitched back together, so only
    the trailing partial token is held between chunks. Raises
    `TokenTooLongError` when a token grows past `max_token_size`.
    """
    partial = ""
    for text in _decode_chunks(stream):
        buf = partial + text
        tokens = [t for t in _SPACE_RUN.split(buf) if t]
        if tokens and not _SPACE_CHAR.fullmatch(buf[-1]):
            partial = tokens.pop()
        else:
            partial = ""
        for token in tokens:
            if len(token) > max_token_size:
                raise TokenTooLongError(max_token_size)
            yield token
        if len(partial) > max_token_size:
            raise TokenTooLongError(max_token_size)
    if partial:
        yield partial


def count_occurrences(
    word: str,
    stream: Iterable[Chunk],
    max_token_size: int = MAX_TOKEN_SIZE,
) -> Tuple[int, Optional[Exception]]:
    """Count tokens in `stream` exactly equal to `word`.

    Returns the count and the first read error, if any. On error the count
    covers everything scanned before the failure.
    """
    count = 0
    try:
        for token in iter_tokens(stream, max_token_size):
            if token == word:
                count += 1
    except OSError as e:
        logger.debug("Scan stopped after %d matches: %s", count, e)
        return count, e
    return count, None
