"""Custom exceptions for spinarak."""


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class NonOkStatusError(Exception):
    """Raised when a response arrives with any status other than 200."""

    message = "did not receive 200 OK"

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(self.message)


class TokenTooLongError(OSError):
    """Raised by the word scanner when a single token exceeds its buffer limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"token too long (limit {limit} characters)")


class QueueClosedError(Exception):
    """Raised when putting work on a queue that has already been closed."""


class UsageError(Exception):
    """Raised when command-line input fails validation."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
