"""httpstat errors."""


class HttpstatError(Exception):
    """Base exception for httpstat errors."""


class UsageError(HttpstatError):
    """Raised when the command line or configuration is invalid."""


class ConfigError(UsageError):
    """Raised when an environment setting cannot be parsed."""


class TransportError(HttpstatError):
    """Raised when the request could not be completed.

    Covers DNS failures, refused connections, TLS failures, timeouts and
    malformed responses. No report is rendered after this error.
    """

    def __init__(self, url: str, cause: str, code: int | None = None) -> None:
        self.url = url
        self.cause = cause
        self.code = code
        super().__init__(f"Request to {url} failed: {cause}")


class BodyPersistenceError(HttpstatError):
    """Raised when the response body cannot be written to its destination."""

    def __init__(self, path: str, cause: str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")
