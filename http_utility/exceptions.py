"""
Custom exceptions for http-utility
"""


class HttpUtilityError(Exception):
    """Base exception for all http-utility errors"""

    pass


class NetworkError(HttpUtilityError):
    """
    Raised (or returned inside a failed Result) when a request does not produce a value.

    Carries a free-text reason and the HTTP status code observed, if any response
    was received at all.
    """

    def __init__(self, reason: str | None = None, status_code: int | None = None):
        self.reason = reason
        self.status_code = status_code

        message = reason or "network error"
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.reason, self.status_code) == (other.reason, other.status_code)

    def __hash__(self) -> int:
        return hash((type(self), self.reason, self.status_code))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(reason={self.reason!r}, status_code={self.status_code!r})"


class TransportError(NetworkError):
    """
    Transport-level failure: DNS, refused connection, TLS, timeout.

    Also used when the server answered without a body.
    """

    pass


class DecodeError(NetworkError):
    """
    Raised when the response body cannot be decoded into the requested type.

    The reason is always "decoding error"; the decoder's own message is kept in
    ``detail`` for diagnostics.
    """

    REASON = "decoding error"

    def __init__(self, *, status_code: int | None = None, detail: str | None = None):
        self.detail = detail
        super().__init__(self.REASON, status_code)


class ConfigurationError(HttpUtilityError):
    """
    Raised when required configuration values are missing or invalid.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
