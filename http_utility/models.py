"""
Request/response value types shared by the client and the transport
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from .exceptions import NetworkError

T = TypeVar("T")

AUTHORIZATION_HEADER = "authorization"
CONTENT_TYPE_HEADER = "content-type"
JSON_CONTENT_TYPE = "application/json"


class HttpMethod(str, Enum):
    """Supported HTTP methods"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def coerce(cls, method: "HttpMethod | str") -> "HttpMethod":
        """
        Accept either a member or a case-insensitive method name

        Raises:
            ValueError: If the name is not one of GET/POST/PUT/DELETE
        """
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).upper())
        except ValueError:
            raise ValueError(
                f"Unsupported HTTP method {method!r}; expected one of "
                f"{', '.join(m.value for m in cls)}"
            ) from None


@dataclass(frozen=True)
class HttpRequest:
    """
    A single outbound request, built fresh per call.

    The token (if any) is sent verbatim as the authorization header, and a body
    always implies a JSON content type. POST requires a body; GET and DELETE
    must not have one.
    """

    method: HttpMethod
    url: str
    body: bytes | None = None
    token: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "method", HttpMethod.coerce(self.method))
        if self.method is HttpMethod.POST and self.body is None:
            raise ValueError("POST requests require a body")
        if self.method in (HttpMethod.GET, HttpMethod.DELETE) and self.body is not None:
            raise ValueError(f"{self.method.value} requests do not carry a body")

    @property
    def headers(self) -> dict[str, str]:
        headers = {}
        if self.token is not None:
            headers[AUTHORIZATION_HEADER] = self.token
        if self.body is not None:
            headers[CONTENT_TYPE_HEADER] = JSON_CONTENT_TYPE
        return headers


@dataclass(frozen=True)
class RawResponse:
    """What the transport hands back: status code, body bytes and headers"""

    status_code: int
    content: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a request: a decoded value or a NetworkError, never both.

    A successful result may hold ``None`` when the body legitimately decoded to
    null (e.g. ``result_type=Optional[Item]`` and a ``null`` body).

    Usage:
        result = client.get(url, Item).result()
        if result.is_success:
            item = result.value
        else:
            print(result.error.reason, result.error.status_code)
    """

    value: T | None = None
    error: NetworkError | None = None

    def __post_init__(self):
        if self.error is not None and self.value is not None:
            raise ValueError("Result cannot hold both a value and an error")

    @classmethod
    def success(cls, value: T | None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: NetworkError) -> "Result[T]":
        if error is None:
            raise ValueError("A failed Result needs an error")
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T | None:
        """Return the decoded value, or raise the NetworkError"""
        if self.error is not None:
            raise self.error
        return self.value
