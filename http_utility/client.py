"""
HttpClient: request, attach token, decode JSON into a declared type

Each request runs on the client's worker pool and completes exactly once with a
Result. Transport and decode failures never raise out of the client; they come
back as Result.failure(NetworkError). Caller mistakes (unknown method, POST
without body) raise ValueError before anything is submitted.
"""

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, TypeVar

from .config import Config, config
from .decoding import JsonDecoder
from .exceptions import DecodeError, TransportError
from .logging_config import get_module_logger
from .models import HttpMethod, HttpRequest, RawResponse, Result
from .transport import HttpTransport, default_transport

logger = get_module_logger("client")

T = TypeVar("T")

Completion = Callable[[Result[Any]], None]

EMPTY_BODY_REASON = "empty response body"


class HttpClient:
    """
    Thin JSON-over-HTTP client with an optional bearer token.

    The token is sent verbatim as the ``authorization`` header. Response bodies
    are decoded with the decoder given at construction, or a default
    JsonDecoder (ISO-8601 dates). Token and decoder are fixed for the client's
    lifetime, so one instance can be shared across threads.

    Usage:
        client = HttpClient(token="secret")

        future = client.get("https://api.example.com/posts/1", Post)
        result = future.result()
        if result.is_success:
            post = result.value

        # or with a completion callback (runs on a worker thread)
        client.post(url, body=b'{"title": "hi"}', result_type=Post, completion=handle)
    """

    def __init__(
        self,
        token: str | None = None,
        decoder: JsonDecoder | None = None,
        *,
        transport: HttpTransport | None = None,
        config_obj: Config | None = None,
        max_workers: int | None = None,
    ):
        """
        Initialize the client

        Args:
            token: Bearer token sent as the authorization header (optional)
            decoder: Custom JSON decoder, e.g. with a different date strategy (optional)
            transport: Transport used to send requests (uses default if None)
            config_obj: Config object (uses global config if None)
            max_workers: Worker threads (defaults to client.executor.max_workers)
        """
        self._token = token
        self._decoder = decoder
        self.transport = transport or default_transport
        self.config = config_obj or config

        if max_workers is None:
            max_workers = self.config.get("client.executor.max_workers", 8)
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=self.config.get(
                "client.executor.thread_name_prefix", "http-utility"
            ),
        )

    @classmethod
    def with_json_decoder(cls, decoder: JsonDecoder, **kwargs) -> "HttpClient":
        """Build a client without a token that decodes with ``decoder``"""
        return cls(decoder=decoder, **kwargs)

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def decoder(self) -> JsonDecoder | None:
        return self._decoder

    def request(
        self,
        url: str,
        method: HttpMethod | str,
        result_type: type[T],
        body: bytes | None = None,
        completion: Completion | None = None,
    ) -> "Future[Result[T]]":
        """
        Send a request without blocking and decode the response into ``result_type``

        Args:
            url: Target URL
            method: GET, POST, PUT or DELETE (member or case-insensitive name)
            result_type: Type the JSON body is decoded into
            body: Raw JSON body; required for POST, optional for PUT
            completion: Called once with the Result, on a worker thread

        Returns:
            Future resolving to the Result

        Raises:
            ValueError: Unknown method, POST without body, or body on GET/DELETE
        """
        http_request = HttpRequest(
            method=HttpMethod.coerce(method), url=url, body=body, token=self._token
        )
        logger.debug(f"Submitting {http_request.method.value} {url}")

        future = self._executor.submit(self._perform, http_request, result_type)
        if completion is not None:
            future.add_done_callback(lambda done: completion(done.result()))
        return future

    def get(
        self, url: str, result_type: type[T], completion: Completion | None = None
    ) -> "Future[Result[T]]":
        """Make a GET request."""
        return self.request(url, HttpMethod.GET, result_type, completion=completion)

    def post(
        self,
        url: str,
        body: bytes,
        result_type: type[T],
        completion: Completion | None = None,
    ) -> "Future[Result[T]]":
        """Make a POST request. The body is sent as application/json."""
        return self.request(url, HttpMethod.POST, result_type, body=body, completion=completion)

    def put(
        self,
        url: str,
        result_type: type[T],
        body: bytes | None = None,
        completion: Completion | None = None,
    ) -> "Future[Result[T]]":
        """Make a PUT request, with an optional JSON body."""
        return self.request(url, HttpMethod.PUT, result_type, body=body, completion=completion)

    def delete(
        self, url: str, result_type: type[T], completion: Completion | None = None
    ) -> "Future[Result[T]]":
        """Make a DELETE request."""
        return self.request(url, HttpMethod.DELETE, result_type, completion=completion)

    def _create_json_decoder(self) -> JsonDecoder:
        return self._decoder if self._decoder is not None else JsonDecoder()

    def _perform(self, request: HttpRequest, result_type: type[T]) -> Result[T]:
        try:
            response = self.transport.send(request)
        except Exception as e:
            reason = str(e) or type(e).__name__
            logger.warning(f"{request.method.value} {request.url} failed: {reason}")
            return Result.failure(TransportError(reason))

        if not response.content:
            logger.warning(
                f"{request.method.value} {request.url} returned no body "
                f"(HTTP {response.status_code})"
            )
            return Result.failure(TransportError(EMPTY_BODY_REASON, response.status_code))

        return self._decode(request, response, result_type)

    def _decode(
        self, request: HttpRequest, response: RawResponse, result_type: type[T]
    ) -> Result[T]:
        try:
            value = self._create_json_decoder().decode(response.content, result_type)
        except Exception as e:
            logger.debug(f"Decoding {request.url} as {result_type!r} failed: {e}")
            error = DecodeError(status_code=response.status_code, detail=str(e))
            error.__cause__ = e
            return Result.failure(error)

        return Result.success(value)

    def close(self) -> None:
        """Stop the worker pool after in-flight requests finish."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()
