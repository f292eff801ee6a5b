"""HTTP transport abstraction for dependency injection and testability."""

import requests

from .config import Config, config
from .logging_config import get_module_logger
from .models import HttpRequest, RawResponse

logger = get_module_logger("transport")


class HttpTransport:
    """
    Sends a single HttpRequest over the network via requests.

    This abstraction enables:
    - Dependency injection for testing
    - Easy mocking in unit tests
    - Centralized HTTP configuration (timeout, User-Agent)

    Transport failures surface as requests.RequestException; the transport
    does not retry and does not inspect status codes.
    """

    def __init__(self, config_obj: Config | None = None):
        """
        Args:
            config_obj: Config object (uses global config if None)
        """
        self.config = config_obj or config

    @property
    def default_timeout(self) -> float | None:
        return self.config.get("transport.timeout_seconds", 60)

    def send(self, request: HttpRequest, timeout: float | None = None) -> RawResponse:
        """
        Send a request and collect the full response body.

        Args:
            request: The request to send
            timeout: Request timeout in seconds (defaults to transport.timeout_seconds)

        Returns:
            RawResponse with status code, body bytes and headers

        Raises:
            requests.RequestException: On DNS, connection, TLS or timeout failures
        """
        headers = dict(request.headers)
        user_agent = self.config.get("transport.user_agent")
        if user_agent:
            headers.setdefault("User-Agent", user_agent)

        logger.debug(f"{request.method.value} {request.url}")
        response = requests.request(
            request.method.value,
            request.url,
            headers=headers,
            data=request.body,
            timeout=timeout if timeout is not None else self.default_timeout,
        )
        logger.debug(f"{request.method.value} {request.url} -> HTTP {response.status_code}")

        return RawResponse(
            status_code=response.status_code,
            content=response.content or b"",
            headers=dict(response.headers),
        )


# Create a default instance shared by clients that don't inject their own
default_transport = HttpTransport()
