"""HTTP transport built on top of httpx."""

from __future__ import annotations

from typing import Iterable, Mapping

import httpx

from ..errors import ConnectionError
from ..logger import BoundLogger, create_logger
from .base import TransportOptions
from .options import create_ssl_context


class HttpTransport:
    """Sends requests through an ``httpx.Client`` dialed per ``TransportOptions``.

    Socket paths are dialed with httpx's unix-domain-socket support and TLS
    material becomes the client's ``verify`` context.
    """

    def __init__(
        self,
        options: TransportOptions | None = None,
        *,
        timeout: float = 60.0,
        client: httpx.Client | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self.options = options or TransportOptions()
        self._timeout = timeout
        self._client = client or self._create_client(self.options, timeout)
        self._owns_client = client is None
        self._logger = (logger or create_logger()).child("http")

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | Iterable[bytes] | None = None,
        timeout: float | None = None,
        stream: bool = False,
    ) -> httpx.Response:
        body = len(content) if isinstance(content, bytes) else ("stream" if content is not None else 0)
        self._logger.debug("HTTP %s %s body=%s", method, url, body)
        try:
            request = self._client.build_request(
                method,
                url,
                headers=dict(headers or {}),
                content=content,
                timeout=httpx.Timeout(timeout) if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
            response = self._client.send(request, stream=stream)
        except httpx.InvalidURL as exc:
            raise ConnectionError(f"Invalid request URL {url}: {exc}", context=url) from exc
        except httpx.TimeoutException as exc:
            raise ConnectionError(
                f"HTTP request timeout after {timeout or self._timeout}s", context=url
            ) from exc
        except httpx.RequestError as exc:
            raise ConnectionError(f"Cannot connect to {url}: {exc}", context=url) from exc
        self._logger.debug("HTTP <- %s %s status=%s", method, url, response.status_code)
        return response

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    @staticmethod
    def _create_client(options: TransportOptions, timeout: float) -> httpx.Client:
        if options.socket_path:
            return httpx.Client(
                transport=httpx.HTTPTransport(uds=options.socket_path),
                timeout=httpx.Timeout(timeout),
            )
        if options.tls is not None:
            return httpx.Client(
                verify=create_ssl_context(options.tls),
                timeout=httpx.Timeout(timeout),
            )
        return httpx.Client(timeout=httpx.Timeout(timeout))


__all__ = ["HttpTransport"]
