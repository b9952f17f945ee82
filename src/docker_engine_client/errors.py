"""Custom exceptions raised by the Docker Engine client."""

from __future__ import annotations

from typing import Any, Mapping


class DockerEngineError(Exception):
    """Base error for all client failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class ConnectionStringError(DockerEngineError):
    """Raised when a connection string cannot be parsed."""


class UnsupportedSchemeError(ConnectionStringError):
    """Raised when a connection string uses a scheme the client cannot dial."""

    def __init__(self, scheme: str) -> None:
        super().__init__(f"Unsupported protocol {scheme}:", context=scheme)
        self.scheme = scheme


class ConnectionError(DockerEngineError):
    """Raised when the client cannot reach the daemon."""


class ApiError(DockerEngineError):
    """Raised when the daemon answers with a non-success status."""

    def __init__(
        self,
        path: str,
        status: int,
        message: str,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, context=path)
        self.path = path
        self.status = status
        self.message = message
        self.headers = headers

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, status={self.status}, message={self.message!r})"


class BadRequestError(ApiError):
    """Raised for 400 responses."""


class NotFoundError(ApiError):
    """Raised when the target object does not exist."""


class ConflictError(ApiError):
    """Raised when the request conflicts with the object's state (409)."""


class ServerError(ApiError):
    """Raised for 5xx style failures."""


class NegotiationError(DockerEngineError):
    """Raised while negotiating the API version; never escapes the client."""


class StreamError(DockerEngineError):
    """Raised when a multiplexed stream is malformed."""


_STATUS_ERRORS: dict[int, type[ApiError]] = {
    400: BadRequestError,
    404: NotFoundError,
    409: ConflictError,
}


def api_error_for_status(
    path: str,
    status: int,
    message: str,
    headers: Mapping[str, str] | None = None,
) -> ApiError:
    if status >= 500:
        error_cls: type[ApiError] = ServerError
    else:
        error_cls = _STATUS_ERRORS.get(status, ApiError)
    return error_cls(path, status, message, headers)


__all__ = [
    "ApiError",
    "BadRequestError",
    "ConflictError",
    "ConnectionError",
    "ConnectionStringError",
    "DockerEngineError",
    "NegotiationError",
    "NotFoundError",
    "ServerError",
    "StreamError",
    "UnsupportedSchemeError",
    "api_error_for_status",
]
