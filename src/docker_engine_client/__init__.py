"""Public surface for the Docker Engine Python client."""

from .client import DockerClient, RequestOptions
from .config import DEFAULT_API_VERSION, ClientConfig, config_from_env
from .connection import (
    ConnectionOptions,
    HttpConnection,
    HttpsConnection,
    SocketConnection,
    SshConnection,
    connection_from_env,
    default_socket_connection,
    parse_connection_string,
)
from .errors import (
    ApiError,
    BadRequestError,
    ConflictError,
    ConnectionError,
    ConnectionStringError,
    DockerEngineError,
    NegotiationError,
    NotFoundError,
    ServerError,
    StreamError,
    UnsupportedSchemeError,
)
from .streams import DemuxResult, collect_output, demux_stream
from .transport import HttpTransport, TlsOptions, TransportOptions
from .version import __version__

__all__ = [
    "__version__",
    "ApiError",
    "BadRequestError",
    "ClientConfig",
    "ConflictError",
    "ConnectionError",
    "ConnectionOptions",
    "ConnectionStringError",
    "DEFAULT_API_VERSION",
    "DemuxResult",
    "DockerClient",
    "DockerEngineError",
    "HttpConnection",
    "HttpTransport",
    "HttpsConnection",
    "NegotiationError",
    "NotFoundError",
    "RequestOptions",
    "ServerError",
    "SocketConnection",
    "SshConnection",
    "StreamError",
    "TlsOptions",
    "TransportOptions",
    "UnsupportedSchemeError",
    "collect_output",
    "config_from_env",
    "connection_from_env",
    "default_socket_connection",
    "demux_stream",
    "parse_connection_string",
]
