"""Transport configuration and the httpx-backed transport."""

from .base import TlsOptions, Transport, TransportOptions
from .http import HttpTransport
from .options import DUMMY_HOST, configure, create_ssl_context, request_base_url, transport_options

__all__ = [
    "DUMMY_HOST",
    "HttpTransport",
    "TlsOptions",
    "Transport",
    "TransportOptions",
    "configure",
    "create_ssl_context",
    "request_base_url",
    "transport_options",
]
