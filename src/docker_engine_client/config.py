"""Explicit client configuration, optionally read from the environment."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from typing import Mapping

from .connection import ConnectionOptions, HttpsConnection, connection_from_env
from .logger import LogLevel

DEFAULT_API_VERSION = "1.48"
DEFAULT_TIMEOUT = 60.0


@dataclass
class ClientConfig:
    connection: ConnectionOptions
    version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    default_headers: Mapping[str, str] = field(default_factory=dict)
    log_level: LogLevel = "info"


def config_from_env(
    environ: Mapping[str, str] | None = None,
    *,
    platform: str | None = None,
) -> ClientConfig:
    """Build a :class:`ClientConfig` from the standard Docker variables.

    ``DOCKER_HOST`` selects the connection, ``DOCKER_API_VERSION`` the initial
    API version and ``DOCKER_CERT_PATH`` the directory holding ``ca.pem``,
    ``cert.pem`` and ``key.pem`` for TLS connections.
    """
    env = os.environ if environ is None else environ
    connection = connection_from_env(env, platform=platform)

    cert_path = (env.get("DOCKER_CERT_PATH") or "").strip()
    if cert_path and isinstance(connection, HttpsConnection):
        connection = dataclasses.replace(
            connection,
            ca=connection.ca or os.path.join(cert_path, "ca.pem"),
            cert=connection.cert or os.path.join(cert_path, "cert.pem"),
            key=connection.key or os.path.join(cert_path, "key.pem"),
        )

    version = (env.get("DOCKER_API_VERSION") or "").strip() or DEFAULT_API_VERSION
    return ClientConfig(connection=connection, version=version)


__all__ = ["ClientConfig", "DEFAULT_API_VERSION", "DEFAULT_TIMEOUT", "config_from_env"]
