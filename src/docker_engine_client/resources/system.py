"""System endpoints."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from ..query import build_path
from ..types import SystemInfo, SystemVersion
from .base import DockerResource


class System(DockerResource):
    def ping(self) -> httpx.Response:
        """Ping the daemon.

        The response headers carry ``Api-Version``, which
        :meth:`DockerClient.negotiate_api_version` reads.
        """
        return self._client.fetch("/_ping")

    def events(self, params: Mapping[str, Any] | None = None) -> httpx.Response:
        """Stream real-time events, one JSON document per line."""
        return self._client.fetch(build_path("/events", params), stream=True)

    def info(self) -> SystemInfo:
        response = self._client.fetch("/info")
        return response.json()

    def version(self) -> SystemVersion:
        response = self._client.fetch("/version")
        return response.json()


__all__ = ["System"]
