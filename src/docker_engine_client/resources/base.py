"""Shared base for the resource method sets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from ..client import DockerClient


class DockerResource:
    """Stateless method set bound to a client; every call goes through ``fetch``."""

    def __init__(self, client: "DockerClient") -> None:
        self._client = client

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        return response.json()


__all__ = ["DockerResource"]
