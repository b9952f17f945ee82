"""Exec endpoints.

Running a command in a container takes two calls: :meth:`Execs.create` sets
up the exec instance and :meth:`Execs.start` runs it.
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from ..query import build_path
from ..types import ExecInspectResponse, IDResponse
from .base import DockerResource


class Execs(DockerResource):
    def create(self, container_id: str, params: Mapping[str, Any]) -> IDResponse:
        """Create an exec instance in a running container."""
        response = self._client.fetch(
            f"/containers/{container_id}/exec",
            method="POST",
            json_body=dict(params),
        )
        return response.json()

    def start(self, exec_id: str, params: Mapping[str, Any]) -> httpx.Response:
        """Start an exec instance and stream its output.

        With ``Detach`` set the daemon returns right away and the body is empty.
        """
        return self._client.fetch(
            f"/exec/{exec_id}/start",
            method="POST",
            json_body=dict(params),
            stream=True,
        )

    def resize(self, exec_id: str, params: Mapping[str, Any]) -> None:
        self._client.fetch(build_path(f"/exec/{exec_id}/resize", params), method="POST")

    def inspect(self, exec_id: str) -> ExecInspectResponse:
        response = self._client.fetch(f"/exec/{exec_id}/json")
        return response.json()


__all__ = ["Execs"]
