"""Container endpoints.

Parameter mappings use the Engine API's own field names, for example
``{"all": True, "filters": {"status": ["running"]}}`` for :meth:`Containers.list`.
Methods marked as streaming return the open ``httpx.Response``; read it with
``iter_bytes()``/``iter_lines()`` and close it when done.
"""

from __future__ import annotations

import base64
import binascii
import builtins
import json
from typing import Any, Iterable, Mapping

import httpx

from ..query import build_path
from ..types import (
    ArchiveChange,
    ContainerCreateResponse,
    ContainerInspectResponse,
    ContainerPathStat,
    ContainerPruneResponse,
    ContainerSummary,
    ContainerTopResponse,
    ContainerUpdateResponse,
    ContainerWaitResponse,
)
from .base import DockerResource

PATH_STAT_HEADER = "X-Docker-Container-Path-Stat"


class Containers(DockerResource):
    def list(self, params: Mapping[str, Any] | None = None) -> builtins.list[ContainerSummary]:
        """List containers.

        Returns the summary representation, which is smaller than what
        :meth:`inspect` returns for a single container.
        """
        response = self._client.fetch(build_path("/containers/json", params))
        return response.json()

    def create(self, params: Mapping[str, Any]) -> ContainerCreateResponse:
        """Create a container.

        ``Name`` and ``Platform`` travel in the query string; every other key
        is the JSON container configuration.
        """
        body = dict(params)
        query = {"name": body.pop("Name", None), "platform": body.pop("Platform", None)}
        response = self._client.fetch(
            build_path("/containers/create", query),
            method="POST",
            json_body=body,
        )
        return response.json()

    def inspect(self, container_id: str, params: Mapping[str, Any] | None = None) -> ContainerInspectResponse:
        response = self._client.fetch(build_path(f"/containers/{container_id}/json", params))
        return response.json()

    def top(self, container_id: str, params: Mapping[str, Any] | None = None) -> ContainerTopResponse:
        """List processes running inside a container (not supported on Windows)."""
        response = self._client.fetch(build_path(f"/containers/{container_id}/top", params))
        return response.json()

    def logs(
        self,
        container_id: str,
        params: Mapping[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Stream ``stdout``/``stderr`` logs.

        Without a TTY the body uses the multiplexed frame format; decode it with
        :func:`docker_engine_client.streams.demux_stream`.
        """
        return self._client.fetch(
            build_path(f"/containers/{container_id}/logs", params),
            timeout=timeout,
            stream=True,
        )

    def changes(self, container_id: str) -> builtins.list[ArchiveChange]:
        """Filesystem changes; ``Kind`` is 0 modified, 1 added, 2 deleted."""
        response = self._client.fetch(f"/containers/{container_id}/changes")
        return self._decode(response) or []

    def export(self, container_id: str) -> httpx.Response:
        """Stream the container filesystem as a tarball."""
        return self._client.fetch(f"/containers/{container_id}/export", stream=True)

    def stats(self, container_id: str, params: Mapping[str, Any] | None = None) -> httpx.Response:
        """Stream resource usage statistics, one JSON document per line."""
        return self._client.fetch(build_path(f"/containers/{container_id}/stats", params), stream=True)

    def resize(self, container_id: str, params: Mapping[str, Any] | None = None) -> None:
        self._client.fetch(build_path(f"/containers/{container_id}/resize", params), method="POST")

    def start(self, container_id: str, params: Mapping[str, Any] | None = None) -> None:
        self._client.fetch(build_path(f"/containers/{container_id}/start", params), method="POST")

    def stop(self, container_id: str, params: Mapping[str, Any] | None = None) -> None:
        self._client.fetch(build_path(f"/containers/{container_id}/stop", params), method="POST")

    def restart(self, container_id: str, params: Mapping[str, Any] | None = None) -> None:
        self._client.fetch(build_path(f"/containers/{container_id}/restart", params), method="POST")

    def kill(self, container_id: str, params: Mapping[str, Any] | None = None) -> None:
        """Send a POSIX signal, ``SIGKILL`` unless ``params["signal"]`` says otherwise."""
        self._client.fetch(build_path(f"/containers/{container_id}/kill", params), method="POST")

    def update(self, container_id: str, params: Mapping[str, Any]) -> ContainerUpdateResponse:
        """Change resource limits and restart policy without recreating the container."""
        response = self._client.fetch(
            f"/containers/{container_id}/update",
            method="POST",
            json_body=dict(params),
        )
        return response.json()

    def rename(self, container_id: str, name: str) -> None:
        self._client.fetch(build_path(f"/containers/{container_id}/rename", {"name": name}), method="POST")

    def pause(self, container_id: str) -> None:
        self._client.fetch(f"/containers/{container_id}/pause", method="POST")

    def unpause(self, container_id: str) -> None:
        self._client.fetch(f"/containers/{container_id}/unpause", method="POST")

    def attach(self, container_id: str, params: Mapping[str, Any] | None = None) -> httpx.Response:
        """Attach to a container's output.

        Either ``stream`` or ``logs`` must be true in ``params`` for the daemon
        to send anything. The connection upgrade is requested, but only the
        output direction is exposed through the returned response.
        """
        return self._client.fetch(
            build_path(f"/containers/{container_id}/attach", params),
            method="POST",
            stream=True,
            upgrade=True,
        )

    def attach_websocket(self, container_id: str, params: Mapping[str, Any] | None = None) -> httpx.Response:
        return self._client.fetch(
            build_path(f"/containers/{container_id}/attach/ws", params),
            method="POST",
            stream=True,
        )

    def wait(self, container_id: str, params: Mapping[str, Any] | None = None) -> ContainerWaitResponse:
        """Block until the container stops and return its exit status."""
        response = self._client.fetch(
            build_path(f"/containers/{container_id}/wait", params),
            method="POST",
        )
        return self._decode(response)

    def delete(self, container_id: str, params: Mapping[str, Any] | None = None) -> None:
        self._client.fetch(build_path(f"/containers/{container_id}", params), method="DELETE")

    def archive(self, container_id: str, params: Mapping[str, Any]) -> httpx.Response:
        """Stream a tar archive of ``params["path"]`` inside the container."""
        return self._client.fetch(build_path(f"/containers/{container_id}/archive", params), stream=True)

    def archive_info(self, container_id: str, params: Mapping[str, Any]) -> ContainerPathStat | None:
        """Stat a path inside the container.

        The daemon answers a HEAD request with the base64-encoded JSON stat in
        the ``X-Docker-Container-Path-Stat`` header. Returns ``None`` when the
        header is missing or cannot be decoded.
        """
        response = self._client.fetch(
            build_path(f"/containers/{container_id}/archive", params),
            method="HEAD",
        )
        info = response.headers.get(PATH_STAT_HEADER)
        if not info:
            return None
        try:
            return json.loads(base64.b64decode(info))
        except (binascii.Error, ValueError):
            return None

    def put_archive(
        self, container_id: str, params: Mapping[str, Any], data: bytes | Iterable[bytes]
    ) -> None:
        """Extract the tar archive ``data`` into the directory ``params["path"]``.

        ``data`` may be bytes or an iterable of chunks, so a large archive can
        be streamed from disk.

        The daemon answers 400 "not a directory" when the path is a file.
        """
        self._client.fetch(
            build_path(f"/containers/{container_id}/archive", params),
            method="PUT",
            headers={"Content-Type": "application/x-tar"},
            content=data,
        )

    def prune(self, params: Mapping[str, Any] | None = None) -> ContainerPruneResponse:
        """Delete stopped containers."""
        response = self._client.fetch(build_path("/containers/prune", params), method="POST")
        return response.json()


__all__ = ["Containers"]
