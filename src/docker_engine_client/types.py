"""Shapes of decoded Engine API response bodies.

Only the small, stable bodies are spelled out; large documents such as the
inspect responses stay plain JSON objects.
"""

from __future__ import annotations

from typing import Any, TypedDict

JsonObject = dict[str, Any]

ContainerSummary = JsonObject
ContainerInspectResponse = JsonObject
ExecInspectResponse = JsonObject
SystemInfo = JsonObject
SystemVersion = JsonObject


class IDResponse(TypedDict):
    Id: str


class ContainerCreateResponse(TypedDict):
    Id: str
    Warnings: list[str]


class ContainerUpdateResponse(TypedDict, total=False):
    Warnings: list[str]


class ContainerWaitError(TypedDict, total=False):
    Message: str


class ContainerWaitResponse(TypedDict, total=False):
    StatusCode: int
    Error: ContainerWaitError | None


class ContainerTopResponse(TypedDict, total=False):
    Titles: list[str]
    Processes: list[list[str]]


class ArchiveChange(TypedDict):
    Path: str
    Kind: int


class ContainerPathStat(TypedDict, total=False):
    name: str
    size: int
    mode: int
    mtime: str
    linkTarget: str


class ContainerPruneResponse(TypedDict, total=False):
    ContainersDeleted: list[str] | None
    SpaceReclaimed: int


__all__ = [
    "ArchiveChange",
    "ContainerCreateResponse",
    "ContainerInspectResponse",
    "ContainerPathStat",
    "ContainerPruneResponse",
    "ContainerSummary",
    "ContainerTopResponse",
    "ContainerUpdateResponse",
    "ContainerWaitResponse",
    "ExecInspectResponse",
    "IDResponse",
    "JsonObject",
    "SystemInfo",
    "SystemVersion",
]
