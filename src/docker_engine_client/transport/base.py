"""Common transport abstractions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Protocol, runtime_checkable

import httpx


@dataclass(frozen=True)
class TlsOptions:
    ca: str | None = None
    cert: str | None = None
    key: str | None = None
    passphrase: str | None = None

    def __repr__(self) -> str:
        passphrase = "'***'" if self.passphrase else "None"
        return f"TlsOptions(ca={self.ca!r}, cert={self.cert!r}, key={self.key!r}, passphrase={passphrase})"


@dataclass(frozen=True)
class TransportOptions:
    """Low-level dialing options: a socket path, TLS material, or neither."""

    socket_path: str | None = None
    tls: TlsOptions | None = None


@runtime_checkable
class Transport(Protocol):
    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | Iterable[bytes] | None = None,
        timeout: float | None = None,
        stream: bool = False,
    ) -> httpx.Response: ...

    def close(self) -> None: ...


__all__ = ["TlsOptions", "Transport", "TransportOptions"]
