"""Decoding of the multiplexed stdout/stderr stream format.

Containers without a TTY send ``logs``, ``attach`` and exec output as frames:
an 8-byte header (stream id, three zero bytes, big-endian uint32 payload
length) followed by the payload.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterable, Iterator

from .errors import StreamError

HEADER_SIZE = 8

STDIN = 0
STDOUT = 1
STDERR = 2


@dataclass
class DemuxResult:
    stdout: bytes = b""
    stderr: bytes = b""

    def stdout_text(self, encoding: str = "utf-8") -> str:
        return self.stdout.decode(encoding, errors="replace")

    def stderr_text(self, encoding: str = "utf-8") -> str:
        return self.stderr.decode(encoding, errors="replace")


def parse_stream_header(header: bytes) -> tuple[int, int]:
    if len(header) != HEADER_SIZE:
        raise StreamError(f"Stream header must be {HEADER_SIZE} bytes, got {len(header)}")
    stream_id, length = struct.unpack(">BxxxL", header)
    if stream_id not in (STDIN, STDOUT, STDERR):
        raise StreamError(f"Unknown stream id {stream_id}")
    return stream_id, length


def demux_stream(chunks: Iterable[bytes]) -> Iterator[tuple[int, bytes]]:
    """Yield ``(stream_id, payload)`` frames from arbitrarily split chunks.

    Use with ``response.iter_bytes()`` on a streamed response.
    """
    buf = bytearray()
    for chunk in chunks:
        buf.extend(chunk)
        while len(buf) >= HEADER_SIZE:
            stream_id, length = parse_stream_header(bytes(buf[:HEADER_SIZE]))
            frame_size = HEADER_SIZE + length
            if len(buf) < frame_size:
                break
            payload = bytes(buf[HEADER_SIZE:frame_size])
            del buf[:frame_size]
            if payload:
                yield stream_id, payload
    if buf:
        raise StreamError(f"Stream ended inside a frame ({len(buf)} bytes left)")


def collect_output(chunks: Iterable[bytes]) -> DemuxResult:
    stdout = bytearray()
    stderr = bytearray()
    for stream_id, payload in demux_stream(chunks):
        if stream_id == STDERR:
            stderr.extend(payload)
        else:
            stdout.extend(payload)
    return DemuxResult(stdout=bytes(stdout), stderr=bytes(stderr))


__all__ = [
    "DemuxResult",
    "HEADER_SIZE",
    "STDERR",
    "STDIN",
    "STDOUT",
    "collect_output",
    "demux_stream",
    "parse_stream_header",
]
