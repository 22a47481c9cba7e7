"""Wire format spoken with the leaderboard server.

Every message is a frame: a big-endian 32-bit length followed by that many
bytes of strings, each string being a 32-bit byte count and UTF-16BE text.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterable

GET_LEADERBOARD = "GET_LEADERBOARD"
ADD_SCORE = "ADD_SCORE"
LEADERBOARD_DATA = "LEADERBOARD_DATA"
OK_ADD_SCORE = "OK_ADD_SCORE"

NULL_STRING_LENGTH = 0xFFFFFFFF
_UINT32 = struct.Struct(">I")


class ProtocolError(ValueError):
    """Raised when received bytes do not follow the wire format."""


@dataclass(frozen=True)
class LeaderboardItem:
    name: str
    score: int


@dataclass(frozen=True)
class Response:
    """A decoded server message; ``payload`` is set for leaderboard data."""

    kind: str
    payload: str | None = None


def encode_string(text: str) -> bytes:
    data = text.encode("utf-16-be")
    return _UINT32.pack(len(data)) + data


def decode_string(data: bytes, offset: int = 0) -> tuple[str, int]:
    """Decode one string at ``offset``; return it with the offset after it."""
    if len(data) - offset < _UINT32.size:
        raise ProtocolError("truncated string length")
    (length,) = _UINT32.unpack_from(data, offset)
    offset += _UINT32.size
    if length == NULL_STRING_LENGTH:
        return "", offset
    if length % 2:
        raise ProtocolError("string byte count is not even")
    end = offset + length
    if end > len(data):
        raise ProtocolError("truncated string data")
    try:
        text = bytes(data[offset:end]).decode("utf-16-be")
    except UnicodeDecodeError as exc:
        raise ProtocolError("invalid UTF-16 string") from exc
    return text, end


def encode_frame(*args: str) -> bytes:
    """Encode the given strings as one length-prefixed frame."""
    body = b"".join(encode_string(text) for text in args)
    return _UINT32.pack(len(body)) + body


def get_leaderboard_request() -> bytes:
    return encode_frame(GET_LEADERBOARD)


def add_score_request(name: str, score: int) -> bytes:
    return encode_frame(f"{ADD_SCORE},{name},{score}")


def _to_uint(text: str) -> int:
    text = text.strip()
    if text.isascii() and text.isdigit():
        value = int(text)
        if value <= 0xFFFFFFFF:
            return value
    return 0


def parse_leaderboard(data: str) -> list[LeaderboardItem]:
    """Parse ``name:score`` entries separated by ``;``.

    Entries without exactly one colon are skipped; unreadable scores count as 0.
    """
    items = []
    for entry in filter(None, data.split(";")):
        parts = entry.split(":")
        if len(parts) == 2:
            items.append(LeaderboardItem(parts[0], _to_uint(parts[1])))
    return items


def rank_items(items: Iterable[LeaderboardItem]) -> list[LeaderboardItem]:
    """Return the items ordered from highest to lowest score."""
    return sorted(items, key=lambda item: item.score, reverse=True)


def _parse_block(block: bytes) -> Response:
    kind, offset = decode_string(block)
    if kind == LEADERBOARD_DATA:
        payload, _ = decode_string(block, offset)
        return Response(kind, payload)
    return Response(kind)


class ResponseDecoder:
    """Incrementally splits a byte stream into server responses."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._block_size: int | None = None

    def feed(self, data: bytes) -> list[Response]:
        """Add received bytes and return every response now complete."""
        self._buffer.extend(data)
        responses = []
        while True:
            if self._block_size is None:
                if len(self._buffer) < _UINT32.size:
                    break
                (self._block_size,) = _UINT32.unpack_from(self._buffer)
                del self._buffer[: _UINT32.size]
            if len(self._buffer) < self._block_size:
                break
            block = bytes(self._buffer[: self._block_size])
            del self._buffer[: self._block_size]
            self._block_size = None
            responses.append(_parse_block(block))
        return responses