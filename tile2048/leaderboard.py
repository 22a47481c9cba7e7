"""TCP client for the leaderboard server."""

from __future__ import annotations

import select
import socket
from typing import Callable

from .protocol import (
    LEADERBOARD_DATA,
    OK_ADD_SCORE,
    LeaderboardItem,
    Response,
    ResponseDecoder,
    add_score_request,
    get_leaderboard_request,
    parse_leaderboard,
    rank_items,
)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
CONNECT_TIMEOUT = 1.5


class LeaderboardClient:
    """Sends scores and leaderboard requests and keeps the last ranking."""

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        timeout: float = CONNECT_TIMEOUT,
    ) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.on_leaderboard: Callable[[list[LeaderboardItem]], None] | None = None
        self.on_score_added: Callable[[], None] | None = None
        self._sock: socket.socket | None = None
        self._decoder = ResponseDecoder()
        self._items: list[LeaderboardItem] = []

    @property
    def connected(self) -> bool:
        return self._sock is not None

    @property
    def items(self) -> list[LeaderboardItem]:
        """The last received leaderboard, highest score first."""
        return list(self._items)

    def connect(self) -> None:
        """Open the connection unless it is already open.

        Raises ConnectionError if the server cannot be reached.
        """
        if self._sock is not None:
            return
        try:
            sock = socket.create_connection((self.host, self.port), self.timeout)
        except OSError as exc:
            raise ConnectionError("Could not connect") from exc
        self._sock = sock
        self._decoder = ResponseDecoder()

    def _send(self, frame: bytes) -> None:
        self.connect()
        assert self._sock is not None
        self._sock.sendall(frame)

    def request_leaderboard(self) -> None:
        self._send(get_leaderboard_request())

    def add_score(self, name: str, score: int) -> None:
        self._send(add_score_request(name, score))

    def poll(self) -> list[Response]:
        """Read whatever has arrived without blocking and handle it."""
        if self._sock is None:
            return []
        chunks = []
        while self._sock is not None:
            readable, _, _ = select.select([self._sock], [], [], 0)
            if not readable:
                break
            chunk = self._sock.recv(4096)
            if not chunk:
                self.close()
                break
            chunks.append(chunk)
        return self.handle_data(b"".join(chunks)) if chunks else []

    def handle_data(self, data: bytes) -> list[Response]:
        """Process received bytes and return the responses they completed."""
        responses = self._decoder.feed(data)
        for response in responses:
            if response.kind == LEADERBOARD_DATA:
                self._items = rank_items(parse_leaderboard(response.payload or ""))
                if self.on_leaderboard is not None:
                    self.on_leaderboard(self.items)
            elif response.kind == OK_ADD_SCORE:
                if self.on_score_added is not None:
                    self.on_score_added()
                self.request_leaderboard()
        return responses

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> LeaderboardClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()