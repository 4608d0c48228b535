# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Stream connection abstraction and factory."""

from __future__ import annotations

import socket
from collections.abc import Callable
from typing import Protocol


class Connection(Protocol):
    """Minimal protocol for the socket operations a probe performs."""

    def sendall(self, data: bytes) -> None: ...

    def recv(self, bufsize: int) -> bytes: ...

    def settimeout(self, value: float | None) -> None: ...

    def close(self) -> None: ...


Connector = Callable[[str, int, float | None], Connection]


def open_tcp_connection(host: str, port: int, timeout: float | None = None) -> Connection:
    """Open a blocking TCP stream socket to ``host:port``."""
    return socket.create_connection((host, port), timeout=timeout)


def create_default_connector() -> Connector:
    """Factory for the default socket-backed connector."""
    return open_tcp_connection
