# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import threading

import pytest

from xdping.config import ProbeSettings
from xdping.models import ProbeOutcome, ProbeStep
from xdping.probe import run_probe


class OneShotServer:
    """Accepts one connection, answers the header block, then reads the body byte."""

    def __init__(self, reply: bytes):
        self.reply = reply
        self.headers = b""
        self.body = b""
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._listener.bind(("127.0.0.1", 0))
        self._listener.listen(1)
        self._listener.settimeout(10)
        self.port = self._listener.getsockname()[1]
        self._thread = threading.Thread(target=self._serve, daemon=True)

    def __enter__(self):
        self._thread.start()
        return self

    def __exit__(self, *_):
        self._thread.join(timeout=10)
        self._listener.close()

    def _serve(self):
        conn, _ = self._listener.accept()
        with conn:
            conn.settimeout(10)
            while b"\r\n\r\n" not in self.headers:
                chunk = conn.recv(1024)
                if not chunk:
                    return
                self.headers += chunk
            conn.sendall(self.reply)
            self.body = conn.recv(1)


def test_loopback_continue_is_healthy():
    with OneShotServer(b"HTTP/1.1 100 Continue\r\n\r\n") as server:
        result = run_probe("127.0.0.1", server.port, settings=ProbeSettings(connect_timeout=5))

    assert result.outcome == ProbeOutcome.HEALTHY
    assert server.headers.startswith(b"POST http://127.0.0.1:%d/Citrix/CdsController/IRegistrar HTTP/1.1\r\n" % server.port)
    assert b"Expect: 100-continue\r\n" in server.headers
    assert server.body == b" "
    assert result.transcript[-1] == "- Socket closed"


def test_loopback_error_status_is_unhealthy():
    with OneShotServer(b"HTTP/1.1 400 Bad Request\r\nContent-Length: 0\r\n\r\n") as server:
        result = run_probe("127.0.0.1", server.port, settings=ProbeSettings(connect_timeout=5))

    assert result.outcome == ProbeOutcome.UNHEALTHY
    assert result.response == b"HTTP/1.1 400 Bad Requ"


@pytest.fixture
def closed_port():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_nothing_listening_is_connection_failed(closed_port):
    result = run_probe("127.0.0.1", closed_port, settings=ProbeSettings(connect_timeout=5))

    assert result.outcome == ProbeOutcome.CONNECTION_FAILED
    assert result.healthy is False
    assert result.step(ProbeStep.CONNECT).ok is False
    assert result.transcript[1] == "- Failed to connect to service"
