# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest


class ScriptedConnection:
    """Deterministic Connection for tests.

    ``responses`` is consumed by ``recv``: bytes are returned (split to the
    requested size), exceptions are raised, and an exhausted script reads as EOF.
    ``send_errors`` maps the index of a ``sendall`` call to the exception it raises.
    """

    def __init__(self, responses=(), *, send_errors=None, close_error=None):
        self._responses = list(responses)
        self._send_errors = dict(send_errors or {})
        self._close_error = close_error
        self.sent: list[bytes] = []
        self.send_calls = 0
        self.timeout = None
        self.closed = False
        self.close_calls = 0

    def sendall(self, data):
        index = self.send_calls
        self.send_calls += 1
        if index in self._send_errors:
            raise self._send_errors[index]
        self.sent.append(bytes(data))

    def recv(self, bufsize):
        if not self._responses:
            return b""
        item = self._responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        if len(item) > bufsize:
            self._responses.insert(0, item[bufsize:])
            item = item[:bufsize]
        return item

    def settimeout(self, value):
        self.timeout = value

    def close(self):
        self.close_calls += 1
        if self._close_error is not None:
            raise self._close_error
        self.closed = True


class RecordingConnector:
    def __init__(self, connection=None, error=None):
        self.connection = connection
        self.error = error
        self.calls = []

    def __call__(self, host, port, timeout=None):
        self.calls.append((host, port, timeout))
        if self.error is not None:
            raise self.error
        return self.connection


@pytest.fixture
def scripted_connection():
    return ScriptedConnection


@pytest.fixture
def recording_connector():
    return RecordingConnector
