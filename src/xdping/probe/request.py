# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Registrar probe request builder.

The request declares a one byte body and asks for ``Expect: 100-continue``,
but the body is withheld. A live Broker answers the headers with the interim
``HTTP/1.1 100 Continue`` status line and then waits for the missing byte.
"""

from __future__ import annotations

from ..models.target import Target

REGISTRAR_PATH = "/Citrix/CdsController/IRegistrar"
CONTINUE_MARKER = "HTTP/1.1 100 Continue"
RESPONSE_WINDOW = 21
CLOSING_BYTE = bytes([32])


def registrar_url(target: Target) -> str:
    return f"http://{target.authority}{REGISTRAR_PATH}"


def build_probe_request(target: Target) -> bytes:
    """Build the header-only POST sent to the Registrar service."""
    lines = [
        f"POST {registrar_url(target)} HTTP/1.1",
        "Content-Type: application/soap+xml; charset=utf-8",
        f"Host: {target.authority}",
        "Content-Length: 1",
        "Expect: 100-continue",
        "Connection: Close",
    ]
    return ("\r\n".join(lines) + "\r\n\r\n").encode("ascii")
