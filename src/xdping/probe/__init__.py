# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Registrar probe exports."""

from .classify import decode_ascii, decode_utf8, format_byte_array, is_continue_response
from .request import (
    CLOSING_BYTE,
    CONTINUE_MARKER,
    REGISTRAR_PATH,
    RESPONSE_WINDOW,
    build_probe_request,
    registrar_url,
)
from .runner import ProbeRunner, run_probe

__all__ = [
    "CLOSING_BYTE",
    "CONTINUE_MARKER",
    "REGISTRAR_PATH",
    "RESPONSE_WINDOW",
    "ProbeRunner",
    "build_probe_request",
    "decode_ascii",
    "decode_utf8",
    "format_byte_array",
    "is_continue_response",
    "registrar_url",
    "run_probe",
]
