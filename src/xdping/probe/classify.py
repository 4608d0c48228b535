# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response window decoding and health classification."""

from __future__ import annotations

from .request import CONTINUE_MARKER


def decode_ascii(data: bytes) -> str:
    """Decode 7-bit ASCII, rendering anything above 0x7F as ``?``."""
    return "".join(chr(byte) if byte < 0x80 else "?" for byte in data)


def decode_utf8(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def format_byte_array(data: bytes) -> str:
    """Render bytes as upper-case hex pairs joined by dashes (``48-54-54``)."""
    return "-".join(f"{byte:02X}" for byte in data)


def is_continue_response(data: bytes) -> bool:
    """True when the trimmed ASCII text starts with the interim 100 Continue status line."""
    text = decode_ascii(data).strip()
    return text.casefold().startswith(CONTINUE_MARKER.casefold())
