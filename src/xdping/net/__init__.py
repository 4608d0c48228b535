# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Socket connection exports."""

from .connection import Connection, Connector, create_default_connector, open_tcp_connection

__all__ = [
    "Connection",
    "Connector",
    "create_default_connector",
    "open_tcp_connection",
]
