# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe target model."""

from dataclasses import dataclass

from ..errors import UsageError

DEFAULT_PORT = 80


@dataclass(frozen=True)
class Target:
    host: str
    port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        if not isinstance(self.host, str) or not self.host:
            raise UsageError("Target host must be a non-empty string")
        if isinstance(self.port, bool) or not isinstance(self.port, int) or not 1 <= self.port <= 65535:
            raise UsageError(f"Port must be a number between 1 and 65535, got {self.port!r}")

    @property
    def authority(self) -> str:
        return f"{self.host}:{self.port}"
