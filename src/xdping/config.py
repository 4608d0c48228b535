# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for XDPing."""

import os
from dataclasses import dataclass

from .errors import UsageError
from .models.target import DEFAULT_PORT, Target


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


@dataclass
class ProbeSettings:
    """Socket timing defaults."""

    connect_timeout: float = 10.0
    receive_timeout_ms: int = 5000

    @property
    def receive_timeout(self) -> float:
        return self.receive_timeout_ms / 1000.0

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        connect_timeout = _float_env("XDPING_CONNECT_TIMEOUT", cls.connect_timeout)
        if connect_timeout <= 0:
            connect_timeout = cls.connect_timeout
        receive_timeout_ms = _int_env("XDPING_RECEIVE_TIMEOUT_MS", cls.receive_timeout_ms)
        if receive_timeout_ms <= 0:
            receive_timeout_ms = cls.receive_timeout_ms
        return cls(
            connect_timeout=connect_timeout,
            receive_timeout_ms=receive_timeout_ms,
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()


@dataclass
class ProbeConfig:
    """Caller input for a single probe, validated once into a Target."""

    delivery_controller: str | None = None
    port: int | str = DEFAULT_PORT

    def to_target(self) -> Target:
        host = (self.delivery_controller or "").strip()
        if not host:
            raise UsageError("A Delivery Controller or Cloud Connector name is required")

        port = self.port
        if isinstance(port, str):
            try:
                port = int(port.strip())
            except ValueError:
                raise UsageError(f"Port must be a number between 1 and 65535, got {self.port!r}") from None
        return Target(host=host, port=port)
