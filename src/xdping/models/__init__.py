# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for XDPing."""

from .probe import ProbeOutcome, ProbeResult, ProbeStep, ReceiveStatus, StepResult
from .target import DEFAULT_PORT, Target

__all__ = [
    "DEFAULT_PORT",
    "ProbeOutcome",
    "ProbeResult",
    "ProbeStep",
    "ReceiveStatus",
    "StepResult",
    "Target",
]
