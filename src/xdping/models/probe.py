# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe step and result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..errors import ErrorCategory
from .target import Target


class ProbeOutcome(str, Enum):
    HEALTHY = "HEALTHY"
    UNHEALTHY = "UNHEALTHY"
    CONNECTION_FAILED = "CONNECTION_FAILED"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class ProbeStep(str, Enum):
    CONNECT = "CONNECT"
    SEND = "SEND"
    RECEIVE = "RECEIVE"
    FINALIZE = "FINALIZE"
    CLOSE = "CLOSE"


class ReceiveStatus(str, Enum):
    COMPLETE = "COMPLETE"
    SHORT = "SHORT"
    TIMEOUT = "TIMEOUT"
    ERROR = "ERROR"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one socket operation within a probe."""

    step: ProbeStep
    ok: bool
    error_category: ErrorCategory = ErrorCategory.NONE
    error_message: str | None = None
    error_type: str | None = None
    receive_status: ReceiveStatus | None = None
    bytes_transferred: int = 0

    @classmethod
    def failed(cls, step: ProbeStep, exc: BaseException, category: ErrorCategory, **kwargs) -> StepResult:
        return cls(
            step=step,
            ok=False,
            error_category=category,
            error_message=str(exc),
            error_type=type(exc).__name__,
            **kwargs,
        )


@dataclass(frozen=True)
class ProbeResult:
    """Everything a single probe produced, in the order it happened."""

    target: Target
    outcome: ProbeOutcome
    transcript: tuple[str, ...] = ()
    response: bytes = b""
    steps: tuple[StepResult, ...] = field(default_factory=tuple)

    @property
    def healthy(self) -> bool:
        return self.outcome is ProbeOutcome.HEALTHY

    def step(self, step: ProbeStep) -> StepResult | None:
        return next((item for item in self.steps if item.step is step), None)

    @property
    def receive_status(self) -> ReceiveStatus | None:
        received = self.step(ProbeStep.RECEIVE)
        return received.receive_status if received is not None else None

    def render(self) -> str:
        return "\n".join(self.transcript)
