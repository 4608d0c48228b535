# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Single-shot Registrar health probe.

Each socket operation produces a StepResult instead of unwinding through
nested handlers. The steps are folded into one ProbeResult, and the
connection is closed on every path before the result is returned.
"""

from __future__ import annotations

import logging

from ..config import ProbeSettings, load_probe_settings
from ..errors import ErrorCategory, categorize_exception
from ..models import (
    DEFAULT_PORT,
    ProbeOutcome,
    ProbeResult,
    ProbeStep,
    ReceiveStatus,
    StepResult,
    Target,
)
from ..net import Connection, Connector, create_default_connector
from .classify import decode_ascii, decode_utf8, format_byte_array, is_continue_response
from .request import CLOSING_BYTE, RESPONSE_WINDOW, build_probe_request

logger = logging.getLogger(__name__)


def _error_lines(heading: str, exc: BaseException) -> list[str]:
    return [f"- {heading}", f"- ERROR: {exc}"]


class ProbeRunner:
    """Runs one connect, send, receive, classify, close cycle per call."""

    def __init__(self, settings: ProbeSettings | None = None, connector: Connector | None = None):
        self.settings = settings or load_probe_settings()
        self.connector = connector or create_default_connector()

    def probe(self, target: Target) -> ProbeResult:
        transcript = [f"Attempting an XDPing against {target.host} on TCP port number {target.port}"]
        steps: list[StepResult] = []

        try:
            request = build_probe_request(target)
            connection = self.connector(target.host, target.port, self.settings.connect_timeout)
        except OSError as exc:
            logger.debug("Connect to %s failed: %s", target.authority, exc)
            steps.append(StepResult.failed(ProbeStep.CONNECT, exc, categorize_exception(exc)))
            transcript.extend(_error_lines("Failed to connect to service", exc))
            return ProbeResult(target, ProbeOutcome.CONNECTION_FAILED, tuple(transcript), b"", tuple(steps))
        except Exception as exc:  # noqa: BLE001
            logger.debug("Connect to %s raised unexpectedly: %r", target.authority, exc)
            steps.append(StepResult.failed(ProbeStep.CONNECT, exc, ErrorCategory.UNKNOWN_ERROR))
            transcript.extend(_error_lines("Failed with an unexpected error", exc))
            return ProbeResult(target, ProbeOutcome.UNEXPECTED_ERROR, tuple(transcript), b"", tuple(steps))

        steps.append(StepResult(step=ProbeStep.CONNECT, ok=True))
        transcript.append("- Socket connected")
        logger.debug("Connected to %s", target.authority)

        try:
            outcome, response = self._exchange(connection, request, transcript, steps)
        finally:
            self._close(connection, transcript, steps)

        logger.debug("Probe of %s finished: %s", target.authority, outcome.value)
        return ProbeResult(target, outcome, tuple(transcript), response, tuple(steps))

    def _exchange(
        self,
        connection: Connection,
        request: bytes,
        transcript: list[str],
        steps: list[StepResult],
    ) -> tuple[ProbeOutcome, bytes]:
        try:
            connection.sendall(request)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Sending the request failed: %s", exc)
            steps.append(StepResult.failed(ProbeStep.SEND, exc, categorize_exception(exc)))
            transcript.extend(_error_lines("Failed to send the data", exc))
            return ProbeOutcome.UNEXPECTED_ERROR, b""
        steps.append(StepResult(step=ProbeStep.SEND, ok=True, bytes_transferred=len(request)))
        transcript.append("- Sent the data")

        response, received = self._receive(connection)
        steps.append(received)
        transcript.extend(self._describe_receive(received, response))

        steps.append(self._finalize(connection, transcript))

        if is_continue_response(response):
            transcript.append("- The service is listening and healthy")
            return ProbeOutcome.HEALTHY, response
        transcript.append("- The service is not listening")
        return ProbeOutcome.UNHEALTHY, response

    def _receive(self, connection: Connection) -> tuple[bytes, StepResult]:
        """Read the fixed response window, keeping whatever arrived before a stop."""
        buffer = bytearray()
        try:
            connection.settimeout(self.settings.receive_timeout)
            while len(buffer) < RESPONSE_WINDOW:
                chunk = connection.recv(RESPONSE_WINDOW - len(buffer))
                if not chunk:
                    return bytes(buffer), StepResult(
                        step=ProbeStep.RECEIVE,
                        ok=False,
                        error_category=ErrorCategory.CONNECTION_CLOSED,
                        receive_status=ReceiveStatus.SHORT,
                        bytes_transferred=len(buffer),
                    )
                buffer.extend(chunk)
        except TimeoutError as exc:
            logger.debug("Receive timed out with %d bytes", len(buffer))
            return bytes(buffer), StepResult.failed(
                ProbeStep.RECEIVE,
                exc,
                ErrorCategory.TIMEOUT,
                receive_status=ReceiveStatus.TIMEOUT,
                bytes_transferred=len(buffer),
            )
        except Exception as exc:  # noqa: BLE001
            logger.debug("Receive failed with %d bytes: %s", len(buffer), exc)
            return bytes(buffer), StepResult.failed(
                ProbeStep.RECEIVE,
                exc,
                categorize_exception(exc),
                receive_status=ReceiveStatus.ERROR,
                bytes_transferred=len(buffer),
            )
        return bytes(buffer), StepResult(
            step=ProbeStep.RECEIVE,
            ok=True,
            receive_status=ReceiveStatus.COMPLETE,
            bytes_transferred=len(buffer),
        )

    def _describe_receive(self, received: StepResult, response: bytes) -> list[str]:
        lines: list[str] = []
        if received.receive_status is ReceiveStatus.SHORT:
            lines.append(f"- The connection closed after {len(response)} of {RESPONSE_WINDOW} bytes")
        elif received.receive_status is ReceiveStatus.TIMEOUT:
            lines.append(
                f"- Timed out after {self.settings.receive_timeout_ms} ms waiting for the response "
                f"({len(response)} of {RESPONSE_WINDOW} bytes received)"
            )
        elif received.receive_status is ReceiveStatus.ERROR:
            lines.append("- Failed to receive the response")
            lines.append(f"- ERROR: {received.error_message}")

        lines.append(f"- Received the following {len(response)} byte array: {format_byte_array(response)}")
        lines.append(
            "- Converting the byte array to an ASCII string we get the output between the quotes: "
            f'"{decode_ascii(response)}"'
        )
        lines.append(
            "- Converting the byte array to a UTF8 string we get the output between the quotes: "
            f'"{decode_utf8(response)}"'
        )
        return lines

    def _finalize(self, connection: Connection, transcript: list[str]) -> StepResult:
        """Send the single withheld body byte so the peer can finish the exchange."""
        try:
            connection.sendall(CLOSING_BYTE)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Sending the closing byte failed: %s", exc)
            transcript.extend(_error_lines("Failed to send the closing byte", exc))
            return StepResult.failed(ProbeStep.FINALIZE, exc, categorize_exception(exc))
        transcript.append(
            "- Sending the following string as a byte to close the connection: "
            f'"{format_byte_array(CLOSING_BYTE)}"'
        )
        return StepResult(step=ProbeStep.FINALIZE, ok=True, bytes_transferred=len(CLOSING_BYTE))

    def _close(self, connection: Connection, transcript: list[str], steps: list[StepResult]) -> None:
        try:
            connection.close()
        except Exception as exc:  # noqa: BLE001
            logger.debug("Closing the socket failed: %s", exc)
            steps.append(StepResult.failed(ProbeStep.CLOSE, exc, categorize_exception(exc)))
            transcript.extend(_error_lines("Failed to close the socket", exc))
            return
        steps.append(StepResult(step=ProbeStep.CLOSE, ok=True))
        transcript.append("- Socket closed")


def run_probe(
    host: str,
    port: int = DEFAULT_PORT,
    *,
    settings: ProbeSettings | None = None,
    connector: Connector | None = None,
) -> ProbeResult:
    """Validate ``host``/``port`` into a Target and probe it once."""
    return ProbeRunner(settings=settings, connector=connector).probe(Target(host=host, port=port))
