# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
XDPing package entrypoint.

This package checks whether a Citrix Delivery Controller or Cloud Connector
is healthy by sending a header-only POST to the Broker's Registrar service and
waiting for the interim ``HTTP/1.1 100 Continue`` reply. Socket access is
abstracted behind an injectable connector, and results are modeled with typed
dataclasses.
"""

from .config import ProbeConfig, ProbeSettings, load_probe_settings
from .errors import ErrorCategory, UsageError
from .log import setup_logging
from .models import ProbeOutcome, ProbeResult, ProbeStep, ReceiveStatus, StepResult, Target
from .net import Connection, Connector, create_default_connector
from .probe import ProbeRunner, build_probe_request, run_probe
from .version import __version__

__all__ = [
    "Connection",
    "Connector",
    "ErrorCategory",
    "ProbeConfig",
    "ProbeOutcome",
    "ProbeResult",
    "ProbeRunner",
    "ProbeSettings",
    "ProbeStep",
    "ReceiveStatus",
    "StepResult",
    "Target",
    "UsageError",
    "build_probe_request",
    "create_default_connector",
    "load_probe_settings",
    "run_probe",
    "setup_logging",
    "__version__",
]
