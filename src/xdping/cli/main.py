# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""XDPing CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from ..config import ProbeConfig, ProbeSettings, load_probe_settings
from ..errors import UsageError
from ..log import setup_logging
from ..models import DEFAULT_PORT
from ..probe import ProbeRunner

logger = logging.getLogger(__name__)

USAGE_EXIT_CODE = -1
USAGE_TEXT = "\n".join(
    [
        "Valid command line arguments must be supplied:",
        "-deliverycontroller, --deliverycontroller or /deliverycontroller is a required flag. "
        "This must be followed by the name of a Delivery Controller or Cloud Connector.",
        "-port, --port or /port is an optional flag. It will default to 80 if not supplied. "
        "This is the port the Broker's Registrar service listens on.",
    ]
)

_DELIVERY_CONTROLLER_FLAGS = ("-deliverycontroller", "--deliverycontroller", "/deliverycontroller")
_PORT_FLAGS = ("-port", "--port", "/port")
_KNOWN_FLAGS = frozenset(_DELIVERY_CONTROLLER_FLAGS + _PORT_FLAGS)


class _UsageArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageArgumentParser(
        prog="xdping",
        description="Check that a Delivery Controller or Cloud Connector Registrar service is healthy",
        prefix_chars="-/",
        allow_abbrev=False,
    )
    parser.add_argument(
        *_DELIVERY_CONTROLLER_FLAGS,
        dest="deliverycontroller",
        metavar="NAME",
        help="Delivery Controller or Cloud Connector to probe",
    )
    parser.add_argument(
        *_PORT_FLAGS,
        dest="port",
        default=str(DEFAULT_PORT),
        metavar="PORT",
        help=f"TCP port of the Broker's Registrar service (default {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--connect-timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Override the TCP connect timeout (XDPING_CONNECT_TIMEOUT)",
    )
    return parser


def _normalize_flags(argv: list[str]) -> list[str]:
    """Lower-case the known flags so ``-DeliveryController`` matches like ``-deliverycontroller``."""
    return [arg.lower() if arg.lower() in _KNOWN_FLAGS else arg for arg in argv]


def _print_usage(message: str | None = None) -> None:
    if message:
        print(message)
    print(USAGE_TEXT)


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    try:
        args, ignored = parser.parse_known_args(_normalize_flags(sys.argv[1:] if argv is None else list(argv)))
        if ignored:
            logger.warning("Ignoring unrecognised arguments: %s", " ".join(ignored))
        target = ProbeConfig(delivery_controller=args.deliverycontroller, port=args.port).to_target()
    except UsageError as exc:
        _print_usage(str(exc))
        return USAGE_EXIT_CODE

    settings: ProbeSettings = load_probe_settings()
    if args.connect_timeout is not None and args.connect_timeout > 0:
        settings.connect_timeout = args.connect_timeout

    result = ProbeRunner(settings=settings).probe(target)
    print(result.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
