# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from xdping.cli import main as cli_main
from xdping.cli.main import USAGE_EXIT_CODE, USAGE_TEXT, build_parser
from xdping.models import ProbeOutcome, ProbeResult, Target


class FakeRunner:
    instances: list["FakeRunner"] = []

    def __init__(self, settings=None, connector=None):  # noqa: ARG002
        self.settings = settings
        self.targets: list[Target] = []
        FakeRunner.instances.append(self)

    def probe(self, target):
        self.targets.append(target)
        return ProbeResult(
            target=target,
            outcome=ProbeOutcome.UNHEALTHY,
            transcript=(
                f"Attempting an XDPing against {target.host} on TCP port number {target.port}",
                "- The service is not listening",
            ),
        )


@pytest.fixture
def fake_runner(monkeypatch):
    FakeRunner.instances = []
    monkeypatch.setattr(cli_main, "ProbeRunner", FakeRunner)
    monkeypatch.setattr(cli_main, "load_probe_settings", lambda: cli_main.ProbeSettings())
    return FakeRunner


def test_build_parser_accepts_all_flag_styles():
    parser = build_parser()
    for flag in ("-deliverycontroller", "--deliverycontroller", "/deliverycontroller"):
        args = parser.parse_args([flag, "dc01"])
        assert args.deliverycontroller == "dc01"
        assert args.port == "80"
    for flag in ("-port", "--port", "/port"):
        args = parser.parse_args(["-deliverycontroller", "dc01", flag, "8080"])
        assert args.port == "8080"


def test_missing_host_prints_usage_and_skips_probe(fake_runner, capsys):
    exit_code = cli_main.main(["-port", "8080"])

    assert exit_code == USAGE_EXIT_CODE == -1
    assert USAGE_TEXT in capsys.readouterr().out
    assert fake_runner.instances == []


def test_invalid_port_is_a_usage_error(fake_runner, capsys):
    exit_code = cli_main.main(["-deliverycontroller", "dc01", "-port", "http"])

    assert exit_code == -1
    assert "Valid command line arguments must be supplied:" in capsys.readouterr().out
    assert fake_runner.instances == []


def test_flag_without_value_is_a_usage_error(fake_runner, capsys):
    assert cli_main.main(["-deliverycontroller"]) == -1
    assert USAGE_TEXT in capsys.readouterr().out


def test_probe_runs_and_unhealthy_still_exits_zero(fake_runner, capsys):
    exit_code = cli_main.main(["/DeliveryController", "dc01.corp.local", "--PORT", "8080"])

    assert exit_code == 0
    (runner,) = fake_runner.instances
    assert runner.targets == [Target("dc01.corp.local", 8080)]
    output = capsys.readouterr().out
    assert "Attempting an XDPing against dc01.corp.local on TCP port number 8080" in output
    assert "- The service is not listening" in output


def test_connect_timeout_override(fake_runner):
    assert cli_main.main(["-deliverycontroller", "dc01", "--connect-timeout", "1.5"]) == 0
    assert fake_runner.instances[0].settings.connect_timeout == 1.5


def test_unknown_arguments_are_ignored(fake_runner):
    assert cli_main.main(["-deliverycontroller", "dc01", "-verbose"]) == 0
    assert fake_runner.instances[0].targets == [Target("dc01", 80)]
