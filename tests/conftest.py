"""Pytest fixtures for service-manager tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from svcmgr.exceptions import CommandFailedError
from svcmgr.services.brew import BrewBackend
from svcmgr.services.launchd import LaunchdBackend

LAUNCHCTL_LIST_OUTPUT = """PID\tStatus\tLabel
-\t0\tcom.apple.SafariHistoryServiceAgent
123\t0\tcom.apple.WindowServer
456\t-9\tcom.apple.Finder
-\t78\tcom.apple.ReportCrash
this line is not launchctl output
"""

BREW_SERVICES_LIST_OUTPUT = """Name          Status  User  File
postgresql@16 started alice ~/Library/LaunchAgents/homebrew.mxcl.postgresql@16.plist
redis         none
nginx         stopped alice ~/Library/LaunchAgents/homebrew.mxcl.nginx.plist
unbound       error   256   root /Library/LaunchDaemons/homebrew.mxcl.unbound.plist
"""


class FakeRunner:
    """Stand-in for run_command that records calls and returns canned output."""

    def __init__(self, outputs: dict[tuple[str, ...], str] | None = None) -> None:
        self.outputs = outputs or {}
        self.failures: dict[tuple[str, ...], str] = {}
        self.calls: list[list[str]] = []

    def fail(self, args: list[str], stderr: str = "boom") -> None:
        """Make a command exit non-zero."""
        self.failures[tuple(args)] = stderr

    def __call__(self, args: list[str]) -> str:
        self.calls.append(list(args))
        key = tuple(args)
        if key in self.failures:
            raise CommandFailedError(list(args), 1, self.failures[key])
        return self.outputs.get(key, "")


@pytest.fixture
def launchctl_output() -> str:
    """Sample 'launchctl list' output with a header and one garbage line."""
    return LAUNCHCTL_LIST_OUTPUT


@pytest.fixture
def brew_output() -> str:
    """Sample 'brew services list' output."""
    return BREW_SERVICES_LIST_OUTPUT


@pytest.fixture
def runner_factory() -> type[FakeRunner]:
    """Get the FakeRunner class for tests that need their own outputs."""
    return FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Create a runner that knows both list commands.

    Returns:
        FakeRunner with launchctl and brew list output.
    """
    return FakeRunner(
        {
            ("launchctl", "list"): LAUNCHCTL_LIST_OUTPUT,
            ("brew", "services", "list"): BREW_SERVICES_LIST_OUTPUT,
        }
    )


@pytest.fixture
def set_brew_installed(monkeypatch: pytest.MonkeyPatch) -> Callable[[bool], None]:
    """Control whether brew appears to be on PATH.

    Returns:
        Function taking True or False.
    """

    def _set(installed: bool) -> None:
        monkeypatch.setattr(
            "svcmgr.services.brew.command_exists", lambda program: installed
        )

    _set(True)
    return _set


@pytest.fixture
def launchd(fake_runner: FakeRunner) -> LaunchdBackend:
    """Create a launchd backend wired to the fake runner."""
    return LaunchdBackend(runner=fake_runner)


@pytest.fixture
def brew(fake_runner: FakeRunner, set_brew_installed: Callable[[bool], None]) -> BrewBackend:
    """Create a brew backend wired to the fake runner, with brew installed."""
    return BrewBackend(runner=fake_runner)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config discovery at an empty temp location.

    Returns:
        Path of the (not yet existing) config file.
    """
    config_path = tmp_path / "svcmgr" / "config.yaml"
    monkeypatch.setenv("SVCMGR_CONFIG", str(config_path))
    return config_path
