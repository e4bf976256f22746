"""Shared pytest fixtures and test doubles for tfctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from tfctl.config.settings import TfSettings
from tfctl.domain.commands import GetDenomResponse
from tfctl.domain.errors import InvalidAddress, ResolverError
from tfctl.infrastructure.host import ContractHost
from tfctl.plugins.manager import PluginManager
from tfctl.services.telemetry import _current_span, disable_telemetry

# Bech32-shaped addresses under the default "cosmos" prefix.
CREATOR = "cosmos1qypqxpq9qcrsszg2pvxq6rs0zqg3yyc5lzv7xu"
RECIPIENT = "cosmos1xqcrsszg2pvxq6rs0zqg3yyc5lzv7xuqypqxp9"
CONTRACT = "cosmos14hj2tavq8fpesdwxxcu44rty3hh90vhujrvcmstl4zr3txmfvw9s4hmalr"
DENOM = f"factory/{CREATOR}/sun"


class EchoResolver:
    """Resolves any (creator, subdenom), except an empty creator."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def resolve(self, creator_address: str, subdenom: str) -> GetDenomResponse:
        self.calls.append((creator_address, subdenom))
        if creator_address == "":
            raise ResolverError("invalid creator address")
        return GetDenomResponse(denom=f"factory/{creator_address}/{subdenom}")


class RejectingResolver:
    def __init__(self, message: str = "denom does not exist") -> None:
        self.message = message

    def resolve(self, creator_address: str, subdenom: str) -> GetDenomResponse:
        raise ResolverError(self.message, creator_address=creator_address, subdenom=subdenom)


class AcceptAllAddresses:
    def __init__(self) -> None:
        self.seen: list[str] = []

    def validate(self, address: str) -> None:
        self.seen.append(address)


class RejectAllAddresses:
    def validate(self, address: str) -> None:
        raise InvalidAddress(address, "rejected by test double")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's TFCTL_* environment out of every test."""
    for key in list(os.environ):
        if key.startswith("TFCTL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() so handlers never outlive a CliRunner stream."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray tfctl.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> TfSettings:
    """Default settings with no config file in reach."""
    return TfSettings.from_cli(config_path=str(tmp_path / "absent.toml"), cwd=tmp_path)


@pytest.fixture
def host(settings: TfSettings) -> ContractHost:
    """Host wired with the real local resolver and bech32 validator, no plugins."""
    return ContractHost(settings, plugins=PluginManager())
