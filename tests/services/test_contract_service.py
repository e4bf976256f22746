"""Tests for ContractService."""

from __future__ import annotations

from typing import Any

import pytest

from tests.conftest import CONTRACT, CREATOR, DENOM, RECIPIENT
from tfctl.config.settings import TfSettings
from tfctl.domain.actions import burn_self
from tfctl.domain.commands import CreateDenom, GetDenom, GetDenomResponse, MintTokens
from tfctl.infrastructure.host import ContractHost
from tfctl.plugins.hookspecs import hookimpl
from tfctl.plugins.manager import PluginManager
from tfctl.services.contract import ContractService
from tfctl.services.telemetry import enable_telemetry


class _Recorder:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    @hookimpl
    def post_instantiate(self, owner: str, contract: str, version: str) -> None:
        self.events.append(("post_instantiate", {"owner": owner, "contract": contract}))

    @hookimpl
    def post_execute(
        self, method: str, action: dict[str, Any], attributes: list[tuple[str, str]]
    ) -> None:
        self.events.append(("post_execute", {"method": method, "action": action}))

    @hookimpl
    def post_query(self, query: dict[str, Any], response: dict[str, Any]) -> None:
        self.events.append(("post_query", {"query": query, "response": response}))


class _UnreachableResolver:
    def resolve(self, creator_address: str, subdenom: str) -> GetDenomResponse:
        raise ConnectionError("node unreachable")


class _Broken:
    @hookimpl
    def post_execute(
        self, method: str, action: dict[str, Any], attributes: list[tuple[str, str]]
    ) -> None:
        raise RuntimeError("ledger offline")


@pytest.fixture
def recorder(host: ContractHost) -> _Recorder:
    plugin = _Recorder()
    host.plugins.register_plugin(plugin, name="recorder")
    return plugin


class TestInstantiate:
    def test_instantiate(self, host: ContractHost, recorder: _Recorder) -> None:
        result = ContractService(host).instantiate(CREATOR)
        assert result.ok
        assert result.op == "instantiate"
        assert result.data["owner"] == CREATOR
        assert result.data["contract"] == "crates.io:tokenfactory-demo"
        assert result.data["attributes"] == [("method", "instantiate"), ("owner", CREATOR)]
        assert recorder.events[0][0] == "post_instantiate"

    def test_state_after_instantiate(self, host: ContractHost) -> None:
        svc = ContractService(host)
        assert svc.state().data["owner"] is None
        svc.instantiate(CREATOR)
        data = svc.state().data
        assert data["owner"] == CREATOR
        assert data["contract_address"] == CONTRACT


class TestExecute:
    def test_mint_default_recipient(self, host: ContractHost, recorder: _Recorder) -> None:
        result = ContractService(host).execute(MintTokens(denom=DENOM, amount=100))
        assert result.ok, result.error
        assert result.data["method"] == "mint_tokens"
        assert result.data["action"] == {
            "mint_tokens": {"denom": DENOM, "amount": "100", "mint_to_address": CONTRACT}
        }
        assert result.data["attributes"] == [("method", "mint_tokens")]
        assert recorder.events == [
            ("post_execute", {"method": "mint_tokens", "action": result.data["action"]})
        ]

    def test_wire_payload(self, host: ContractHost) -> None:
        result = ContractService(host).execute('{"create_denom": {"subdenom": "sun"}}')
        assert result.ok
        assert result.data["action"] == {"create_denom": {"subdenom": "sun"}}
        assert result.data["requires_burn_from"] is False

    def test_burn_from_flag(self, host: ContractHost) -> None:
        result = ContractService(host).execute(
            {"burn_tokens": {"denom": DENOM, "amount": "5", "burn_from_address": RECIPIENT}}
        )
        assert result.ok
        assert result.data["requires_burn_from"] is True
        assert result.data["action"]["burn_tokens"]["burn_from_address"] == RECIPIENT

    def test_force_transfer_addresses_unchecked(self, host: ContractHost) -> None:
        result = ContractService(host).execute(
            {
                "force_transfer": {
                    "denom": DENOM,
                    "amount": "100",
                    "from_address": "transferme",
                    "to_address": "tome",
                }
            }
        )
        assert result.ok
        assert result.data["method"] == "force_transfer_tokens"

    @pytest.mark.parametrize(
        ("payload", "code"),
        [
            ({"create_denom": {"subdenom": ""}}, "INVALID_SUBDENOM"),
            (
                {"mint_tokens": {"denom": "bad", "amount": "0", "mint_to_address": "x"}},
                "ZERO_AMOUNT",
            ),
            (
                {"mint_tokens": {"denom": DENOM, "amount": "1", "mint_to_address": "x"}},
                "INVALID_ADDRESS",
            ),
            ({"burn_tokens": {"denom": "factory/a/b/c", "amount": "1"}}, "INVALID_DENOM"),
            ({"change_admin": {"denom": DENOM}}, "INVALID_MESSAGE"),
            ("{not json", "INVALID_MESSAGE"),
        ],
    )
    def test_failures(
        self, host: ContractHost, recorder: _Recorder, payload: Any, code: str
    ) -> None:
        result = ContractService(host).execute(payload)
        assert not result.ok
        assert result.op == "execute"
        assert result.error is not None and result.error.code == code
        assert recorder.events == []

    def test_query_is_not_a_command(self, host: ContractHost) -> None:
        result = ContractService(host).execute(
            GetDenom(creator_address=CREATOR, subdenom="sun")  # type: ignore[arg-type]
        )
        assert not result.ok
        assert result.error is not None and result.error.code == "INVALID_MESSAGE"

    def test_action_is_not_a_command(self, host: ContractHost) -> None:
        result = ContractService(host).execute(burn_self(DENOM, 1))  # type: ignore[arg-type]
        assert result.error is not None and result.error.code == "INVALID_MESSAGE"

    def test_non_utf8_payload(self, host: ContractHost) -> None:
        result = ContractService(host).execute(b'{"create_denom": {"subdenom": "\xff"}}')
        assert result.error is not None and result.error.code == "INVALID_MESSAGE"

    def test_unreachable_resolver_is_invalid_denom(self, settings: TfSettings) -> None:
        host = ContractHost(settings, resolver=_UnreachableResolver(), plugins=PluginManager())
        result = ContractService(host).execute(MintTokens(denom=DENOM, amount=1))
        assert result.error is not None
        assert result.error.code == "INVALID_DENOM"
        assert result.error.detail["message"] == "node unreachable"

    def test_empty_subdenom_message(self, host: ContractHost) -> None:
        result = ContractService(host).execute(CreateDenom(subdenom=""))
        assert result.error is not None
        assert result.error.message == "Invalid subdenom: "

    def test_invalid_denom_detail(self, host: ContractHost) -> None:
        result = ContractService(host).execute(
            {"burn_tokens": {"denom": "invalid/cosmoscontract/mydenom", "amount": "1"}}
        )
        assert result.error is not None
        assert result.error.detail["message"] == "prefix must be 'factory', was invalid"

    def test_plugin_failure_is_warning(self, host: ContractHost) -> None:
        host.plugins.register_plugin(_Broken(), name="broken")
        result = ContractService(host).execute(CreateDenom(subdenom="sun"))
        assert result.ok
        assert result.warnings == ["Plugin hook post_execute failed"]

    def test_telemetry_attached_when_enabled(self, host: ContractHost) -> None:
        enable_telemetry()
        result = ContractService(host).execute(CreateDenom(subdenom="sun"))
        telemetry = result.meta["telemetry"]  # type: ignore[index]
        assert telemetry["name"] == "ContractService.execute"
        assert telemetry["children"][0]["name"] == "dispatch"
        assert telemetry["children"][0]["annotations"] == {"method": "create_denom"}

    def test_no_telemetry_by_default(self, host: ContractHost) -> None:
        result = ContractService(host).execute(CreateDenom(subdenom="sun"))
        assert result.meta is None


class TestQuery:
    def test_get_denom(self, host: ContractHost, recorder: _Recorder) -> None:
        result = ContractService(host).get_denom(CREATOR, "sun")
        assert result.ok
        assert result.op == "get_denom"
        assert result.data == {"denom": DENOM}
        assert recorder.events[0][1]["response"] == {"denom": DENOM}

    def test_query_object(self, host: ContractHost) -> None:
        result = ContractService(host).query(GetDenom(creator_address=CREATOR, subdenom="sun"))
        assert result.data["denom"] == DENOM

    def test_command_is_not_a_query(self, host: ContractHost) -> None:
        result = ContractService(host).query(CreateDenom(subdenom="sun"))  # type: ignore[arg-type]
        assert not result.ok
        assert result.op == "get_denom"
        assert result.error is not None and result.error.code == "INVALID_MESSAGE"

    def test_resolver_failure(self, host: ContractHost) -> None:
        result = ContractService(host).get_denom("", "sun")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "RESOLVER_ERROR"
        assert result.error.message == "invalid creator address"


class TestValidateDenom:
    def test_valid(self, host: ContractHost) -> None:
        result = ContractService(host).validate_denom(DENOM)
        assert result.ok
        assert result.data == {
            "denom": DENOM,
            "prefix": "factory",
            "creator_address": CREATOR,
            "subdenom": "sun",
        }

    def test_four_parts(self, host: ContractHost) -> None:
        result = ContractService(host).validate_denom("factory/cosmoscontract/mydenom/invalid")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["message"] == "denom must have 3 parts separated by /, had 4"

    def test_uppercase_prefix(self, host: ContractHost) -> None:
        result = ContractService(host).validate_denom(f"FACTORY/{CREATOR}/sun")
        assert result.ok
        assert result.data["prefix"] == "FACTORY"
