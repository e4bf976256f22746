"""Tests for CommandProcessor dispatch and QueryResolver."""

from __future__ import annotations

import pytest

from tests.conftest import (
    AcceptAllAddresses,
    EchoResolver,
    RejectAllAddresses,
    RejectingResolver,
)
from tfctl.domain.actions import (
    BurnTokensAction,
    ChangeAdminAction,
    CreateDenomAction,
    ForceTransferAction,
    MintTokensAction,
)
from tfctl.domain.commands import (
    BurnTokens,
    ChangeAdmin,
    CreateDenom,
    ForceTransfer,
    GetDenom,
    MintTokens,
)
from tfctl.domain.errors import (
    InvalidAddress,
    InvalidDenom,
    InvalidSubdenom,
    ResolverError,
    ZeroAmount,
)
from tfctl.domain.processor import CommandProcessor, QueryResolver

SELF = "cosmos1contract"
DENOM = "factory/creator/mydenom"


def _processor(
    resolver: object | None = None, addresses: object | None = None
) -> CommandProcessor:
    return CommandProcessor(
        resolver or EchoResolver(),  # type: ignore[arg-type]
        addresses or AcceptAllAddresses(),  # type: ignore[arg-type]
        SELF,
    )


class TestCreateDenom:
    def test_emits_create_denom(self) -> None:
        response = _processor().dispatch(CreateDenom(subdenom="sun"))
        assert response.messages == (CreateDenomAction(subdenom="sun"),)
        assert response.attribute_pairs() == [("method", "create_denom")]

    def test_empty_subdenom(self) -> None:
        with pytest.raises(InvalidSubdenom):
            _processor().dispatch(CreateDenom(subdenom=""))

    def test_subdenom_is_not_resolved(self) -> None:
        resolver = EchoResolver()
        _processor(resolver).dispatch(CreateDenom(subdenom="x" * 200))
        assert resolver.calls == []


class TestChangeAdmin:
    def test_emits_change_admin(self) -> None:
        response = _processor().dispatch(ChangeAdmin(denom=DENOM, new_admin_address="cosmos1new"))
        (action,) = response.messages
        assert action == ChangeAdminAction(denom=DENOM, new_admin_address="cosmos1new")
        assert response.method == "change_admin"

    def test_address_checked_before_denom(self) -> None:
        resolver = EchoResolver()
        with pytest.raises(InvalidAddress):
            _processor(resolver, RejectAllAddresses()).dispatch(
                ChangeAdmin(denom="bad", new_admin_address="x")
            )
        assert resolver.calls == []

    def test_invalid_denom(self) -> None:
        with pytest.raises(InvalidDenom):
            _processor().dispatch(ChangeAdmin(denom="bad/denom", new_admin_address="cosmos1new"))


class TestMintTokens:
    def test_default_recipient_is_self(self) -> None:
        addresses = AcceptAllAddresses()
        response = _processor(addresses=addresses).dispatch(MintTokens(denom=DENOM, amount=100))
        (action,) = response.messages
        assert isinstance(action, MintTokensAction)
        assert action.mint_to_address == SELF
        assert addresses.seen == []
        assert response.method == "mint_tokens"

    def test_explicit_recipient_is_validated(self) -> None:
        addresses = AcceptAllAddresses()
        response = _processor(addresses=addresses).dispatch(
            MintTokens(denom=DENOM, amount=5, mint_to_address="cosmos1to")
        )
        assert response.messages[0].mint_to_address == "cosmos1to"
        assert addresses.seen == ["cosmos1to"]

    def test_zero_amount_before_address(self) -> None:
        with pytest.raises(ZeroAmount):
            _processor(addresses=RejectAllAddresses()).dispatch(
                MintTokens(denom="bad", amount=0, mint_to_address="x")
            )

    def test_zero_amount_before_denom(self) -> None:
        resolver = RejectingResolver()
        with pytest.raises(ZeroAmount):
            _processor(resolver).dispatch(MintTokens(denom="bad", amount=0))

    def test_bad_recipient(self) -> None:
        with pytest.raises(InvalidAddress):
            _processor(addresses=RejectAllAddresses()).dispatch(
                MintTokens(denom=DENOM, amount=1, mint_to_address="x")
            )

    def test_resolver_rejection(self) -> None:
        with pytest.raises(InvalidDenom) as excinfo:
            _processor(RejectingResolver("unknown")).dispatch(MintTokens(denom=DENOM, amount=1))
        assert excinfo.value.message == "unknown"


class TestBurnTokens:
    def test_burn_self(self) -> None:
        response = _processor().dispatch(BurnTokens(denom=DENOM, amount=7))
        (action,) = response.messages
        assert isinstance(action, BurnTokensAction)
        assert action.burn_from_address is None
        assert "burn_from_address" not in action.to_wire()["burn_tokens"]
        assert response.method == "burn_tokens"

    def test_burn_from(self) -> None:
        response = _processor().dispatch(
            BurnTokens(denom=DENOM, amount=7, burn_from_address="cosmos1abc")
        )
        (action,) = response.messages
        assert action.to_wire()["burn_tokens"]["burn_from_address"] == "cosmos1abc"

    def test_zero_amount(self) -> None:
        with pytest.raises(ZeroAmount):
            _processor(RejectingResolver(), RejectAllAddresses()).dispatch(
                BurnTokens(denom="x", amount=0, burn_from_address="x")
            )

    def test_bad_source_address(self) -> None:
        with pytest.raises(InvalidAddress):
            _processor(addresses=RejectAllAddresses()).dispatch(
                BurnTokens(denom=DENOM, amount=1, burn_from_address="x")
            )


class TestForceTransfer:
    def test_unvalidated_addresses_succeed(self) -> None:
        addresses = RejectAllAddresses()
        response = _processor(addresses=addresses).dispatch(
            ForceTransfer(denom=DENOM, amount=100, from_address="transferme", to_address="tome")
        )
        (action,) = response.messages
        assert action == ForceTransferAction(
            denom=DENOM, amount=100, from_address="transferme", to_address="tome"
        )
        assert response.method == "force_transfer_tokens"

    def test_zero_amount(self) -> None:
        with pytest.raises(ZeroAmount):
            _processor().dispatch(
                ForceTransfer(denom=DENOM, amount=0, from_address="a", to_address="b")
            )

    def test_denom_validated(self) -> None:
        with pytest.raises(InvalidDenom):
            _processor().dispatch(
                ForceTransfer(denom="nope", amount=1, from_address="a", to_address="b")
            )


class TestQueryResolver:
    def test_get_denom(self) -> None:
        response = QueryResolver(EchoResolver()).get_denom("creator", "sun")
        assert response.denom == "factory/creator/sun"

    def test_query_dispatch(self) -> None:
        response = QueryResolver(EchoResolver()).query(
            GetDenom(creator_address="creator", subdenom="sun")
        )
        assert response.denom == "factory/creator/sun"

    def test_empty_creator_fails(self) -> None:
        with pytest.raises(ResolverError, match="invalid creator address"):
            QueryResolver(EchoResolver()).get_denom("", "sun")

    def test_failure_is_not_wrapped(self) -> None:
        with pytest.raises(ResolverError) as excinfo:
            QueryResolver(RejectingResolver("gone")).get_denom("creator", "sun")
        assert str(excinfo.value) == "gone"
