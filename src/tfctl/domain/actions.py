"""Outbound actions handed to the ledger authority.

Each accepted command produces exactly one action carrying only validated
fields. Wire tags follow the ledger's message bindings, so burning from self
and burning from an address share the ``burn_tokens`` variant and differ only
in whether ``burn_from_address`` is present.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from tfctl.domain.wire import Uint128, WireMessage, decode_tagged


class DenomUnit(WireMessage):
    tag: ClassVar[str] = "denom_unit"

    denom: str
    exponent: int = 0
    aliases: list[str] = Field(default_factory=list)


class DenomMetadata(WireMessage):
    """Bank metadata optionally attached to a new denom."""

    tag: ClassVar[str] = "metadata"

    description: str | None = None
    denom_units: list[DenomUnit] = Field(default_factory=list)
    base: str | None = None
    display: str | None = None
    name: str | None = None
    symbol: str | None = None


class CreateDenomAction(WireMessage):
    tag: ClassVar[str] = "create_denom"

    subdenom: str
    metadata: DenomMetadata | None = None


class ChangeAdminAction(WireMessage):
    tag: ClassVar[str] = "change_admin"

    denom: str
    new_admin_address: str


class MintTokensAction(WireMessage):
    tag: ClassVar[str] = "mint_tokens"

    denom: str
    amount: Uint128
    mint_to_address: str


class BurnTokensAction(WireMessage):
    tag: ClassVar[str] = "burn_tokens"

    denom: str
    amount: Uint128
    burn_from_address: str | None = None

    @property
    def requires_burn_from(self) -> bool:
        """Whether the ledger must have burn-from enabled to execute this."""
        return self.burn_from_address is not None


class ForceTransferAction(WireMessage):
    tag: ClassVar[str] = "force_transfer"

    denom: str
    amount: Uint128
    from_address: str
    to_address: str


type Action = (
    CreateDenomAction
    | ChangeAdminAction
    | MintTokensAction
    | BurnTokensAction
    | ForceTransferAction
)

ACTION_TYPES: dict[str, type[WireMessage]] = {
    cls.tag: cls
    for cls in (
        CreateDenomAction,
        ChangeAdminAction,
        MintTokensAction,
        BurnTokensAction,
        ForceTransferAction,
    )
}


def mint_to(denom: str, amount: int, recipient: str) -> MintTokensAction:
    return MintTokensAction(denom=denom, amount=amount, mint_to_address=recipient)


def burn_from(denom: str, amount: int, address: str) -> BurnTokensAction:
    return BurnTokensAction(denom=denom, amount=amount, burn_from_address=address)


def burn_self(denom: str, amount: int) -> BurnTokensAction:
    return BurnTokensAction(denom=denom, amount=amount)


def parse_action(payload: str | bytes | dict[str, Any]) -> Action:
    """Decode an action from its wire form (used by ledger-side consumers)."""
    return decode_tagged(payload, ACTION_TYPES, kind="action")  # type: ignore[return-value]
