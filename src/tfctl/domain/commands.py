"""Inbound messages: the five execute commands and the denom query.

Commands are immutable values constructed by the caller and consumed once by
:class:`~tfctl.domain.processor.CommandProcessor`. Field names match the wire.
"""

from __future__ import annotations

from typing import Any, ClassVar

from tfctl.domain.errors import MessageFormatError
from tfctl.domain.wire import Uint128, WireMessage, decode_tagged


class CreateDenom(WireMessage):
    tag: ClassVar[str] = "create_denom"

    subdenom: str


class ChangeAdmin(WireMessage):
    tag: ClassVar[str] = "change_admin"

    denom: str
    new_admin_address: str


class MintTokens(WireMessage):
    """Mint *amount* of *denom*; recipient defaults to the contract itself."""

    tag: ClassVar[str] = "mint_tokens"

    denom: str
    amount: Uint128
    mint_to_address: str | None = None


class BurnTokens(WireMessage):
    """Burn *amount* of *denom*; source defaults to the contract's own balance."""

    tag: ClassVar[str] = "burn_tokens"

    denom: str
    amount: Uint128
    burn_from_address: str | None = None


class ForceTransfer(WireMessage):
    tag: ClassVar[str] = "force_transfer"

    denom: str
    amount: Uint128
    from_address: str
    to_address: str


type Command = CreateDenom | ChangeAdmin | MintTokens | BurnTokens | ForceTransfer

COMMAND_TYPES: dict[str, type[WireMessage]] = {
    cls.tag: cls for cls in (CreateDenom, ChangeAdmin, MintTokens, BurnTokens, ForceTransfer)
}


# --- Queries ---


class GetDenom(WireMessage):
    tag: ClassVar[str] = "get_denom"

    creator_address: str
    subdenom: str


class GetDenomResponse(WireMessage):
    """Canonical denom returned by the resolver. Not tagged on the wire."""

    tag: ClassVar[str] = "get_denom_response"

    denom: str

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


type Query = GetDenom

QUERY_TYPES: dict[str, type[WireMessage]] = {GetDenom.tag: GetDenom}


def parse_command(payload: str | bytes | dict[str, Any]) -> Command:
    """Decode an execute message such as ``{"create_denom": {"subdenom": "sun"}}``."""
    return decode_tagged(payload, COMMAND_TYPES, kind="command")  # type: ignore[return-value]


def parse_query(payload: str | bytes | dict[str, Any]) -> Query:
    """Decode a query message such as ``{"get_denom": {...}}``."""
    return decode_tagged(payload, QUERY_TYPES, kind="query")  # type: ignore[return-value]


def _coerce(
    message: WireMessage | str | bytes | dict[str, Any],
    registry: dict[str, type[WireMessage]],
    *,
    kind: str,
) -> WireMessage:
    if not isinstance(message, WireMessage):
        return decode_tagged(message, registry, kind=kind)
    if registry.get(message.tag) is not type(message):
        raise MessageFormatError(f"{type(message).__name__} is not a {kind}")
    return message


def as_command(message: WireMessage | str | bytes | dict[str, Any]) -> Command:
    """Accept a built command as-is, or decode a wire payload into one.

    Raises:
        MessageFormatError: *message* is a query, an action, or undecodable.
    """
    return _coerce(message, COMMAND_TYPES, kind="command")  # type: ignore[return-value]


def as_query(message: WireMessage | str | bytes | dict[str, Any]) -> Query:
    """Query counterpart of :func:`as_command`."""
    return _coerce(message, QUERY_TYPES, kind="query")  # type: ignore[return-value]
