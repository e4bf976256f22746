"""Command dispatch and query resolution.

Check order is fixed for every command that has the corresponding fields:

    zero amount  →  address format  →  denom validation

The first failing check raises; nothing is emitted on failure. A successful
dispatch returns a :class:`~tfctl.domain.state.Response` holding exactly one
action and one ``("method", <name>)`` attribute.

The contract owner is not consulted here. Admin commands are accepted from
any caller, and ``ForceTransfer`` addresses are not format-checked.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, assert_never

from tfctl.domain.actions import (
    ChangeAdminAction,
    CreateDenomAction,
    ForceTransferAction,
    burn_from,
    burn_self,
    mint_to,
)
from tfctl.domain.commands import (
    BurnTokens,
    ChangeAdmin,
    CreateDenom,
    ForceTransfer,
    GetDenom,
    GetDenomResponse,
    MintTokens,
)
from tfctl.domain.denom import DenomValidator
from tfctl.domain.errors import InvalidSubdenom, ZeroAmount
from tfctl.domain.state import Response

if TYPE_CHECKING:
    from tfctl.domain.commands import Command, Query
    from tfctl.domain.ports import AddressValidator, Resolver

logger = logging.getLogger(__name__)


def _require_nonzero(amount: int) -> None:
    if amount == 0:
        raise ZeroAmount()


class CommandProcessor:
    """Validates commands and turns each accepted one into a single action.

    Args:
        resolver: Denom resolver consulted by the :class:`DenomValidator`.
        addresses: Address-format validator.
        contract_address: The processor's own address, used as the default
            mint recipient.
    """

    def __init__(
        self,
        resolver: Resolver,
        addresses: AddressValidator,
        contract_address: str,
    ) -> None:
        self._denoms = DenomValidator(resolver)
        self._addresses = addresses
        self.contract_address = contract_address

    def dispatch(self, cmd: Command) -> Response:
        logger.debug("Dispatching %s", cmd.tag)
        match cmd:
            case CreateDenom():
                return self._create_denom(cmd)
            case ChangeAdmin():
                return self._change_admin(cmd)
            case MintTokens():
                return self._mint_tokens(cmd)
            case BurnTokens():
                return self._burn_tokens(cmd)
            case ForceTransfer():
                return self._force_transfer(cmd)
            case _:
                assert_never(cmd)

    # ------------------------------------------------------------------
    # Per-command handlers
    # ------------------------------------------------------------------

    def _create_denom(self, cmd: CreateDenom) -> Response:
        if cmd.subdenom == "":
            raise InvalidSubdenom(cmd.subdenom)

        action = CreateDenomAction(subdenom=cmd.subdenom, metadata=None)
        return Response.for_method("create_denom", action)

    def _change_admin(self, cmd: ChangeAdmin) -> Response:
        self._addresses.validate(cmd.new_admin_address)
        self._denoms.validate(cmd.denom)

        action = ChangeAdminAction(denom=cmd.denom, new_admin_address=cmd.new_admin_address)
        return Response.for_method("change_admin", action)

    def _mint_tokens(self, cmd: MintTokens) -> Response:
        _require_nonzero(cmd.amount)
        if cmd.mint_to_address is not None:
            self._addresses.validate(cmd.mint_to_address)
        self._denoms.validate(cmd.denom)

        recipient = cmd.mint_to_address
        if recipient is None:
            recipient = self.contract_address

        return Response.for_method("mint_tokens", mint_to(cmd.denom, cmd.amount, recipient))

    def _burn_tokens(self, cmd: BurnTokens) -> Response:
        _require_nonzero(cmd.amount)
        if cmd.burn_from_address is not None:
            self._addresses.validate(cmd.burn_from_address)
        self._denoms.validate(cmd.denom)

        # burn_from needs the ledger's burn-from capability; burn_self does not
        if cmd.burn_from_address is not None:
            action = burn_from(cmd.denom, cmd.amount, cmd.burn_from_address)
        else:
            action = burn_self(cmd.denom, cmd.amount)
        return Response.for_method("burn_tokens", action)

    def _force_transfer(self, cmd: ForceTransfer) -> Response:
        _require_nonzero(cmd.amount)
        self._denoms.validate(cmd.denom)

        action = ForceTransferAction(
            denom=cmd.denom,
            amount=cmd.amount,
            from_address=cmd.from_address,
            to_address=cmd.to_address,
        )
        return Response.for_method("force_transfer_tokens", action)


class QueryResolver:
    """Answers the read query by delegating straight to the resolver.

    Resolver failures propagate unchanged: no retry, no default.
    """

    def __init__(self, resolver: Resolver) -> None:
        self._resolver = resolver

    def get_denom(self, creator_address: str, subdenom: str) -> GetDenomResponse:
        response = self._resolver.resolve(creator_address, subdenom)
        return GetDenomResponse(denom=response.denom)

    def query(self, query: Query) -> GetDenomResponse:
        match query:
            case GetDenom():
                return self.get_denom(query.creator_address, query.subdenom)
            case _:
                assert_never(query)
