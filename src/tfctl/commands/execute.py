"""Command group: execute token-factory commands."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

import click

from tfctl.commands._base import TfGroup
from tfctl.services.contract import ContractService

if TYPE_CHECKING:
    from tfctl.commands._context import AppContext

_EXECUTE_EXAMPLES = """\
  tfctl execute create-denom sun
  tfctl execute mint factory/cosmos1.../sun 1000
  tfctl execute mint factory/cosmos1.../sun 1000 --to cosmos1...
  tfctl execute burn factory/cosmos1.../sun 500 --from cosmos1...
  tfctl --json execute raw '{"create_denom": {"subdenom": "sun"}}'"""


def _run(app: AppContext, tag: str, fields: dict[str, Any]) -> None:
    body = {k: v for k, v in fields.items() if v is not None}
    app.emit(ContractService(app.host).execute({tag: body}))


@click.group(cls=TfGroup, examples=_EXECUTE_EXAMPLES)
def execute() -> None:
    """Validate a command and print the action it produces."""


@execute.command(
    examples="""\
  tfctl execute raw '{"burn_tokens": {"denom": "factory/cosmos1.../sun", "amount": "5"}}'
  echo '{"create_denom": {"subdenom": "sun"}}' | tfctl execute raw -"""
)
@click.argument("message")
@click.pass_obj
def raw(app: AppContext, message: str) -> None:
    """Execute a wire-format command (JSON, or - for stdin)."""
    if message == "-":
        message = sys.stdin.read()
    app.emit(ContractService(app.host).execute(message))


@execute.command(name="create-denom", examples="  tfctl execute create-denom sun")
@click.argument("subdenom")
@click.pass_obj
def create_denom(app: AppContext, subdenom: str) -> None:
    """Create a new denom under the contract."""
    _run(app, "create_denom", {"subdenom": subdenom})


@execute.command(
    name="change-admin",
    examples="  tfctl execute change-admin factory/cosmos1.../sun cosmos1...",
)
@click.argument("denom")
@click.argument("new_admin_address")
@click.pass_obj
def change_admin(app: AppContext, denom: str, new_admin_address: str) -> None:
    """Hand admin rights on DENOM to NEW_ADMIN_ADDRESS."""
    _run(app, "change_admin", {"denom": denom, "new_admin_address": new_admin_address})


@execute.command(
    examples="""\
  tfctl execute mint factory/cosmos1.../sun 1000
  tfctl execute mint factory/cosmos1.../sun 1000 --to cosmos1..."""
)
@click.argument("denom")
@click.argument("amount")
@click.option("--to", "mint_to_address", default=None, help="Recipient (default: contract).")
@click.pass_obj
def mint(app: AppContext, denom: str, amount: str, mint_to_address: str | None) -> None:
    """Mint AMOUNT of DENOM."""
    _run(
        app,
        "mint_tokens",
        {"denom": denom, "amount": amount, "mint_to_address": mint_to_address},
    )


@execute.command(
    examples="""\
  tfctl execute burn factory/cosmos1.../sun 500
  tfctl execute burn factory/cosmos1.../sun 500 --from cosmos1..."""
)
@click.argument("denom")
@click.argument("amount")
@click.option(
    "--from",
    "burn_from_address",
    default=None,
    help="Burn from this address (needs burn-from on the ledger).",
)
@click.pass_obj
def burn(app: AppContext, denom: str, amount: str, burn_from_address: str | None) -> None:
    """Burn AMOUNT of DENOM, from the contract's own balance by default."""
    _run(
        app,
        "burn_tokens",
        {"denom": denom, "amount": amount, "burn_from_address": burn_from_address},
    )


@execute.command(
    name="force-transfer",
    examples="  tfctl execute force-transfer factory/cosmos1.../sun 100 cosmos1a... cosmos1b...",
)
@click.argument("denom")
@click.argument("amount")
@click.argument("from_address")
@click.argument("to_address")
@click.pass_obj
def force_transfer(
    app: AppContext, denom: str, amount: str, from_address: str, to_address: str
) -> None:
    """Move AMOUNT of DENOM from FROM_ADDRESS to TO_ADDRESS."""
    _run(
        app,
        "force_transfer",
        {"denom": denom, "amount": amount, "from_address": from_address, "to_address": to_address},
    )
