"""Commands: contract instantiation and state inspection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tfctl.commands._base import TfCommand
from tfctl.services.contract import ContractService

if TYPE_CHECKING:
    from tfctl.commands._context import AppContext


@click.command(
    cls=TfCommand,
    examples="""\
  tfctl instantiate --sender cosmos1...
  TFCTL_CONTRACT__OWNER=cosmos1... tfctl instantiate""",
)
@click.option("--sender", default=None, help="Instantiating address (default: [contract] owner).")
@click.pass_obj
def instantiate(app: AppContext, sender: str | None) -> None:
    """Record the contract owner."""
    sender = sender or app.settings.contract.owner
    if not sender:
        raise click.UsageError("No sender given and no [contract] owner configured.")
    app.emit(ContractService(app.host).instantiate(sender))


@click.command(cls=TfCommand, examples="  tfctl --json state")
@click.pass_obj
def state(app: AppContext) -> None:
    """Show the recorded owner, contract info, and contract address."""
    app.emit(ContractService(app.host).state())
