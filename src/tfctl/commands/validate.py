"""Command: check a denom without emitting an action."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tfctl.commands._base import TfCommand
from tfctl.services.contract import ContractService

if TYPE_CHECKING:
    from tfctl.commands._context import AppContext


@click.command(
    name="validate-denom",
    cls=TfCommand,
    examples="""\
  tfctl validate-denom factory/cosmos1.../sun
  tfctl --json validate-denom FACTORY/cosmos1.../sun""",
)
@click.argument("denom")
@click.pass_obj
def validate_denom(app: AppContext, denom: str) -> None:
    """Check DENOM's structure and resolve it."""
    app.emit(ContractService(app.host).validate_denom(denom))
