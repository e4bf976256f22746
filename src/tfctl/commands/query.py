"""Command group: read queries."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from tfctl.commands._base import TfGroup
from tfctl.services.contract import ContractService

if TYPE_CHECKING:
    from tfctl.commands._context import AppContext

_QUERY_EXAMPLES = """\
  tfctl query get-denom cosmos1... sun
  tfctl -q query get-denom cosmos1... sun
  tfctl --json query raw '{"get_denom": {"creator_address": "cosmos1...", "subdenom": "sun"}}'"""


@click.group(cls=TfGroup, examples=_QUERY_EXAMPLES)
def query() -> None:
    """Resolve denoms."""


@query.command(name="get-denom", examples="  tfctl query get-denom cosmos1... sun")
@click.argument("creator_address")
@click.argument("subdenom")
@click.pass_obj
def get_denom(app: AppContext, creator_address: str, subdenom: str) -> None:
    """Print the full denom for CREATOR_ADDRESS and SUBDENOM."""
    app.emit(ContractService(app.host).get_denom(creator_address, subdenom))


@query.command(examples="""  tfctl query raw '{"get_denom": {...}}'""")
@click.argument("message")
@click.pass_obj
def raw(app: AppContext, message: str) -> None:
    """Run a wire-format query (JSON, or - for stdin)."""
    if message == "-":
        message = sys.stdin.read()
    app.emit(ContractService(app.host).query(message))
