"""Subcommand modules for tfctl.

register_commands() imports lazily so ``tfctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach the execute/query groups and the standalone commands."""
    from tfctl.commands.execute import execute
    from tfctl.commands.query import query

    cli.add_command(execute)
    cli.add_command(query)

    from tfctl.commands.instantiate import instantiate, state
    from tfctl.commands.validate import validate_denom

    cli.add_command(instantiate)
    cli.add_command(state)
    cli.add_command(validate_denom)
