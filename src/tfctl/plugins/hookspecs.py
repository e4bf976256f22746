"""Pluggy hook specifications for tfctl lifecycle events.

Hooks run synchronously after an operation has succeeded. They observe the
result; they cannot change the emitted action or turn success into failure.
"""

from __future__ import annotations

from typing import Any

import pluggy

PROJECT_NAME = "tfctl"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class TfctlHookSpec:
    """Hook specifications for the tfctl plugin system."""

    @hookspec
    def post_instantiate(self, owner: str, contract: str, version: str) -> None:
        """Called after the contract state is initialized."""

    @hookspec
    def post_execute(
        self,
        method: str,
        action: dict[str, Any],
        attributes: list[tuple[str, str]],
    ) -> None:
        """Called with the wire form of each accepted action.

        This is the hand-off point to a ledger authority.
        """

    @hookspec
    def post_query(self, query: dict[str, Any], response: dict[str, Any]) -> None:
        """Called after a query is answered."""
