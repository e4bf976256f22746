"""Protocols for the capabilities the execution environment supplies.

The core never constructs these itself; they are injected at construction
time so a test double can stand in for the chain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tfctl.domain.commands import GetDenomResponse


@runtime_checkable
class Resolver(Protocol):
    """Authoritative existence and format check for a denomination."""

    def resolve(self, creator_address: str, subdenom: str) -> GetDenomResponse:
        """Return the canonical denom or raise :class:`~tfctl.domain.errors.ResolverError`."""
        ...


@runtime_checkable
class AddressValidator(Protocol):
    """Format legality of an address string."""

    def validate(self, address: str) -> None:
        """Return None or raise :class:`~tfctl.domain.errors.InvalidAddress`."""
        ...
