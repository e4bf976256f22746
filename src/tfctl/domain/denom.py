"""Denomination parsing and validation.

A factory denom has exactly three ``/``-separated parts::

    factory/<creator-address>/<subdenom>

Only the part count and the prefix are checked locally. Whether the creator
and subdenom segments name a legal denom is decided by the injected
:class:`~tfctl.domain.ports.Resolver`, so "valid" always tracks the issuing
authority's own rules.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from tfctl.domain.errors import InvalidDenom

if TYPE_CHECKING:
    from tfctl.domain.ports import Resolver

logger = logging.getLogger(__name__)

DENOM_PREFIX = "factory"
DENOM_PART_COUNT = 3


class DenomParts(NamedTuple):
    prefix: str
    creator_address: str
    subdenom: str


def split_denom(denom: str) -> DenomParts:
    """Split *denom* into its three parts, checking count and prefix.

    Examples:
        >>> split_denom("FACTORY/cosmos1abc/sun")
        DenomParts(prefix='FACTORY', creator_address='cosmos1abc', subdenom='sun')

    Raises:
        InvalidDenom: Part count is not three, or the prefix is not
            ``factory`` (case-insensitive).
    """
    parts = denom.split("/")
    if len(parts) != DENOM_PART_COUNT:
        raise InvalidDenom(
            denom,
            f"denom must have {DENOM_PART_COUNT} parts separated by /, had {len(parts)}",
        )

    prefix, creator_address, subdenom = parts
    if not (prefix.isascii() and prefix.lower() == DENOM_PREFIX):
        raise InvalidDenom(denom, f"prefix must be '{DENOM_PREFIX}', was {prefix}")

    return DenomParts(prefix, creator_address, subdenom)


def build_denom(creator_address: str, subdenom: str) -> str:
    """Join *creator_address* and *subdenom* under the factory prefix."""
    return f"{DENOM_PREFIX}/{creator_address}/{subdenom}"


class DenomValidator:
    """Validates denoms against local structure rules and the resolver."""

    def __init__(self, resolver: Resolver) -> None:
        self._resolver = resolver

    def validate(self, denom: str) -> None:
        """Raise :class:`InvalidDenom` unless *denom* is a resolvable factory denom.

        Any resolver failure, including transport errors from a chain-backed
        resolver, is reported as ``InvalidDenom`` carrying the resolver's text.
        """
        parts = split_denom(denom)
        try:
            self._resolver.resolve(parts.creator_address, parts.subdenom)
        except Exception as exc:
            logger.debug("Resolver rejected %s: %s", denom, exc)
            raise InvalidDenom(denom, str(exc)) from exc
