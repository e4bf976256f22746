"""Local denom resolver mirroring the ledger's full-denom rules.

Used when no chain is attached: it answers the same question the ledger
would (is ``factory/<creator>/<subdenom>`` a well-formed denom?) without
knowing which denoms actually exist.
"""

from __future__ import annotations

import logging
import re

from tfctl.domain.commands import GetDenomResponse
from tfctl.domain.denom import build_denom
from tfctl.domain.errors import ResolverError

logger = logging.getLogger(__name__)

# Coin denom syntax enforced by the bank module.
DENOM_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9/:._-]{2,127}")


class LocalDenomResolver:
    """Builds and checks full denoms from (creator, subdenom)."""

    def __init__(self, *, max_subdenom_length: int = 44, max_creator_length: int = 75) -> None:
        self.max_subdenom_length = max_subdenom_length
        self.max_creator_length = max_creator_length

    def resolve(self, creator_address: str, subdenom: str) -> GetDenomResponse:
        def reject(message: str) -> ResolverError:
            logger.debug("Rejected %s/%s: %s", creator_address, subdenom, message)
            return ResolverError(message, creator_address=creator_address, subdenom=subdenom)

        if creator_address == "":
            raise reject("invalid creator address")
        if subdenom == "":
            raise reject("invalid subdenom")
        if len(subdenom.encode()) > self.max_subdenom_length:
            raise reject(f"subdenom too long, max length is {self.max_subdenom_length} bytes")
        if len(creator_address.encode()) > self.max_creator_length:
            raise reject(f"creator too long, max length is {self.max_creator_length} bytes")
        if "/" in creator_address:
            raise reject('invalid creator: creator address cannot contain "/"')

        denom = build_denom(creator_address, subdenom)
        if DENOM_PATTERN.fullmatch(denom) is None:
            raise reject(f"invalid denom: {denom}")
        return GetDenomResponse(denom=denom)
