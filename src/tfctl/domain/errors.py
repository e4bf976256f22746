"""Error kinds raised by the token-factory core and its collaborators.

Every error carries a stable ``code`` and a ``detail`` dict so the service
layer can turn it into a :class:`~tfctl.services.result.ServiceError`
without re-deriving context.

INVARIANT: The first failing check aborts processing. Nothing in the core
catches these except :class:`~tfctl.domain.denom.DenomValidator`, which
wraps resolver failures into :class:`InvalidDenom`.
"""

from __future__ import annotations

from typing import Any, ClassVar


class TokenFactoryError(Exception):
    """Base class for every error surfaced by dispatch, query, or validation."""

    code: ClassVar[str] = "TOKEN_FACTORY_ERROR"

    @property
    def detail(self) -> dict[str, Any]:
        """Offending fields, keyed by name."""
        return {}


class InvalidSubdenom(TokenFactoryError):
    code = "INVALID_SUBDENOM"

    def __init__(self, subdenom: str) -> None:
        self.subdenom = subdenom
        super().__init__(f"Invalid subdenom: {subdenom}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"subdenom": self.subdenom}


class InvalidDenom(TokenFactoryError):
    """A denom failed structural checks or was rejected by the resolver."""

    code = "INVALID_DENOM"

    def __init__(self, denom: str, message: str) -> None:
        self.denom = denom
        self.message = message
        super().__init__(f"Invalid denom: {denom!r} {message}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"denom": self.denom, "message": self.message}


class ZeroAmount(TokenFactoryError):
    code = "ZERO_AMOUNT"

    def __init__(self) -> None:
        super().__init__("Amount was zero, must be positive")


class InvalidAddress(TokenFactoryError):
    """Raised by an address validator; passed through unchanged."""

    code = "INVALID_ADDRESS"

    def __init__(self, address: str, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"Invalid address {address!r}: {reason}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"address": self.address, "reason": self.reason}


class ResolverError(TokenFactoryError):
    """Raised by a denom resolver when it rejects (creator, subdenom)."""

    code = "RESOLVER_ERROR"

    def __init__(self, message: str, *, creator_address: str = "", subdenom: str = "") -> None:
        self.message = message
        self.creator_address = creator_address
        self.subdenom = subdenom
        super().__init__(message)

    @property
    def detail(self) -> dict[str, Any]:
        return {"creator_address": self.creator_address, "subdenom": self.subdenom}


class MessageFormatError(TokenFactoryError):
    """A wire payload did not decode to a known command, query, or action."""

    code = "INVALID_MESSAGE"

    def __init__(self, message: str, *, payload: Any = None) -> None:
        self.message = message
        self.payload = payload
        super().__init__(message)

    @property
    def detail(self) -> dict[str, Any]:
        if self.payload is None:
            return {}
        return {"payload": self.payload}
