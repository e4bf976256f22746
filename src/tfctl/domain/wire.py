"""Wire encoding shared by commands, queries, and actions.

Messages travel as externally-tagged JSON objects with exactly one key::

    {"mint_tokens": {"denom": "factory/cosmos1.../sun", "amount": "100"}}

Amounts are unsigned 128-bit integers carried as decimal strings. Optional
fields are omitted from the wire when absent, and absent keys decode to None.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, ValidationError

from tfctl.domain.errors import MessageFormatError

UINT128_MAX = 2**128 - 1


def _coerce_uint128(value: Any) -> int:
    """Accept ints and ASCII decimal strings within ``0 .. 2**128-1``."""
    if isinstance(value, bool):
        raise ValueError("amount must be an unsigned integer")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        number = int(value)
    else:
        raise ValueError(f"amount must be a decimal string, got {value!r}")
    if number < 0 or number > UINT128_MAX:
        raise ValueError(f"amount {number} out of range for Uint128")
    return number


Uint128 = Annotated[
    int,
    BeforeValidator(_coerce_uint128),
    PlainSerializer(str, return_type=str, when_used="json"),
]


class WireMessage(BaseModel):
    """Frozen message with a snake_case wire tag."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: ClassVar[str]

    def to_wire(self) -> dict[str, Any]:
        """Return ``{tag: fields}`` with None-valued fields dropped."""
        return {self.tag: self.model_dump(mode="json", exclude_none=True)}

    def to_json(self) -> str:
        return json.dumps(self.to_wire(), separators=(",", ":"))


def decode_tagged[T: WireMessage](
    payload: str | bytes | dict[str, Any],
    registry: dict[str, type[T]],
    *,
    kind: str,
) -> T:
    """Decode an externally-tagged *payload* into one of *registry*'s models.

    Raises:
        MessageFormatError: Malformed JSON, not exactly one key, unknown tag,
            or field validation failure.
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MessageFormatError(f"{kind} is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict) or len(payload) != 1:
        raise MessageFormatError(
            f"{kind} must be an object with exactly one variant key",
            payload=payload,
        )

    ((tag, body),) = payload.items()
    model_cls = registry.get(tag)
    if model_cls is None:
        known = ", ".join(sorted(registry))
        raise MessageFormatError(
            f"unknown {kind} variant {tag!r}, expected one of: {known}",
            payload=payload,
        )

    try:
        return model_cls.model_validate(body)
    except ValidationError as exc:
        reasons = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or tag}: {err['msg']}" for err in exc.errors()
        )
        raise MessageFormatError(f"invalid {tag}: {reasons}", payload=payload) from exc
