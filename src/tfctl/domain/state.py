"""Initialization-time contract state and the response envelope.

``ContractState`` is recorded once by :func:`instantiate` and never mutated.
The owner is kept for reference only; no operation consults it before
permitting admin actions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from tfctl.domain.actions import Action

CONTRACT_NAME = "crates.io:tokenfactory-demo"


class ContractState(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str


class ContractInfo(BaseModel):
    """Name and version recorded at instantiation, used for migrations."""

    model_config = ConfigDict(frozen=True)

    contract: str = CONTRACT_NAME
    version: str


class Attribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    value: str


class Response(BaseModel):
    """Outcome of a successful instantiate or dispatch.

    Attributes:
        messages: Actions for the ledger authority (at most one per call).
        attributes: Descriptive ``(key, value)`` pairs, ``method`` first.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Any, ...] = ()
    attributes: tuple[Attribute, ...] = Field(default_factory=tuple)

    @classmethod
    def for_method(cls, method: str, *messages: Action, **extra: str) -> Response:
        attrs = [Attribute(key="method", value=method)]
        attrs.extend(Attribute(key=k, value=v) for k, v in extra.items())
        return cls(messages=messages, attributes=tuple(attrs))

    @property
    def method(self) -> str:
        return next((a.value for a in self.attributes if a.key == "method"), "")

    def attribute_pairs(self) -> list[tuple[str, str]]:
        return [(a.key, a.value) for a in self.attributes]


def instantiate(
    sender: str, version: str, *, contract: str = CONTRACT_NAME
) -> tuple[ContractState, ContractInfo, Response]:
    """Record *sender* as owner and return the instantiation response."""
    state = ContractState(owner=sender)
    info = ContractInfo(contract=contract, version=version)
    response = Response.for_method("instantiate", owner=sender)
    return state, info, response
