"""Typed payload contracts for service results.

Each service validates its ``data`` dict against one of these models before
returning, so a payload shape regression fails in tests rather than in a
ledger consumer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    return model_cls.model_validate(data).model_dump(mode="python")


class InstantiateResultData(BaseModel):
    owner: str
    contract: str
    version: str
    attributes: list[tuple[str, str]]


class ExecuteResultData(BaseModel):
    """Payload contract for ``ContractService.execute``.

    ``action`` is the wire form handed to the ledger authority.
    """

    method: str
    action: dict[str, Any]
    attributes: list[tuple[str, str]]
    requires_burn_from: bool = False


class GetDenomResultData(BaseModel):
    denom: str


class ValidateDenomResultData(BaseModel):
    denom: str
    prefix: str
    creator_address: str
    subdenom: str


class StateResultData(BaseModel):
    owner: str | None
    contract: str | None
    version: str | None
    contract_address: str
