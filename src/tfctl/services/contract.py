"""ContractService — instantiate, execute, query, and denom validation.

Pipeline per call: DECODE → VALIDATE/DISPATCH → NOTIFY → RESPOND.
Commands and queries may arrive as wire payloads (``str``/``dict``) or as
already-built message objects.
"""

from __future__ import annotations

import logging
from typing import Any

from tfctl.domain.actions import BurnTokensAction
from tfctl.domain.commands import Command, Query, as_command, as_query
from tfctl.domain.denom import DenomValidator, split_denom
from tfctl.domain.errors import TokenFactoryError
from tfctl.services.base import BaseService
from tfctl.services.contracts import (
    ExecuteResultData,
    GetDenomResultData,
    InstantiateResultData,
    StateResultData,
    ValidateDenomResultData,
    dump_validated,
)
from tfctl.services.result import ServiceResult
from tfctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

type Payload = str | bytes | dict[str, Any]


class ContractService(BaseService):
    """Drives the token-factory core through its host."""

    @traced
    def instantiate(self, sender: str) -> ServiceResult:
        """Record *sender* as the contract owner."""
        op = "instantiate"
        warnings: list[str] = []

        info, response = self._host.instantiate(sender)

        self._dispatch_event(
            "post_instantiate",
            warnings,
            owner=sender,
            contract=info.contract,
            version=info.version,
        )
        data = {
            "owner": sender,
            "contract": info.contract,
            "version": info.version,
            "attributes": response.attribute_pairs(),
        }
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(InstantiateResultData, data),
            warnings=warnings,
        )

    @traced
    def execute(self, command: Command | Payload) -> ServiceResult:
        """Validate one command and return the single action it produces."""
        op = "execute"
        warnings: list[str] = []

        try:
            cmd = as_command(command)
            with trace_span("dispatch") as span:
                response = self._host.processor.dispatch(cmd)
                if span is not None:
                    span.annotate("method", response.method)
        except TokenFactoryError as exc:
            logger.info("Command rejected: %s", exc)
            return ServiceResult.failure(op, exc)

        (action,) = response.messages
        wire = action.to_wire()
        attributes = response.attribute_pairs()

        self._dispatch_event(
            "post_execute",
            warnings,
            method=response.method,
            action=wire,
            attributes=attributes,
        )
        data = {
            "method": response.method,
            "action": wire,
            "attributes": attributes,
            "requires_burn_from": (
                isinstance(action, BurnTokensAction) and action.requires_burn_from
            ),
        }
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(ExecuteResultData, data),
            warnings=warnings,
        )

    @traced
    def query(self, query: Query | Payload) -> ServiceResult:
        """Answer a ``get_denom`` query.

        A resolver rejection is fatal to the query and is reported as-is.
        """
        op = "get_denom"
        warnings: list[str] = []

        try:
            parsed = as_query(query)
            response = self._host.queries.query(parsed)
        except TokenFactoryError as exc:
            return ServiceResult.failure(op, exc)

        self._dispatch_event(
            "post_query",
            warnings,
            query=parsed.to_wire(),
            response=response.to_wire(),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(GetDenomResultData, response.to_wire()),
            warnings=warnings,
        )

    def get_denom(self, creator_address: str, subdenom: str) -> ServiceResult:
        return self.query({"get_denom": {"creator_address": creator_address, "subdenom": subdenom}})

    @traced
    def validate_denom(self, denom: str) -> ServiceResult:
        """Run denom validation alone, without building an action."""
        op = "validate_denom"
        try:
            DenomValidator(self._host.resolver).validate(denom)
        except TokenFactoryError as exc:
            return ServiceResult.failure(op, exc)

        parts = split_denom(denom)
        data = {"denom": denom, **parts._asdict()}
        return ServiceResult(ok=True, op=op, data=dump_validated(ValidateDenomResultData, data))

    def state(self) -> ServiceResult:
        """Report the recorded owner and contract info (None before instantiate)."""
        state = self._host.state
        info = self._host.info
        data = {
            "owner": state.owner if state else None,
            "contract": info.contract if info else None,
            "version": info.version if info else None,
            "contract_address": self._host.contract_address,
        }
        return ServiceResult(ok=True, op="state", data=dump_validated(StateResultData, data))
