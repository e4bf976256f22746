"""ContractHost — the local stand-in for the execution environment.

The host is the single dependency injected into every service. It supplies
what a chain would: the resolver, the address validator, the contract's own
address, and the instantiated :class:`~tfctl.domain.state.ContractState`.
It also owns the plugin manager used to hand actions to consumers.

INVARIANT: Only :meth:`ContractHost.instantiate` writes ``ContractState``;
the core reads it and never changes it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tfctl.domain.processor import CommandProcessor, QueryResolver
from tfctl.domain.state import ContractInfo, ContractState, Response, instantiate
from tfctl.infrastructure.addresses import Bech32AddressValidator
from tfctl.infrastructure.resolver import LocalDenomResolver
from tfctl.plugins.manager import PluginManager

if TYPE_CHECKING:
    from tfctl.config.settings import TfSettings
    from tfctl.domain.ports import AddressValidator, Resolver

logger = logging.getLogger(__name__)


class ContractHost:
    """Wires the core to concrete collaborators built from settings.

    Args:
        settings: Source of contract address, chain prefix, and resolver limits.
        resolver: Override the local resolver (e.g. a chain-backed one).
        addresses: Override the bech32 address validator.
        plugins: Pre-built plugin manager; when omitted one is created and,
            if ``[plugins] enabled``, entry points are loaded.
    """

    def __init__(
        self,
        settings: TfSettings,
        *,
        resolver: Resolver | None = None,
        addresses: AddressValidator | None = None,
        plugins: PluginManager | None = None,
    ) -> None:
        self.settings = settings
        self.resolver: Resolver = resolver or LocalDenomResolver(
            max_subdenom_length=settings.resolver.max_subdenom_length,
            max_creator_length=settings.resolver.max_creator_length,
        )
        self.addresses: AddressValidator = addresses or Bech32AddressValidator(
            settings.chain.bech32_prefix
        )
        self.contract_address = settings.contract.address

        if plugins is None:
            plugins = PluginManager()
            if settings.plugins.enabled:
                plugins.discover_and_load()
        self.plugins = plugins

        self._state: ContractState | None = None
        self._info: ContractInfo | None = None
        if settings.contract.owner is not None:
            self._state = ContractState(owner=settings.contract.owner)
            self._info = ContractInfo(
                contract=settings.contract.name, version=settings.contract.version
            )

        self.processor = CommandProcessor(self.resolver, self.addresses, self.contract_address)
        self.queries = QueryResolver(self.resolver)

    @property
    def state(self) -> ContractState | None:
        return self._state

    @property
    def info(self) -> ContractInfo | None:
        return self._info

    def instantiate(self, sender: str) -> tuple[ContractInfo, Response]:
        """Record *sender* as owner; return the recorded info and the response."""
        state, info, response = instantiate(
            sender, self.settings.contract.version, contract=self.settings.contract.name
        )
        self._state = state
        self._info = info
        logger.debug("Instantiated %s %s owned by %s", info.contract, info.version, sender)
        return info, response
