"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tfctl.toml only contains overrides.
A fresh setup typically needs only ``[contract] owner``.
"""

from __future__ import annotations

from pydantic import BaseModel

from tfctl import __version__
from tfctl.domain.state import CONTRACT_NAME

DEFAULT_CONTRACT_ADDRESS = "cosmos14hj2tavq8fpesdwxxcu44rty3hh90vhujrvcmstl4zr3txmfvw9s4hmalr"


class ContractConfig(BaseModel):
    """[contract] section."""

    model_config = {"frozen": True}

    address: str = DEFAULT_CONTRACT_ADDRESS
    owner: str | None = None
    name: str = CONTRACT_NAME
    version: str = __version__


class ChainConfig(BaseModel):
    """[chain] section."""

    model_config = {"frozen": True}

    bech32_prefix: str = "cosmos"


class ResolverConfig(BaseModel):
    """[resolver] section: limits applied by the local denom resolver."""

    model_config = {"frozen": True}

    max_subdenom_length: int = 44
    max_creator_length: int = 75


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True

