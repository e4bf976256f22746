"""Infrastructure layer — local stand-ins for the execution environment.

Adapters here implement the protocols in :mod:`tfctl.domain.ports` and raise
the domain's error types. :class:`~tfctl.infrastructure.host.ContractHost`
bundles them with the contract address, state, and plugin manager.
"""
