"""Domain layer — wire messages, denom rules, and command dispatch.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
External capabilities (resolver, address validator) arrive through the
protocols in :mod:`tfctl.domain.ports`.
"""
