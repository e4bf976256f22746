"""BaseService: common foundation for tfctl services.

Every service receives a :class:`ContractHost` at construction time. The
host supplies the processor, query resolver, contract state, and plugin
manager; services never build collaborators themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tfctl.infrastructure.host import ContractHost


class BaseService:
    """Base for service-layer classes.

    Usage::

        class AuditService(BaseService):
            def owner(self) -> ServiceResult:
                state = self._host.state
                ...
    """

    def __init__(self, host: ContractHost) -> None:
        self._host = host

    def _dispatch_event(self, hook_name: str, warnings: list[str], **payload: Any) -> None:
        """Notify plugins. A failing plugin adds a warning and nothing else."""
        self._host.plugins.dispatch(hook_name, warnings, **payload)
