"""Plugin discovery, registration, and synchronous hook dispatch."""

from __future__ import annotations

import inspect
import logging
from typing import Any

import pluggy

from tfctl.plugins.hookspecs import PROJECT_NAME, TfctlHookSpec

ENTRY_POINT_GROUP = "tfctl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Wraps a pluggy manager bound to the tfctl hook specs."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(TfctlHookSpec)
        self._loaded = False

    def discover_and_load(self) -> list[str]:
        """Load plugins advertised under the ``tfctl.plugins`` entry-point group.

        Returns the names of all registered plugins.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_plugin_classes()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def dispatch(self, hook_name: str, warnings: list[str], **payload: Any) -> None:
        """Call *hook_name* on every plugin; failures become *warnings*."""
        caller = getattr(self.hook, hook_name)
        try:
            caller(**payload)
        except Exception:
            logger.warning("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")

    def _instantiate_plugin_classes(self) -> None:
        """Replace entry points that registered a class with an instance of it.

        Hook dispatch against a class object leaves ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning("Failed to instantiate plugin %s", plugin_name, exc_info=True)
                continue
            self._pm.register(instance, name=plugin_name)
