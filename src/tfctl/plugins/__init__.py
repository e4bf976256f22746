"""Extension layer — plugin system via pluggy.

Ledger-authority consumers and observers receive accepted actions through
the ``post_*`` hooks. Discovery: ``tfctl.plugins`` entry points.
INVARIANT: Plugin failures are warnings, never errors.
"""

from tfctl.plugins.hookspecs import hookimpl
from tfctl.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
