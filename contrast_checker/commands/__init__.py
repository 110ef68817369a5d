"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by contrast_checker.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary.
"""

# PyInstaller hidden imports, keep this list in sync with command modules
import contrast_checker.commands.all as _all  # noqa: F401
import contrast_checker.commands.contrast as _contrast  # noqa: F401
import contrast_checker.commands.luminance as _luminance  # noqa: F401
import contrast_checker.commands.parse as _parse  # noqa: F401
import contrast_checker.commands.sample as _sample  # noqa: F401
