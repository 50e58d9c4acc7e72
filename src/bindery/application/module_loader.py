"""Application layer - Collaborators for names that have no binding."""

import importlib
import logging
from typing import Any

from bindery.domain import IModuleLoader

logger = logging.getLogger(__name__)


class ImportlibModuleLoader(IModuleLoader):
    """Loads unbound names as Python modules.

    ``"json"`` returns the ``json`` module and ``"os.path:join"`` returns the
    ``join`` attribute of ``os.path``.
    """

    def load(self, name: str) -> Any:
        """Import the module named by ``name``.

        Args:
            name: A dotted module path, optionally followed by ``:attribute``.

        Returns:
            The module, or the named attribute of the module.

        Raises:
            ImportError: If the module cannot be imported.
            AttributeError: If the attribute does not exist.
            ValueError: If the name is empty.
        """
        module_name, _, attribute = name.partition(":")
        if not module_name:
            raise ValueError(f"Invalid module name: {name!r}")

        module = importlib.import_module(module_name)
        logger.debug("Loaded module %s for unbound name %s", module_name, name)

        if not attribute:
            return module

        value: Any = module
        for part in attribute.split("."):
            value = getattr(value, part)
        return value


class NullModuleLoader(IModuleLoader):
    """Loader that never finds anything."""

    def load(self, name: str) -> Any:
        raise LookupError(f"No module loader configured for {name}")
