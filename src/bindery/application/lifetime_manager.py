import logging
from typing import Any, Callable, Dict

from bindery.domain import Binding, ILifetimeManager

logger = logging.getLogger(__name__)


class LifetimeManager(ILifetimeManager):
    """Manages instance lifetimes for singleton, class and factory bindings.

    Singleton results are cached by name. Class and factory bindings are
    created fresh on every call. Errors raised while creating an instance
    propagate unchanged and leave the cache untouched.

    Attributes:
        _singleton_cache: Cache of resolved singleton instances keyed by name.
    """

    def __init__(self) -> None:
        self._singleton_cache: Dict[str, Any] = {}

    def get_or_create(self, name: str, binding: Binding, factory: Callable[[], Any]) -> Any:
        """Get existing instance or create new one based on the binding kind.

        Args:
            name: The binding name.
            binding: The binding being resolved.
            factory: Function to create a new instance if needed.

        Returns:
            Instance according to the kind:
            - Singleton: Returns cached instance or creates and caches new one
            - Class/Factory: Always creates new instance
        """
        if binding.is_shared:
            if name not in self._singleton_cache:
                instance = factory()
                self._singleton_cache[name] = instance
                logger.debug("Cached shared instance for %s", name)
            return self._singleton_cache[name]

        return factory()

    def has_instance(self, name: str) -> bool:
        """Determine if a shared instance is cached under the name."""
        return name in self._singleton_cache

    def forget(self, name: str) -> None:
        """Drop the cached instance for a name, if any."""
        self._singleton_cache.pop(name, None)

    def clear_cache(self) -> None:
        """Clear all cached singleton instances."""
        self._singleton_cache.clear()

    def get_singleton_cache(self) -> Dict[str, Any]:
        """Get a reference to the live singleton cache.

        Returns:
            The cache itself, not a copy.
        """
        return self._singleton_cache
