from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List

from bindery.domain.models import Binding


class IContainer(ABC):
    """Abstract interface for the binding registry."""

    @abstractmethod
    def is_bound(self, name: str) -> bool:
        """Determine if the given name has been bound."""

    @abstractmethod
    def register(self, name: str, value: Any, **options: Any) -> Any:
        """Register a binding under a name.

        Args:
            name: The binding name.
            value: The class or factory function to bind.
        """

    @abstractmethod
    def resolve(self, name: str) -> Any:
        """Resolve a name into a live value.

        Args:
            name: The binding name.
        """

    @abstractmethod
    def flush(self) -> None:
        """Clear all bindings and cached instances from the container."""

    @abstractmethod
    def get_raw_bindings(self) -> Dict[str, Binding]:
        """Get the live mapping of names to bindings."""


class IResolver(ABC):
    """Abstract interface for turning a binding into an instance."""

    @abstractmethod
    def construct(self, binding: Binding, container: IContainer) -> Any:
        """Resolve the binding's dependencies and call its value with them.

        Args:
            binding: The binding to construct.
            container: The container used to resolve named dependencies.

        Returns:
            The constructed instance.
        """

    @abstractmethod
    def resolve_arguments(self, binding: Binding, container: IContainer) -> List[Any]:
        """Turn the binding's declared dependencies into positional arguments."""


class ILifetimeManager(ABC):
    """Abstract interface for managing instance lifetimes."""

    @abstractmethod
    def get_or_create(self, name: str, binding: Binding, factory: Callable[[], Any]) -> Any:
        """Get an existing instance or create a new one based on the binding kind.

        Args:
            name: The binding name, used as cache key.
            binding: The binding being resolved.
            factory: A callable creating a new instance if needed.
        """

    @abstractmethod
    def has_instance(self, name: str) -> bool:
        """Determine if an instance is cached under the name."""

    @abstractmethod
    def forget(self, name: str) -> None:
        """Drop the cached instance for a name, if any."""

    @abstractmethod
    def clear_cache(self) -> None:
        """Clear all cached instances."""

    @abstractmethod
    def get_singleton_cache(self) -> Dict[str, Any]:
        """Get the live mapping of names to cached instances."""


class IModuleLoader(ABC):
    """Collaborator consulted for names that have no binding."""

    @abstractmethod
    def load(self, name: str) -> Any:
        """Load the value for a name.

        Args:
            name: The unbound name.

        Returns:
            The loaded value.

        Raises:
            Exception: Any exception signals that the name cannot be loaded.
        """
