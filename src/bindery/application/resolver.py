import logging
from typing import Any, List

from bindery.domain import Binding, CircularDependencyError, IContainer, IResolver

logger = logging.getLogger(__name__)


class DependencyResolver(IResolver):
    """Builds instances from a binding's declared dependencies.

    Each declared dependency is either a name, resolved recursively through the
    container, or a literal passed through untouched. A name that cannot be
    resolved is used literally, so a dependency slot may hold either an
    indirection or a plain string.

    Attributes:
        literal_fallback: When False, failures resolving a string dependency
            propagate instead of degrading to the literal.
    """

    def __init__(self, literal_fallback: bool = True) -> None:
        self.literal_fallback = literal_fallback

    def construct(self, binding: Binding, container: IContainer) -> Any:
        """Call the binding's value with its resolved dependencies.

        Args:
            binding: The class or singleton binding to construct.
            container: The container to resolve named dependencies from.

        Returns:
            The new instance.

        Example:
            >>> binding = Binding(Repository, dependencies=("db", 42))
            >>> resolver.construct(binding, container)  # Repository(container.resolve("db"), 42)
        """
        if not binding.dependencies:
            return binding.value()

        arguments = self.resolve_arguments(binding, container)
        return binding.value(*arguments)

    def resolve_arguments(self, binding: Binding, container: IContainer) -> List[Any]:
        return [self.resolve_argument(dependency, container) for dependency in binding.dependencies]

    def resolve_argument(self, dependency: Any, container: IContainer) -> Any:
        """Resolve a single dependency descriptor.

        Args:
            dependency: A name to resolve or a literal value.
            container: The container to resolve names from.

        Returns:
            The resolved value, or the descriptor itself when it is not a
            string or when resolving it failed.

        Raises:
            CircularDependencyError: Cycles are never degraded to literals.
        """
        if not isinstance(dependency, str):
            return dependency

        try:
            return container.resolve(dependency)
        except CircularDependencyError:
            raise
        except Exception as e:
            if not self.literal_fallback:
                raise
            logger.debug("Using %r as a literal argument, resolution failed: %s", dependency, e)
            return dependency
