import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Set, Union

from bindery.application.lifetime_manager import LifetimeManager
from bindery.application.module_loader import ImportlibModuleLoader, NullModuleLoader
from bindery.application.resolution_guard import ResolutionGuard
from bindery.application.resolver import DependencyResolver
from bindery.domain import (
    AlreadyBoundError,
    Binding,
    BindingKind,
    BindingLockedError,
    CannotRebindSharedError,
    ContainerSettings,
    IContainer,
    ILifetimeManager,
    IModuleLoader,
    IResolver,
    UnknownBindingError,
)

logger = logging.getLogger(__name__)


class BindingHandle:
    """Chainable view on a binding stored in a container.

    Returned by ``Container.register`` so callers can finish configuring the
    binding in place. Every call replaces the stored binding with an updated
    copy. Once the name has been resolved the binding is final.

    Example:
        >>> container.register("db", Database).mark_singleton().set_dependencies("dbConfig")
    """

    def __init__(self, container: "Container", name: str) -> None:
        self._container = container
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def binding(self) -> Binding:
        """The binding currently stored under this handle's name."""
        return self._container._get_binding(self._name)

    def mark_singleton(self) -> "BindingHandle":
        self._container._amend(self._name, lambda binding: binding.mark_singleton())
        return self

    def set_dependencies(self, *dependencies: Any) -> "BindingHandle":
        self._container._amend(self._name, lambda binding: binding.set_dependencies(*dependencies))
        return self

    def set_kind(self, kind: Union[BindingKind, str]) -> "BindingHandle":
        self._container._amend(self._name, lambda binding: binding.set_kind(kind))
        return self

    def __repr__(self) -> str:
        return f"BindingHandle(name={self._name!r})"


class Container(IContainer):
    """Registry mapping names to bindings.

    Owns the resolution algorithm, the binding lifecycle (register, rebind,
    forget, flush) and the inspection queries. Containers are plain objects:
    create one per application, or one per test for isolation.

    The container performs no locking. Hosts resolving from several threads
    must serialize access themselves.

    Attributes:
        settings: The container configuration.
        _bindings: Dictionary mapping names to their bindings.
        _resolved: Names resolved at least once, whose bindings are final.
        _loader: Collaborator consulted for unbound names.
        _resolver: Component constructing class and singleton bindings.
        _lifetime_manager: Component caching singleton instances.
        _resolution_guard: Names being resolved, for cycle detection.
    """

    def __init__(
        self,
        loader: Optional[IModuleLoader] = None,
        settings: Optional[ContainerSettings] = None,
    ) -> None:
        """Initialize the container.

        Args:
            loader: Collaborator for unbound names. Defaults to importing them
                as modules, or to a loader that never succeeds when
                ``settings.module_fallback`` is off.
            settings: Container configuration. Defaults to ``ContainerSettings()``.
        """
        self.settings = settings or ContainerSettings()
        if loader is None:
            loader = ImportlibModuleLoader() if self.settings.module_fallback else NullModuleLoader()

        self._bindings: Dict[str, Binding] = {}
        self._resolved: Set[str] = set()
        self._loader: IModuleLoader = loader
        self._resolver: IResolver = DependencyResolver(literal_fallback=self.settings.literal_fallback)
        self._lifetime_manager: ILifetimeManager = LifetimeManager()
        self._resolution_guard = ResolutionGuard(enabled=self.settings.detect_cycles)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def _get_binding(self, name: str) -> Binding:
        if name not in self._bindings:
            raise UnknownBindingError(name)
        return self._bindings[name]

    def _amend(self, name: str, update: Callable[[Binding], Binding]) -> None:
        """Replace a stored binding with an updated copy.

        Raises:
            UnknownBindingError: If the name is no longer bound.
            BindingLockedError: If the name has already been resolved.
        """
        binding = self._get_binding(name)
        if name in self._resolved:
            raise BindingLockedError(name)
        self._bindings[name] = update(binding)

    def is_bound(self, name: str) -> bool:
        """Determine if the given name has been bound."""
        return name in self._bindings

    def is_shared(self, name: str) -> bool:
        """Determine if the given name is bound as a singleton."""
        if not self.is_bound(name):
            return False
        return self._bindings[name].is_shared

    def is_factory(self, name: str) -> bool:
        """Determine if the given name is bound as a factory."""
        if not self.is_bound(name):
            return False
        return self._bindings[name].is_factory

    def register(
        self,
        name: str,
        value: Any,
        kind: Optional[Union[BindingKind, str]] = None,
        dependencies: Optional[Sequence[Any]] = None,
    ) -> BindingHandle:
        """Register a binding with the container.

        Args:
            name: The binding name.
            value: A class, or a zero-argument factory function.
            kind: Optional explicit kind. Classes default to ``CLASS`` and
                other callables to ``FACTORY``.
            dependencies: Optional ordered names or literals passed to the
                constructor.

        Returns:
            A handle for chaining ``mark_singleton``, ``set_dependencies`` and
            ``set_kind``.

        Raises:
            AlreadyBoundError: If the name is already bound.
            InvalidBindingError: If the value is missing or not callable.
            UnknownKindError: If the kind is not valid.

        Example:
            >>> container.register("dbConfig", DatabaseConfig).mark_singleton()
            >>> container.register("db", Database, dependencies=["dbConfig", 42])
            >>> container.register("now", time.time)
        """
        if self.is_bound(name):
            raise AlreadyBoundError(name)

        binding = Binding(value, kind=kind, dependencies=() if dependencies is None else dependencies)
        self._bindings[name] = binding
        logger.debug("Registered %s as %s", name, binding.kind)

        return BindingHandle(self, name)

    def bind(
        self,
        name: str,
        value: Any,
        kind: Optional[Union[BindingKind, str]] = None,
        dependencies: Optional[Sequence[Any]] = None,
    ) -> BindingHandle:
        """Alias for register."""
        return self.register(name, value, kind=kind, dependencies=dependencies)

    def rebind(
        self,
        name: str,
        value: Any,
        kind: Optional[Union[BindingKind, str]] = None,
        dependencies: Optional[Sequence[Any]] = None,
    ) -> BindingHandle:
        """Replace a binding with a fresh registration.

        Raises:
            CannotRebindSharedError: If the name is bound as a singleton.
        """
        if self.is_bound(name):
            if self.is_shared(name):
                raise CannotRebindSharedError(name)

            del self._bindings[name]
            self._resolved.discard(name)
            logger.debug("Removed binding %s for rebind", name)

        return self.register(name, value, kind=kind, dependencies=dependencies)

    def forget_instance(self, name: str) -> None:
        """Remove a resolved shared instance from the instance cache."""
        if self.is_shared(name) and self._lifetime_manager.has_instance(name):
            self._lifetime_manager.forget(name)
            logger.debug("Forgot shared instance %s", name)

    def forget_all_shared_instances(self) -> None:
        """Clear all of the shared instances from the container."""
        self._lifetime_manager.clear_cache()

    def flush(self) -> None:
        """Flush the container of all bindings and instances."""
        self._bindings.clear()
        self._resolved.clear()
        self._lifetime_manager.clear_cache()
        self._resolution_guard.reset()
        logger.debug("Flushed container")

    def _values_of_kind(self, kind: BindingKind) -> List[Any]:
        return [binding.value for binding in self._bindings.values() if binding.kind == kind]

    def get_class_bindings(self) -> List[Any]:
        """Get the values of the plain class bindings, in registration order."""
        return self._values_of_kind(BindingKind.CLASS)

    def get_singletons(self) -> List[Any]:
        """Get the values of the singleton bindings, in registration order."""
        return self._values_of_kind(BindingKind.SINGLETON)

    def get_factories(self) -> List[Any]:
        """Get the values of the factory bindings, in registration order."""
        return self._values_of_kind(BindingKind.FACTORY)

    def get_instances(self) -> Dict[str, Any]:
        """Get the live mapping of names to resolved shared instances."""
        return self._lifetime_manager.get_singleton_cache()

    def get_raw_bindings(self) -> Dict[str, Binding]:
        """For diagnostics, get the live mapping of names to bindings."""
        return self._bindings

    def resolve(self, name: str) -> Any:
        """Resolve the given name from the container.

        Singleton bindings are constructed once and cached, class bindings are
        constructed on every call and factory bindings are called on every
        call. Unbound names are handed to the module loader.

        Args:
            name: The binding name.

        Returns:
            The resolved value.

        Raises:
            UnknownBindingError: If the name is neither bound nor loadable.
            CircularDependencyError: If the name is already being resolved.

        Example:
            >>> logger = container.resolve("Logger")
        """
        with self._resolution_guard.entering(name):
            binding = self._bindings.get(name)
            if binding is None:
                return self._load(name)

            instance = self._lifetime_manager.get_or_create(name, binding, lambda: self._create(binding))
            self._resolved.add(name)
            return instance

    def make(self, name: str) -> Any:
        """Alias for resolve."""
        return self.resolve(name)

    def _create(self, binding: Binding) -> Any:
        if binding.is_factory:
            return binding.value()
        return self._resolver.construct(binding, self)

    def _load(self, name: str) -> Any:
        if not self.settings.module_fallback:
            raise UnknownBindingError(name)

        try:
            return self._loader.load(name)
        except Exception as e:
            raise UnknownBindingError(name, str(e)) from e
