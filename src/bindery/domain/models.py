import inspect
from typing import Any, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from bindery.domain.enums import BindingKind
from bindery.domain.exceptions import InvalidBindingError, MissingDependenciesError


class Binding(BaseModel):
    """Value object describing one registered entry.

    Bindings are immutable. The builder-style methods return an updated copy
    and leave the original untouched.

    Attributes:
        value: The class or callable behind the binding.
        kind: How the value is turned into a live object.
        dependencies: Ordered dependency descriptors. Strings are resolved by
            name, anything else is passed through as a literal.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = Field(..., description="The class or factory function being bound.")
    kind: BindingKind = Field(..., description="The resolution kind of the binding.")
    dependencies: Tuple[Any, ...] = Field(
        default=(),
        description="Ordered dependency names or literal values.",
    )

    def __init__(
        self,
        value: Any = None,
        kind: Optional[Union[BindingKind, str]] = None,
        dependencies: Sequence[Any] = (),
        **data: Any,
    ) -> None:
        if value is None:
            raise InvalidBindingError("No value provided.")
        if not callable(value):
            raise InvalidBindingError(f"Value {value!r} is neither a class nor a callable.")
        if isinstance(dependencies, (str, bytes)):
            raise InvalidBindingError(
                f"Dependencies must be a sequence of names or literals, got {dependencies!r}. "
                "Wrap a single name in a list."
            )

        if kind is None:
            kind = BindingKind.CLASS if inspect.isclass(value) else BindingKind.FACTORY

        super().__init__(
            value=value,
            kind=BindingKind.parse(kind),
            dependencies=tuple(dependencies),
            **data,
        )

    @property
    def is_shared(self) -> bool:
        """True for singleton bindings."""
        return self.kind == BindingKind.SINGLETON

    @property
    def is_factory(self) -> bool:
        """True for factory bindings."""
        return self.kind == BindingKind.FACTORY

    @property
    def is_class(self) -> bool:
        """True for plain class bindings."""
        return self.kind == BindingKind.CLASS

    def mark_singleton(self) -> "Binding":
        """Return a copy of this binding marked as a singleton."""
        return self.model_copy(update={"kind": BindingKind.SINGLETON})

    def set_dependencies(self, *dependencies: Any) -> "Binding":
        """Return a copy of this binding with the given dependencies.

        Args:
            *dependencies: Names to resolve or literal values, in constructor order.

        Raises:
            MissingDependenciesError: If no dependency is given.
        """
        if not dependencies:
            raise MissingDependenciesError()
        return self.model_copy(update={"dependencies": tuple(dependencies)})

    def set_kind(self, kind: Union[BindingKind, str]) -> "Binding":
        """Return a copy of this binding with another kind.

        Raises:
            UnknownKindError: If the kind is not class, factory or singleton.
        """
        return self.model_copy(update={"kind": BindingKind.parse(kind)})


class ContainerSettings(BaseModel):
    """Configuration of a container.

    Attributes:
        module_fallback: Consult the module loader for names with no binding.
        detect_cycles: Fail fast on circular dependencies instead of recursing.
        literal_fallback: Pass unresolvable string dependencies as literals.
    """

    model_config = ConfigDict(frozen=True)

    module_fallback: bool = Field(
        default=True,
        description="Resolve unbound names through the module loader.",
    )
    detect_cycles: bool = Field(
        default=True,
        description="Raise CircularDependencyError when a name is re-entered during resolution.",
    )
    literal_fallback: bool = Field(
        default=True,
        description="Use a string dependency literally when it cannot be resolved.",
    )
