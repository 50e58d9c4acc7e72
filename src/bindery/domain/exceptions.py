from typing import Any, List, Optional


class DIException(Exception):
    """Base exception for DI-related errors."""


class InvalidBindingError(DIException):
    """Raised when a binding is created without a usable value.

    This occurs when:
    - No value is provided.
    - The value is neither a class nor a callable.
    """


class MissingDependenciesError(DIException):
    """Raised when dependencies are set on a binding without any arguments."""

    def __init__(self) -> None:
        super().__init__("No dependencies given.")


class UnknownKindError(DIException):
    """Raised when a binding kind outside class/factory/singleton is requested.

    Attributes:
        kind: The rejected kind value.
    """

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"Unknown binding kind: {kind!r}")


class AlreadyBoundError(DIException):
    """Raised when registering a name that is already bound.

    Attributes:
        name: The name that is already bound.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} is already bound.")


class CannotRebindSharedError(DIException):
    """Raised when rebinding a name that is bound as a singleton.

    Attributes:
        name: The shared binding name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Can not rebind shared instance: {name}")


class UnknownBindingError(DIException):
    """Raised when a name is neither bound nor loadable.

    Attributes:
        name: The name that could not be resolved.
        reason: Optional reason for the failure.
    """

    def __init__(self, name: str, reason: Optional[str] = None) -> None:
        self.name = name
        self.reason = reason
        message = f"Unknown binding: {name}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class CircularDependencyError(DIException):
    """Raised when a circular dependency is detected.

    Attributes:
        dependency_chain: Names involved in the cycle, first and last are equal.
    """

    def __init__(self, dependency_chain: List[str]) -> None:
        self.dependency_chain = dependency_chain
        message = f"Circular dependency detected: {' -> '.join(dependency_chain)}"
        super().__init__(message)


class BindingLockedError(DIException):
    """Raised when changing a binding that has already been resolved.

    Use ``rebind`` to replace a non-shared binding instead.

    Attributes:
        name: The finalized binding name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Binding {name} has already been resolved and can no longer be changed.")
