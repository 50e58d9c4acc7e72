"""
Domain layer - Core business logic and models.

This layer contains the fundamental rules and models of the binding registry.
It has no dependencies on other layers.
"""

from .enums import BindingKind
from .exceptions import (
    AlreadyBoundError,
    BindingLockedError,
    CannotRebindSharedError,
    CircularDependencyError,
    DIException,
    InvalidBindingError,
    MissingDependenciesError,
    UnknownBindingError,
    UnknownKindError,
)
from .interfaces import IContainer, ILifetimeManager, IModuleLoader, IResolver
from .models import Binding, ContainerSettings

__all__ = [
    # Enums
    "BindingKind",
    # Exceptions
    "DIException",
    "InvalidBindingError",
    "MissingDependenciesError",
    "UnknownKindError",
    "AlreadyBoundError",
    "CannotRebindSharedError",
    "UnknownBindingError",
    "CircularDependencyError",
    "BindingLockedError",
    # Interfaces
    "IContainer",
    "IResolver",
    "ILifetimeManager",
    "IModuleLoader",
    # Models
    "Binding",
    "ContainerSettings",
]
