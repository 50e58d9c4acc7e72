"""
bindery: Minimal name-based inversion-of-control registry.

Public API exports for the bindery package.
"""

# Application exports
from bindery.application.container import BindingHandle, Container
from bindery.application.module_loader import ImportlibModuleLoader, NullModuleLoader

# Domain exports
from bindery.domain.enums import BindingKind
from bindery.domain.exceptions import (
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
from bindery.domain.interfaces import IModuleLoader
from bindery.domain.models import Binding, ContainerSettings

__version__ = "0.1.0"

__all__ = [
    # Container
    "Container",
    "BindingHandle",
    "ContainerSettings",
    # Module loaders
    "IModuleLoader",
    "ImportlibModuleLoader",
    "NullModuleLoader",
    # Models
    "Binding",
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
]
