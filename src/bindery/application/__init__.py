"""
Application layer - Use cases and orchestration.

This layer contains the use cases that orchestrate domain objects.
It depends only on the Domain layer.
"""

from .container import BindingHandle, Container
from .lifetime_manager import LifetimeManager
from .module_loader import ImportlibModuleLoader, NullModuleLoader
from .resolution_guard import ResolutionGuard
from .resolver import DependencyResolver

__all__ = [
    "Container",
    "BindingHandle",
    "DependencyResolver",
    "LifetimeManager",
    "ResolutionGuard",
    "ImportlibModuleLoader",
    "NullModuleLoader",
]
