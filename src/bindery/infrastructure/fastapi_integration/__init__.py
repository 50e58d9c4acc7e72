"""
FastAPI integration module.

Provides helpers for resolving bindery names inside FastAPI endpoints.
"""

from .integration import create_fastapi_dependency, provide

__all__ = [
    "create_fastapi_dependency",
    "provide",
]
