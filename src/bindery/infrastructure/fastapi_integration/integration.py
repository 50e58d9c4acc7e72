from typing import Any, Callable

from fastapi import Depends

from bindery.domain import IContainer


def create_fastapi_dependency(container: IContainer, name: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that resolves a name from the container.

    The resolved value follows the binding's kind: singletons are shared
    across requests, class and factory bindings are created per call.

    Args:
        container: The container to resolve from.
        name: The binding name to resolve when the dependency is called.

    Returns:
        A zero-argument callable that FastAPI can use with Depends().

    Example:
        >>> container = Container()
        >>> container.register("users", UserRepository, dependencies=["db"])
        >>>
        >>> get_users = create_fastapi_dependency(container, "users")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_users)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Resolve the name from the container."""
        return container.resolve(name)

    dependency.__name__ = f"resolve_{name}"
    return dependency


def provide(container: IContainer, name: str) -> Any:
    """Shortcut returning ``Depends(create_fastapi_dependency(container, name))``.

    Example:
        >>> @app.get("/time")
        >>> def current_time(now: float = provide(container, "now")):
        ...     return {"now": now}
    """
    return Depends(create_fastapi_dependency(container, name))
