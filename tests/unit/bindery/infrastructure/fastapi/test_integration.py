"""Unit tests for FastAPI integration."""

from unittest.mock import MagicMock

import pytest

pytest.importorskip("fastapi")

from fastapi import params

from bindery.application.container import Container
from bindery.domain import IContainer, UnknownBindingError
from bindery.infrastructure.fastapi_integration.integration import create_fastapi_dependency, provide


class TestCreateFastAPIDependency:
    """Test cases for create_fastapi_dependency function."""

    def test_creates_dependency_function(self):
        """Test that create_fastapi_dependency returns a named callable."""
        container = Container()
        container.register("service", object)

        dependency_func = create_fastapi_dependency(container, "service")

        assert callable(dependency_func)
        assert dependency_func.__name__ == "resolve_service"

    def test_dependency_function_resolves_from_container(self):
        """Test that the dependency function delegates to container.resolve."""
        container = MagicMock(spec=IContainer)
        container.resolve.return_value = "resolved"

        dependency_func = create_fastapi_dependency(container, "service")

        assert dependency_func() == "resolved"
        container.resolve.assert_called_once_with("service")

    def test_dependency_function_returns_singleton_instance(self):
        """Test that singleton bindings return the same instance."""
        container = Container()

        class SingletonService:
            pass

        container.register("service", SingletonService).mark_singleton()
        dependency_func = create_fastapi_dependency(container, "service")

        assert dependency_func() is dependency_func()

    def test_dependency_function_returns_new_class_instances(self):
        """Test that class bindings return different instances."""
        container = Container()

        class Service:
            pass

        container.register("service", Service)
        dependency_func = create_fastapi_dependency(container, "service")

        assert dependency_func() is not dependency_func()

    def test_dependency_function_raises_for_unknown_name(self):
        """Test that resolution errors surface when the dependency is called."""
        container = Container()
        dependency_func = create_fastapi_dependency(container, "bindery_no_such_module")

        with pytest.raises(UnknownBindingError):
            dependency_func()


class TestProvide:
    """Test cases for the provide shortcut."""

    def test_provide_returns_depends(self):
        """Test that provide wraps the resolver in Depends."""
        container = MagicMock(spec=IContainer)
        container.resolve.return_value = 7

        marker = provide(container, "answer")

        assert isinstance(marker, params.Depends)
        assert marker.dependency() == 7
