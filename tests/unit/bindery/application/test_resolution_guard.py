"""Unit tests for ResolutionGuard."""

import threading

import pytest

from bindery.application.resolution_guard import ResolutionGuard
from bindery.domain import CircularDependencyError


class TestResolutionGuard:
    """Test cases for ResolutionGuard class."""

    def test_guard_starts_empty(self):
        """Test that nothing is in progress on a new guard."""
        guard = ResolutionGuard()
        assert guard.enabled is True
        assert guard.in_progress == ()

    def test_entering_tracks_nested_names(self):
        """Test that nested blocks are tracked outermost first."""
        guard = ResolutionGuard()

        with guard.entering("a"):
            with guard.entering("b"):
                assert guard.in_progress == ("a", "b")
            assert guard.in_progress == ("a",)

        assert guard.in_progress == ()

    def test_reentering_name_raises(self):
        """Test that re-entering a name raises with the chain."""
        guard = ResolutionGuard()

        with guard.entering("a"):
            with pytest.raises(CircularDependencyError) as exc_info:
                with guard.entering("a"):
                    pass

        assert exc_info.value.dependency_chain == ["a", "a"]

    def test_chain_starts_at_first_entry(self):
        """Test that names entered before the cycle are left out of the chain."""
        guard = ResolutionGuard()

        with pytest.raises(CircularDependencyError) as exc_info:
            with guard.entering("root"), guard.entering("a"), guard.entering("b"), guard.entering("a"):
                pass

        assert exc_info.value.dependency_chain == ["a", "b", "a"]
        assert guard.in_progress == ()

    def test_name_released_on_error(self):
        """Test that an exception inside the block releases the name."""
        guard = ResolutionGuard()

        with pytest.raises(RuntimeError):
            with guard.entering("a"):
                raise RuntimeError("boom")

        with guard.entering("a"):
            assert guard.in_progress == ("a",)

    def test_disabled_guard_tracks_nothing(self):
        """Test that a disabled guard allows re-entry."""
        guard = ResolutionGuard(enabled=False)

        with guard.entering("a"):
            with guard.entering("a"):
                assert guard.in_progress == ()

    def test_reset_inside_block(self):
        """Test that reset clears names without breaking the open block."""
        guard = ResolutionGuard()

        with guard.entering("a"):
            guard.reset()
            assert guard.in_progress == ()

        assert guard.in_progress == ()

    def test_names_are_thread_local(self):
        """Test that each thread tracks its own names."""
        guard = ResolutionGuard()
        seen = []

        def worker():
            with guard.entering("a"):
                seen.append(guard.in_progress)

        with guard.entering("a"):
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()

        assert seen == [("a",)]
