"""Server-wide dependency state."""

from deploy_ssh.dependencies import Dependencies

# Initialized on first access
_deps: Dependencies | None = None


def get_dependencies() -> Dependencies:
    """Get or create the dependency container."""
    global _deps
    if _deps is None:
        _deps = Dependencies.create()
    return _deps


def set_dependencies(deps: Dependencies) -> None:
    """Set the global dependency container.

    Allows tests to inject a custom client without modifying module internals.
    """
    global _deps
    _deps = deps


def reset_state() -> None:
    """Clear the dependency container. Used by test fixtures."""
    global _deps
    _deps = None
