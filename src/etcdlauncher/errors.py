"""Domain errors for etcdlauncher."""


class LauncherError(RuntimeError):
    """Raised when the launcher cannot continue safely."""

    exit_code = 1


class UsageError(LauncherError):
    """Raised for command-line arguments the launcher does not understand."""


class ValidationError(LauncherError):
    """Raised when a configured input fails validation before any container call."""


class ContainerConflictError(LauncherError):
    """Raised when an existing container would need to be reconfigured."""
