class RbkitError(Exception):
    """Base class for errors raised by rbkit itself (platform errors propagate as-is)."""


class InvalidArityError(RbkitError, ValueError):
    pass


class HomeDirectoryNotFoundError(RbkitError, KeyError):
    """No home directory is known for the requested user."""

    def __init__(self, user: str):
        super().__init__(user)
        self.user = user

    def __str__(self) -> str:
        return f"home directory not found for user '{self.user}'"


class DirectoryNotEmptyError(RbkitError, OSError):
    pass


class RemoveDirectoryError(RbkitError, OSError):
    """Wraps the platform error raised while removing a directory."""
