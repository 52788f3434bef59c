"""Recoverable navigation errors.

None of these are fatal: the runtime loop rings the bell, shows the message,
and keeps accepting events.
"""

from __future__ import annotations


class NavigationError(Exception):
    """Base class for transitions that could not be applied."""


class ListingUnavailable(NavigationError):
    """The listing provider failed for ``path``; the session did not move."""

    def __init__(self, path: str, cause: BaseException | None = None) -> None:
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or (str(cause) if cause is not None else "")
        message = f"Cannot list {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NoSelection(NavigationError):
    """Commit or history descend with nothing to act on."""

    def __init__(self, message: str = "Nothing selected") -> None:
        super().__init__(message)


class AtRoot(NavigationError):
    """Ascend requested with no parent segment left."""

    def __init__(self, path: str = "/") -> None:
        self.path = path
        super().__init__(f"Already at {path}")


__all__ = [
    "AtRoot",
    "ListingUnavailable",
    "NavigationError",
    "NoSelection",
]
