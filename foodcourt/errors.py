"""Exceptions raised by workflows and the record store."""

__all__ = ["WorkflowError", "InvalidInput", "Conflict", "NotFound", "AuthenticationFailed", "StorageError"]


# Recoverable: the current leaf action is aborted and control returns to its menu.
class WorkflowError(Exception):
    pass


class InvalidInput(WorkflowError):
    pass


class Conflict(WorkflowError):
    pass


class NotFound(WorkflowError):
    pass


class AuthenticationFailed(WorkflowError):
    pass


# Unrecoverable: a collection could not be read or written.
class StorageError(Exception):
    pass
