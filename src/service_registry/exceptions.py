"""Exceptions raised by the service registry.

Every failure is raised synchronously to the direct caller and leaves the
registry state unchanged. All exceptions derive from ``ServiceRegistryError``
so callers can catch the whole family at once:

```python
try:
    registry.rebind(DATABASE, make_database)
except ServiceRegistryError as e:
    logger.error(f"Registry error: {e}")
```
"""

from typing import Any


class ServiceRegistryError(Exception):
    """Base exception for all service registry errors."""


class InvalidIdentifierError(ServiceRegistryError):
    """Raised when an identifier is None or cannot be used as a mapping key."""

    def __init__(self, operation: str, identifier: Any = None):
        self.operation = operation
        self.identifier = identifier
        if identifier is None:
            message = f"[{operation}] Identifier must not be None."
        else:
            message = f"[{operation}] Identifier must be hashable, received: {type(identifier).__name__}"
        super().__init__(message)


class InvalidFactoryError(ServiceRegistryError):
    """Raised when a binding is created with a factory that is not callable."""

    def __init__(self, factory: Any):
        self.factory = factory
        super().__init__(f"[ServiceBinding] Factory must be callable, received: {type(factory).__name__}")


class LockedServiceError(ServiceRegistryError):
    """Raised when a locked service would be overridden, unbound or rebound.

    Locked services can still be resolved.
    """

    _ACTIONS = {
        "bind": "overridden",
        "bind_instance": "overridden",
        "unbind": "unbound",
        "rebind": "rebound",
    }

    def __init__(self, operation: str, identifier: Any):
        self.operation = operation
        self.identifier = identifier
        action = self._ACTIONS.get(operation, "modified")
        super().__init__(f'[{operation}] Service "{identifier}" is locked and cannot be {action}.')


class UnboundServiceError(ServiceRegistryError, KeyError):
    """Raised when resolving an identifier that has no binding.

    Also a ``KeyError`` so it can be handled like a failed mapping lookup.
    """

    def __init__(self, operation: str, identifier: Any):
        self.operation = operation
        self.identifier = identifier
        super().__init__(f'[{operation}] Service "{identifier}" is not bound.')

    def __str__(self) -> str:
        # KeyError would otherwise render the message with quotes around it
        return str(self.args[0])


class EmptySnapshotStackError(ServiceRegistryError):
    """Raised when restoring with no snapshots on the stack."""

    def __init__(self, operation: str = "restore"):
        self.operation = operation
        super().__init__(f"[{operation}] No snapshots available to restore.")
