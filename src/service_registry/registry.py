"""Service registry for dependency injection.

The registry maps identifiers to ``ServiceBinding`` objects and supports
locking bindings against replacement and saving/restoring the binding map.

```python
registry = ServiceRegistry()
registry.bind(Settings, get_settings, locked=True).bind("clock", time.monotonic, transient=True)

registry.snapshot()
registry.rebind("clock", lambda: 0.0)
...
registry.restore()  # "clock" is time.monotonic again
```

Snapshots copy the binding map, not the bindings in it. A singleton first
resolved after ``snapshot()`` stays resolved after ``restore()`` because the
restored map holds the same ``ServiceBinding`` object. The lock set is not part
of a snapshot either: locks added or removed after ``snapshot()`` survive
``restore()``.
"""

from collections.abc import Hashable
from functools import lru_cache
from typing import Any, TypeVar, overload

from loguru import logger

from .binding import ServiceBinding, ServiceFactory
from .exceptions import (
    EmptySnapshotStackError,
    InvalidIdentifierError,
    LockedServiceError,
    UnboundServiceError,
)
from .token import Token

T = TypeVar("T")
ServiceIdentifier = Hashable


def _is_valid_identifier(identifier: Any) -> bool:
    if identifier is None:
        return False
    try:
        hash(identifier)
    except TypeError:
        return False
    return True


def _check_identifier(operation: str, identifier: Any) -> None:
    if not _is_valid_identifier(identifier):
        raise InvalidIdentifierError(operation, identifier)


class ServiceRegistry:
    """Registry of service bindings with locking and snapshot/restore.

    All mutating methods return the registry itself so calls can be chained.
    A failed call never changes the registry.
    """

    def __init__(self):
        """Initialize an empty service registry."""
        self._bindings: dict[ServiceIdentifier, ServiceBinding[Any]] = {}
        self._locked: set[ServiceIdentifier] = set()
        self._snapshots: list[dict[ServiceIdentifier, ServiceBinding[Any]]] = []

    def bind(
        self,
        identifier: ServiceIdentifier,
        factory: ServiceFactory[Any],
        transient: bool = False,
        locked: bool = False,
    ) -> "ServiceRegistry":
        """Bind an identifier to a factory, replacing any unlocked binding.

        Args:
            identifier: The service identifier
            factory: Zero-argument callable producing the service
            transient: If True, call the factory on every resolve instead of caching
            locked: If True, reject later rebind/unbind/bind of this identifier

        Returns:
            The registry itself

        Raises:
            InvalidIdentifierError: If the identifier is None or unhashable
            LockedServiceError: If the identifier is bound and locked
            InvalidFactoryError: If the factory is not callable
        """
        return self._bind("bind", identifier, factory, transient, locked)

    def bind_instance(self, identifier: ServiceIdentifier, instance: Any, locked: bool = False) -> "ServiceRegistry":
        """Bind an identifier to an existing instance.

        Args:
            identifier: The service identifier
            instance: The object every resolve returns
            locked: If True, reject later rebind/unbind/bind of this identifier

        Returns:
            The registry itself
        """
        return self._bind("bind_instance", identifier, lambda: instance, False, locked)

    def unbind(self, identifier: ServiceIdentifier) -> "ServiceRegistry":
        """Remove the binding for an identifier.

        Unbinding an identifier that is not bound does nothing.

        Raises:
            InvalidIdentifierError: If the identifier is None or unhashable
            LockedServiceError: If the identifier is locked
        """
        _check_identifier("unbind", identifier)
        if identifier in self._locked:
            raise LockedServiceError("unbind", identifier)

        self._bindings.pop(identifier, None)
        self._locked.discard(identifier)
        logger.debug(f"Unbound service {identifier}")
        return self

    def rebind(
        self,
        identifier: ServiceIdentifier,
        factory: ServiceFactory[Any],
        transient: bool = False,
    ) -> "ServiceRegistry":
        """Replace the binding for an identifier with a new, unlocked one.

        Raises:
            InvalidIdentifierError: If the identifier is None or unhashable
            LockedServiceError: If the identifier is locked
            InvalidFactoryError: If the factory is not callable
        """
        _check_identifier("rebind", identifier)
        if identifier in self._locked:
            raise LockedServiceError("rebind", identifier)

        binding = ServiceBinding(factory, transient)
        self._bindings.pop(identifier, None)
        self._bindings[identifier] = binding
        logger.debug(f"Rebound service {identifier} ({binding.mode.value})")
        return self

    @overload
    def resolve(self, identifier: Token[T]) -> T: ...

    @overload
    def resolve(self, identifier: ServiceIdentifier) -> Any: ...

    def resolve(self, identifier):
        """Get the service value bound to an identifier.

        Args:
            identifier: The service identifier

        Returns:
            The value produced by the binding

        Raises:
            InvalidIdentifierError: If the identifier is None or unhashable
            UnboundServiceError: If nothing is bound to the identifier
        """
        _check_identifier("resolve", identifier)
        binding = self._bindings.get(identifier)
        if binding is None:
            raise UnboundServiceError("resolve", identifier)

        logger.trace(f"Resolving service {identifier} ({binding.mode.value})")
        return binding.get_value()

    def snapshot(self) -> "ServiceRegistry":
        """Push a copy of the current bindings onto the snapshot stack."""
        self._snapshots.append(dict(self._bindings))
        logger.debug(f"Took snapshot of {len(self._bindings)} bindings (depth={len(self._snapshots)})")
        return self

    def restore(self) -> "ServiceRegistry":
        """Replace the bindings with the most recent snapshot.

        Locks are left as they are.

        Raises:
            EmptySnapshotStackError: If no snapshot has been taken
        """
        if not self._snapshots:
            raise EmptySnapshotStackError("restore")

        self._bindings = self._snapshots.pop()
        logger.debug(f"Restored snapshot of {len(self._bindings)} bindings (depth={len(self._snapshots)})")
        return self

    def is_bound(self, identifier: ServiceIdentifier) -> bool:
        """Check whether an identifier currently has a binding."""
        return _is_valid_identifier(identifier) and identifier in self._bindings

    def is_locked(self, identifier: ServiceIdentifier) -> bool:
        """Check whether an identifier is locked, bound or not."""
        return _is_valid_identifier(identifier) and identifier in self._locked

    @property
    def snapshot_depth(self) -> int:
        """Number of snapshots available to restore."""
        return len(self._snapshots)

    def __contains__(self, identifier: object) -> bool:
        return self.is_bound(identifier)

    def __len__(self) -> int:
        return len(self._bindings)

    def _bind(
        self,
        operation: str,
        identifier: ServiceIdentifier,
        factory: ServiceFactory[Any],
        transient: bool,
        locked: bool,
    ) -> "ServiceRegistry":
        _check_identifier(operation, identifier)
        if identifier in self._bindings and identifier in self._locked:
            raise LockedServiceError(operation, identifier)

        binding = ServiceBinding(factory, transient)
        self._bindings[identifier] = binding
        if locked:
            self._locked.add(identifier)

        logger.debug(f"Bound service {identifier} ({binding.mode.value}{', locked' if locked else ''})")
        return self


@lru_cache
def get_service_registry() -> ServiceRegistry:
    """Get the process-wide service registry instance.

    Returns:
        The global service registry instance
    """
    return ServiceRegistry()
