"""Binding records held by the service registry."""

from collections.abc import Callable
from enum import Enum
from typing import Any, Generic, TypeVar

from .exceptions import InvalidFactoryError

T = TypeVar("T")
ServiceFactory = Callable[[], T]

# Marks an empty singleton cache; None and other falsy values are valid services
_UNSET: Any = object()


class BindingMode(str, Enum):
    """How a binding produces values."""

    SINGLETON = "singleton"
    TRANSIENT = "transient"


class ServiceBinding(Generic[T]):
    """A factory plus its creation mode and, for singletons, the cached value.

    Singleton bindings call their factory at most once and return the cached
    value afterwards. Transient bindings call the factory on every resolution.
    """

    __slots__ = ("_factory", "_mode", "_instance")

    def __init__(self, factory: ServiceFactory[T], transient: bool = False):
        """Create a binding.

        Args:
            factory: Zero-argument callable producing the service
            transient: If True, produce a new value on every call to ``get_value``

        Raises:
            InvalidFactoryError: If the factory is not callable
        """
        if not callable(factory):
            raise InvalidFactoryError(factory)

        self._factory = factory
        self._mode = BindingMode.TRANSIENT if transient else BindingMode.SINGLETON
        self._instance: T = _UNSET

    @property
    def mode(self) -> BindingMode:
        return self._mode

    @property
    def transient(self) -> bool:
        return self._mode is BindingMode.TRANSIENT

    @property
    def is_resolved(self) -> bool:
        """Whether a singleton value has been produced and cached."""
        return self._instance is not _UNSET

    def get_value(self) -> T:
        """Produce the service value.

        Exceptions raised by the factory propagate unchanged. A singleton whose
        factory fails stays unresolved, so the next call tries again.

        Returns:
            A fresh value for transient bindings, the cached value for singletons
        """
        if self._mode is BindingMode.TRANSIENT:
            return self._factory()

        if self._instance is _UNSET:
            self._instance = self._factory()

        return self._instance

    def __repr__(self) -> str:
        return f"ServiceBinding(factory={self._factory!r}, mode={self._mode.value}, resolved={self.is_resolved})"
