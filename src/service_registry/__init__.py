"""A minimal service registry with singleton/transient bindings, locking and snapshots."""

from loguru import logger

from .binding import BindingMode, ServiceBinding, ServiceFactory
from .exceptions import (
    EmptySnapshotStackError,
    InvalidFactoryError,
    InvalidIdentifierError,
    LockedServiceError,
    ServiceRegistryError,
    UnboundServiceError,
)
from .registry import ServiceIdentifier, ServiceRegistry, get_service_registry
from .settings import Settings, get_settings
from .token import Token, create_token

logger.disable(__name__)

__all__ = [
    "BindingMode",
    "EmptySnapshotStackError",
    "InvalidFactoryError",
    "InvalidIdentifierError",
    "LockedServiceError",
    "ServiceBinding",
    "ServiceFactory",
    "ServiceIdentifier",
    "ServiceRegistry",
    "ServiceRegistryError",
    "Settings",
    "Token",
    "UnboundServiceError",
    "create_token",
    "get_service_registry",
    "get_settings",
]
