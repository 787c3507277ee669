"""Services package: the DI container, its records and errors.

Keep this package free of framework imports except `resolver`, which is
the only module that knows about FastAPI.
"""
from .container import Container
from .errors import (
    ContainerError,
    CircularDependencyError,
    DuplicateNameError,
    NotFoundError,
    UnresolvableError,
)
from .interfaces import ContainerProtocol
from .registration import UNSET, Registration, RegistrationKind

__all__ = [
    "Container",
    "ContainerProtocol",
    "ContainerError",
    "CircularDependencyError",
    "DuplicateNameError",
    "NotFoundError",
    "UnresolvableError",
    "Registration",
    "RegistrationKind",
    "UNSET",
]
