"""Registrar: a small named-service dependency injection container."""

from registrar_lib.services import (
    UNSET,
    CircularDependencyError,
    Container,
    ContainerError,
    DuplicateNameError,
    NotFoundError,
    Registration,
    RegistrationKind,
    UnresolvableError,
)

__all__ = [
    "Container",
    "ContainerError",
    "CircularDependencyError",
    "DuplicateNameError",
    "NotFoundError",
    "UnresolvableError",
    "Registration",
    "RegistrationKind",
    "UNSET",
]
