"""Errors raised by the service container.

Every error carries the offending registration `name` so callers (and the
HTTP resolver) can report which service failed without parsing messages.
"""
from typing import Optional, Sequence


class ContainerError(Exception):
    """Base class for all container failures."""

    def __init__(self, message: str, name: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.name = name

    def __str__(self) -> str:
        return self.message


class DuplicateNameError(ContainerError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Already exists in registry: {name}", name)


class CircularDependencyError(ContainerError):
    """Raised when a dependency chain leads back to the service being built.

    `chain` holds the full path, starting and ending with the same name.
    """

    def __init__(self, name: str, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__(f"Circular dependency: {' -> '.join(self.chain)}", name)


class NotFoundError(ContainerError, KeyError):
    # KeyError keeps `except KeyError` callers working; __str__ from the base
    # avoids KeyError's quoted repr.
    def __init__(self, name: str) -> None:
        super().__init__(f"Does not exist in registry: {name}", name)


class UnresolvableError(ContainerError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Type and instance not defined: {name}", name)
