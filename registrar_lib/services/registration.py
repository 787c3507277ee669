"""Registration records held by the container.

A record is returned live from `Container.register` and
`Container.register_instance`. Callers may inspect it, and may clear the
stored value by assigning `UNSET` to `instance` (see `Container.invalidate`
for the supported way of doing that).
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Tuple


class _Unset:
    """Marker for "no stored value". `None` is a valid instance."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class RegistrationKind(str, Enum):
    TYPE = "type"
    INSTANCE = "instance"


@dataclass
class Registration:
    name: str
    kind: RegistrationKind
    factory: Optional[Callable[..., Any]] = None
    instance: Any = UNSET
    singleton: bool = False
    dependencies: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def cached(self) -> bool:
        """True when `instance` holds a value `get` can return directly."""
        return self.instance is not UNSET

    def describe(self) -> dict:
        """Return a JSON-friendly summary (no instance values)."""
        return {
            "name": self.name,
            "kind": self.kind.value,
            "singleton": self.singleton,
            "dependencies": list(self.dependencies),
            "cached": self.cached,
        }
