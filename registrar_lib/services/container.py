from contextlib import nullcontext
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, TypeVar, cast
import logging
import threading

from .errors import (
    CircularDependencyError,
    DuplicateNameError,
    NotFoundError,
    UnresolvableError,
)
from .registration import UNSET, Registration, RegistrationKind

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Container:
    """A small, explicit DI container keyed by service name.

    Services are registered either as a factory (any callable, usually a
    class) or as a ready-made instance. A factory may declare the names of
    its dependencies; on `get` they are resolved through the container and
    passed to the factory positionally, in declared order. The factory must
    accept exactly that many positional arguments. Singleton factories are
    evaluated once and their result cached.

    Unless constructed with `thread_safe=False`, changes to the mapping run
    under a container lock and each singleton is built under its own lock,
    so concurrent first resolutions construct it once. Stored values are
    returned without locking and factories run outside the container lock,
    so they may call back into the container from any thread.
    """

    def __init__(self, thread_safe: bool = True) -> None:
        self._registry: Dict[str, Registration] = {}
        self._thread_safe = thread_safe
        self._lock = threading.RLock() if thread_safe else nullcontext()
        # per-registration singleton construction locks
        self._build_locks: Dict[str, Any] = {}
        # per-thread stack of names being constructed, outermost first
        self._local = threading.local()

    def register(
        self,
        name: str,
        factory: Callable[..., Any],
        singleton: bool = False,
        dependencies: Iterable[str] = (),
    ) -> Registration:
        """Register `factory` under `name` and return the live record.

        Raises `DuplicateNameError` if `name` is taken and
        `CircularDependencyError` if any declared dependency leads back to
        `name` through services registered so far. Dependencies that are not
        registered yet are accepted as forward references; whichever
        registration later closes a loop through them is the one rejected.
        """
        _check_name(name)
        if not callable(factory):
            raise TypeError(f"Factory for '{name}' is not callable: {factory!r}")
        if isinstance(dependencies, str):
            raise TypeError(f"Dependencies for '{name}' must be a sequence of names, not a string")
        deps = tuple(dependencies)
        for dep in deps:
            _check_name(dep)

        with self._lock:
            if name in self._registry:
                raise DuplicateNameError(name)
            chain = self._find_cycle(name, deps)
            if chain:
                raise CircularDependencyError(name, chain)
            registration = Registration(
                name=name,
                kind=RegistrationKind.TYPE,
                factory=factory,
                singleton=bool(singleton),
                dependencies=deps,
            )
            self._registry[name] = registration
            self._build_locks[name] = threading.RLock() if self._thread_safe else nullcontext()

        logger.debug("Registered type '%s' (singleton=%s, dependencies=%s)", name, registration.singleton, list(deps))
        return registration

    def register_instance(self, name: str, instance: Any) -> Registration:
        """Register a ready-made `instance` under `name`."""
        _check_name(name)
        with self._lock:
            if name in self._registry:
                raise DuplicateNameError(name)
            registration = Registration(
                name=name,
                kind=RegistrationKind.INSTANCE,
                instance=instance,
            )
            self._registry[name] = registration

        logger.debug("Registered instance '%s' (%s)", name, type(instance).__name__)
        return registration

    def get(self, name: str) -> Any:
        """Resolve `name`, constructing it and its dependencies as needed."""
        return self._resolve(name)

    def get_typed(self, name: str) -> T:
        """Resolve and cast to the expected type."""
        return cast(T, self.get(name))

    def invalidate(self, name: str) -> Registration:
        """Clear the stored value of `name`.

        Instance registrations become unresolvable; singletons drop their
        cached instance and are constructed again on the next `get`.
        """
        with self._lock:
            registration = self.registration(name)
            registration.instance = UNSET
        logger.debug("Invalidated '%s'", name)
        return registration

    def registration(self, name: str) -> Registration:
        """Return the live record for `name`."""
        try:
            return self._registry[name]
        except KeyError:
            raise NotFoundError(name) from None

    def has(self, name: str) -> bool:
        return name in self._registry

    def names(self) -> List[str]:
        """Registered names, in registration order."""
        with self._lock:
            return list(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def _resolve(self, name: str) -> Any:
        registration = self._registry.get(name)
        if registration is None:
            raise NotFoundError(name)

        if registration.instance is not UNSET:
            return registration.instance

        if registration.factory is None:
            raise UnresolvableError(name)

        resolving = self._resolving()
        if name in resolving:
            chain = resolving[resolving.index(name):] + [name]
            raise CircularDependencyError(name, chain)

        if not registration.singleton:
            return self._construct(registration, resolving)

        with self._build_locks[name]:
            # another thread may have finished construction while we waited
            if registration.instance is not UNSET:
                return registration.instance
            instance = self._construct(registration, resolving)
            registration.instance = instance
        logger.debug("Cached singleton '%s'", name)
        return instance

    def _construct(self, registration: Registration, resolving: List[str]) -> Any:
        resolving.append(registration.name)
        try:
            args = [self._resolve(dep) for dep in registration.dependencies]
            try:
                return registration.factory(*args)
            except Exception:
                logger.exception("Failed to construct service '%s'", registration.name)
                raise
        finally:
            resolving.pop()

    def _resolving(self) -> List[str]:
        stack = getattr(self._local, 'resolving', None)
        if stack is None:
            stack = self._local.resolving = []
        return stack

    def _find_cycle(self, name: str, dependencies: Iterable[str]) -> Optional[List[str]]:
        """Return the path from `name` back to itself, or None.

        Walks every declared dependency and, through registered services,
        their dependencies transitively. Unregistered names end a path.
        """
        visited: Set[str] = set()

        def walk(deps: Iterable[str], path: List[str]) -> Optional[List[str]]:
            for dep in deps:
                if dep == name:
                    return path + [dep]
                if dep in visited:
                    continue
                visited.add(dep)
                registration = self._registry.get(dep)
                if registration is None:
                    continue
                found = walk(registration.dependencies, path + [dep])
                if found:
                    return found
            return None

        return walk(dependencies, [name])


def _check_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError(f"Service name must be a non-empty string, got {name!r}")
