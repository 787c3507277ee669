from typing import Any, Callable, Iterable, List, Protocol, runtime_checkable

from .registration import Registration


@runtime_checkable
class ContainerProtocol(Protocol):
    """Protocol mirroring `registrar_lib.services.Container`.

    Code that only needs to look services up (HTTP resolvers, wiring
    helpers) should depend on this rather than on the concrete class.
    """

    def register(
        self,
        name: str,
        factory: Callable[..., Any],
        singleton: bool = False,
        dependencies: Iterable[str] = (),
    ) -> Registration: ...

    def register_instance(self, name: str, instance: Any) -> Registration: ...

    def get(self, name: str) -> Any: ...

    def invalidate(self, name: str) -> Registration: ...

    def registration(self, name: str) -> Registration: ...

    def has(self, name: str) -> bool: ...

    def names(self) -> List[str]: ...
