from typing import Any
from starlette.testclient import TestClient
from registrar_lib.services import Container


def register_service_on_client(client: TestClient, name: str, instance: Any) -> None:
    """Register a service instance into the app's DI container for tests.

    Creates `app.state.container` when the app was built without one.

    Usage in tests:
        from tests.helpers import register_service_on_client
        register_service_on_client(client, 'clock', fake_clock)
    """
    container = getattr(client.app.state, 'container', None)
    if container is None:
        container = Container()
        client.app.state.container = container

    container.register_instance(name, instance)


def register_services_on_client(client: TestClient, services: dict[str, Any]) -> None:
    for name, inst in services.items():
        register_service_on_client(client, name, inst)
