from typing import Any
from fastapi import HTTPException
from starlette.requests import Request

from .errors import ContainerError, NotFoundError
from .interfaces import ContainerProtocol


def resolve_container(request: Request) -> ContainerProtocol:
    """Return the container exposed on `app.state.container`.

    Raises HTTP 500 when the application was built without one.
    """
    container = getattr(request.app.state, 'container', None)
    if container is None:
        raise HTTPException(status_code=500, detail="Service container not configured")
    return container


def resolve_service(request: Request, name: str) -> Any:
    """Resolve a named service from the application's service container.

    Missing registrations and services that fail to resolve both surface
    as HTTP 500, since either way the application is misconfigured.
    """
    container = resolve_container(request)
    try:
        return container.get(name)
    except NotFoundError:
        raise HTTPException(status_code=500, detail=f"Service '{name}' not configured")
    except ContainerError as e:
        raise HTTPException(status_code=500, detail=f"Service '{name}' could not be resolved: {e}")


def resolve_optional_service(request: Request, name: str) -> Any:
    """Resolve an optional service, returning None if it is not registered."""
    container = getattr(request.app.state, 'container', None)
    if container is None or not container.has(name):
        return None
    return container.get(name)
