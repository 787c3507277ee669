from fastapi import APIRouter, HTTPException, Request

from registrar_lib.services.errors import NotFoundError
from registrar_lib.services.resolver import resolve_container
from .health import get_health

router = APIRouter()


@router.get('/health')
async def api_health(request: Request):
    container = getattr(request.app.state, 'container', None)
    return get_health(container)


@router.get('/v1/registrations')
async def api_registrations(request: Request):
    container = resolve_container(request)
    return [container.registration(name).describe() for name in container.names()]


@router.get('/v1/registrations/{name}')
async def api_registration(request: Request, name: str):
    container = resolve_container(request)
    try:
        return container.registration(name).describe()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail={'error': 'not_found', 'message': str(e)})
