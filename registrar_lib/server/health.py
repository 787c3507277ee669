"""Server health utilities.

Provides a simple `get_health` function returning server status,
start time, uptime in seconds and the number of registered services.
"""
from datetime import datetime, timezone
from typing import Optional
import time

from registrar_lib.services.interfaces import ContainerProtocol

# record process start time at import
_START_TIME = time.time()


def get_health(container: Optional[ContainerProtocol] = None) -> dict:
    """Return a dict representing server health.

    Fields:
    - status: 'ok'
    - start_time: ISO 8601 UTC timestamp when the process started
    - uptime_seconds: integer seconds since start
    - registrations: number of services in `container` (0 without one)
    """
    now = time.time()
    uptime = int(now - _START_TIME)
    start_dt = datetime.fromtimestamp(_START_TIME, tz=timezone.utc)
    return {
        "status": "ok",
        "start_time": start_dt.isoformat(),
        "uptime_seconds": uptime,
        "registrations": len(container.names()) if container is not None else 0,
    }
