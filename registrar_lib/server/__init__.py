from .api import router
from .health import get_health

__all__ = ["router", "get_health"]
