from src.api.health import health_router
from src.api.ui import ui_router
from src.api.v1 import router as v1_router

__all__ = ["health_router", "ui_router", "v1_router"]
