from src.api.ui.page_route import router as ui_router

__all__ = ["ui_router"]
