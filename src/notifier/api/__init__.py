from notifier.api.routes import router

__all__ = ["router"]
