from .reminders import router as reminders_router

__all__ = ["reminders_router"]
