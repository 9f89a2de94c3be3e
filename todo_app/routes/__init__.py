from .tasks import tasks_bp

__all__ = ["tasks_bp"]
