from .task import Priority, Task, utc_now

# Export all models for easy importing
__all__ = ["Priority", "Task", "utc_now"]
