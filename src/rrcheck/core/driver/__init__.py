from .base import PageDriver

__all__ = ["PageDriver"]
