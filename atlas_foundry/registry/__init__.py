from .content_registry import ContentRegistry

__all__ = ["ContentRegistry"]
