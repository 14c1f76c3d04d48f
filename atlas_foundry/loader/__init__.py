from .content_loader import ContentLoader, discover

__all__ = ["ContentLoader", "discover"]
