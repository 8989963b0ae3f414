from .article import Article, MediaRef

__all__ = ["Article", "MediaRef"]
