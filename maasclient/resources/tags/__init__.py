from .tags import Tags

__all__ = ["Tags"]
