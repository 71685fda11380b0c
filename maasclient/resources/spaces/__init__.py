from .spaces import Spaces

__all__ = ["Spaces"]
