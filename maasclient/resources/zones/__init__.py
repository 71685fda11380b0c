from .zones import Zones

__all__ = ["Zones"]
