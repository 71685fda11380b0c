from .subnets import Subnets

__all__ = ["Subnets"]
