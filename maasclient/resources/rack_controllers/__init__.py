from .rack_controllers import RackControllers

__all__ = ["RackControllers"]
