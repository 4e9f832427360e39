from .units import Radians, Degrees

__all__ = ["Radians", "Degrees"]
