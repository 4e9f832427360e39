"""
Scalar capabilities (production package)

Public API re-export:
	Capability    : class-keyed implementation table
	FORWARD_TRIG  : sin, cos, tan on Radians
	INVERSE_TRIG  : asin, acos, atan, atan2 on plain widths
	HYPERBOLIC    : sinh, cosh, tanh on plain widths
	ANGLE_UNITS   : radians, degrees on Radians and Degrees
"""

from .base import Capability
from .trig import FORWARD_TRIG, ForwardTrig, sin, cos, tan
from .inverse import INVERSE_TRIG, InverseTrig, asin, acos, atan, atan2
from .hyperbolic import HYPERBOLIC, Hyperbolic, sinh, cosh, tanh
from .conversion import ANGLE_UNITS, AngleUnits, radians, degrees

CAPABILITIES = (FORWARD_TRIG, INVERSE_TRIG, HYPERBOLIC, ANGLE_UNITS)

__all__ = [
	"Capability", "CAPABILITIES",
	"FORWARD_TRIG", "ForwardTrig", "sin", "cos", "tan",
	"INVERSE_TRIG", "InverseTrig", "asin", "acos", "atan", "atan2",
	"HYPERBOLIC", "Hyperbolic", "sinh", "cosh", "tanh",
	"ANGLE_UNITS", "AngleUnits", "radians", "degrees",
]
