"""
Top-level re-exports for the GLSL angle and trigonometry functions.

	sin, cos, tan            Radians[W] → W, per component on vectors
	asin, acos, atan, atan2  W → Radians[W]
	sinh, cosh, tanh         W → W
	radians, degrees         Degrees[W] ↔ Radians[W]

W is numpy.float32, numpy.float64 or float; vectors are Vec2, Vec3, Vec4.
"""

from .numeric import NumericCast, EvalConfig, CanonicalEval
from .angle import Radians, Degrees
from .capability import (
	Capability, CAPABILITIES,
	FORWARD_TRIG, INVERSE_TRIG, HYPERBOLIC, ANGLE_UNITS,
	sin, cos, tan,
	asin, acos, atan, atan2,
	sinh, cosh, tanh,
	radians, degrees,
)
from .vector import Vec2, Vec3, Vec4, broadcast

__all__ = [
	"NumericCast", "EvalConfig", "CanonicalEval",
	"Radians", "Degrees",
	"Capability", "CAPABILITIES",
	"FORWARD_TRIG", "INVERSE_TRIG", "HYPERBOLIC", "ANGLE_UNITS",
	"sin", "cos", "tan", "asin", "acos", "atan", "atan2",
	"sinh", "cosh", "tanh", "radians", "degrees",
	"Vec2", "Vec3", "Vec4", "broadcast",
]
