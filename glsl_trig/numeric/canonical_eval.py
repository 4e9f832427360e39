"""
Canonical evaluator (single source of truth)
-------------------------------------------
Backs every exposed width with one float64 evaluation:

  • unary:   x:W  → to_canonical → numpy ufunc → from_canonical → W
  • binary:  (a:W, b:W) → same, both arguments must share one width

Routines: sin, cos, tan, asin, acos, atan, atan2, sinh, cosh, tanh,
deg2rad, rad2deg.

Notes
-----
- Out-of-domain inputs are not validated. numpy yields NaN (or ±inf) and the
  value is returned as-is; the EvalConfig only chooses between silence and a
  RuntimeWarning.
- `math.asin` and friends raise ValueError on domain errors, so they are never
  used here.
"""


from __future__ import annotations
from typing import Callable
import numpy as np

from glsl_trig.numeric.cast import NumericCast
from glsl_trig.numeric.config import DEFAULT_CONFIG, EvalConfig



class CanonicalEval:
	"""Cast-evaluate-cast wrapper around numpy ufuncs."""

	def __init__(self, config: EvalConfig = DEFAULT_CONFIG) -> None:
		self.config = config

	def apply(self, routine: Callable, x):
		"""Evaluate a unary routine at canonical width and return a value of x's width."""
		width = NumericCast.width_of(x)
		with np.errstate(**self.config.errstate()):
			y = routine(NumericCast.to_canonical(x))
			return NumericCast.from_canonical(y, width)

	def apply2(self, routine: Callable, a, b):
		"""Evaluate a binary routine; both arguments must share one width."""
		wa = NumericCast.width_of(a)
		wb = NumericCast.width_of(b)
		if wa is not wb:
			raise TypeError(f"width mismatch: {wa.__name__} and {wb.__name__}")
		with np.errstate(**self.config.errstate()):
			y = routine(NumericCast.to_canonical(a), NumericCast.to_canonical(b))
			return NumericCast.from_canonical(y, wa)

	def sin(self, x): return self.apply(np.sin, x)
	def cos(self, x): return self.apply(np.cos, x)
	def tan(self, x): return self.apply(np.tan, x)

	def asin(self, x): return self.apply(np.arcsin, x)
	def acos(self, x): return self.apply(np.arccos, x)
	def atan(self, x): return self.apply(np.arctan, x)

	def atan2(self, y, x):
		"""Four-quadrant arctangent of y/x."""
		return self.apply2(np.arctan2, y, x)

	def sinh(self, x): return self.apply(np.sinh, x)
	def cosh(self, x): return self.apply(np.cosh, x)
	def tanh(self, x): return self.apply(np.tanh, x)

	def deg2rad(self, x): return self.apply(np.deg2rad, x)
	def rad2deg(self, x): return self.apply(np.rad2deg, x)


CANONICAL = CanonicalEval()
