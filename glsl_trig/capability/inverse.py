"""
Inverse trigonometric functions (GLSL 4.30 §8.1): asin, acos, atan, atan2.

Input is a plain number, output is an angle of the same width:

  • asin(W)     → Radians[W]   (NaN outside [-1, 1])
  • acos(W)     → Radians[W]   (NaN outside [-1, 1])
  • atan(W)     → Radians[W]
  • atan2(y, x) → Radians[W]   (GLSL atan(y, x); y and x share one width)

One implementation per width: numpy.float32, numpy.float64, float.
Out-of-domain inputs are not checked; the NaN from the canonical routine is
wrapped and returned.
"""

from __future__ import annotations
from typing import Protocol

from glsl_trig.angle.units import Radians
from glsl_trig.capability.base import Capability
from glsl_trig.numeric.canonical_eval import CANONICAL
from glsl_trig.numeric.cast import NumericCast


class InverseTrig(Protocol):
	def asin(self, x) -> Radians: ...
	def acos(self, x) -> Radians: ...
	def atan(self, x) -> Radians: ...
	def atan2(self, y, x) -> Radians: ...


INVERSE_TRIG: Capability[InverseTrig] = Capability("InverseTrig", ("asin", "acos", "atan", "atan2"))


@INVERSE_TRIG.register(*NumericCast.WIDTHS)
class ScalarInverseTrig:
	"""W → Radians[W] through the canonical evaluator."""

	@staticmethod
	def asin(x) -> Radians:
		return Radians(CANONICAL.asin(x))

	@staticmethod
	def acos(x) -> Radians:
		return Radians(CANONICAL.acos(x))

	@staticmethod
	def atan(x) -> Radians:
		return Radians(CANONICAL.atan(x))

	@staticmethod
	def atan2(y, x) -> Radians:
		return Radians(CANONICAL.atan2(y, x))



def asin(x): return INVERSE_TRIG.implementation(type(x)).asin(x)
def acos(x): return INVERSE_TRIG.implementation(type(x)).acos(x)
def atan(x): return INVERSE_TRIG.implementation(type(x)).atan(x)

def atan2(y, x):
	"""Four-quadrant arctangent; `y` selects the implementation, `x` must match it."""
	return INVERSE_TRIG.implementation(type(y)).atan2(y, x)
