"""
Numeric cast substrate.

Every exposed floating-point width is evaluated through one canonical width:

  • widths:     numpy.float32, numpy.float64, builtin float
  • canonical:  numpy.float64
  • to_canonical(x)          → numpy.float64 carrying the same value
  • from_canonical(y, width) → y narrowed (or rewrapped) to `width`

Narrowing follows numpy's float64 → float32 rounding; no error is raised.

Public API:
  • class NumericCast: static methods implementing the substrate
  • top-level proxies with the same names for ergonomic imports
"""

from __future__ import annotations
from typing import Tuple, Type
import numpy as np


Width = Type[float]


class NumericCast:
	"""Width registry and conversions to and from the canonical width."""

	CANONICAL: Width = np.float64
	WIDTHS: Tuple[Width, ...] = (np.float32, np.float64, float)

	@staticmethod
	def is_width(x) -> bool:
		"""Return True if `x` is a value of one of the supported widths."""
		return type(x) in NumericCast.WIDTHS

	@staticmethod
	def width_of(x) -> Width:
		"""Return the width class of `x` (exact class, no subclass matching)."""
		t = type(x)
		if t not in NumericCast.WIDTHS:
			raise TypeError(
				f"{t.__name__} is not a supported floating-point width "
				"(expected numpy.float32, numpy.float64 or float)"
			)
		return t

	@staticmethod
	def to_canonical(x) -> np.float64:
		"""Convert a width value to numpy.float64."""
		NumericCast.width_of(x)
		return np.float64(x)

	@staticmethod
	def from_canonical(y, width: Width):
		"""Convert a canonical value back to `width`."""
		if width not in NumericCast.WIDTHS:
			raise TypeError(f"{getattr(width, '__name__', width)!r} is not a supported width")
		if width is float:
			return float(y)
		return width(y)



def is_width(x) -> bool: return NumericCast.is_width(x)
def width_of(x) -> Width: return NumericCast.width_of(x)
def to_canonical(x) -> np.float64: return NumericCast.to_canonical(x)
def from_canonical(y, width: Width): return NumericCast.from_canonical(y, width)
