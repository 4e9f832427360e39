"""
Angle wrappers tag a bare floating-point value with its unit:

  • Radians(v)  → v measured in radians (what forward trig consumes)
  • Degrees(v)  → v measured in degrees (convert with radians() first)

Both are immutable single-field values generic over the width of `v`
(numpy.float32, numpy.float64 or float). They carry no arithmetic; the tag
exists so a plain number cannot stand in for an angle, and vice versa.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, TypeVar
import numpy as np

from glsl_trig.numeric.cast import NumericCast, Width


W = TypeVar("W", np.float32, np.float64, float)


class _Angle(Generic[W]):
	"""Shared construction check and width accessor."""

	value: W
	unit: str = ""

	def __post_init__(self) -> None:
		if not NumericCast.is_width(self.value):
			raise TypeError(
				f"{type(self).__name__} expects a float32, float64 or float value, "
				f"got {type(self.value).__name__}"
			)

	@property
	def width(self) -> Width:
		return type(self.value)

	def pretty(self) -> str:
		return f"{self.value!r} {self.unit}"


@dataclass(frozen=True)
class Radians(_Angle[W]):
	"""Immutable angle in radians."""
	value: W
	unit = "rad"


@dataclass(frozen=True)
class Degrees(_Angle[W]):
	"""Immutable angle in degrees."""
	value: W
	unit = "deg"
