"""
Angle unit conversion (GLSL 4.30 §8.1 radians/degrees).

  • radians(Degrees[W]) → Radians[W]
  • degrees(Radians[W]) → Degrees[W]

Each is the identity on its own unit.
"""

from __future__ import annotations
from typing import Protocol

from glsl_trig.angle.units import Degrees, Radians
from glsl_trig.capability.base import Capability
from glsl_trig.numeric.canonical_eval import CANONICAL


class AngleUnits(Protocol):
	def radians(self, a) -> Radians: ...
	def degrees(self, a) -> Degrees: ...


ANGLE_UNITS: Capability[AngleUnits] = Capability("AngleUnits", ("radians", "degrees"))


@ANGLE_UNITS.register(Degrees)
class DegreesUnits:

	@staticmethod
	def radians(a: Degrees) -> Radians:
		return Radians(CANONICAL.deg2rad(a.value))

	@staticmethod
	def degrees(a: Degrees) -> Degrees:
		return a


@ANGLE_UNITS.register(Radians)
class RadiansUnits:

	@staticmethod
	def radians(a: Radians) -> Radians:
		return a

	@staticmethod
	def degrees(a: Radians) -> Degrees:
		return Degrees(CANONICAL.rad2deg(a.value))



def radians(a): return ANGLE_UNITS.implementation(type(a)).radians(a)
def degrees(a): return ANGLE_UNITS.implementation(type(a)).degrees(a)
