"""
Forward trigonometric functions (GLSL 4.30 §8.1): sin, cos, tan.

Input is an angle, output is a plain number of the angle's width:

  • sin(Radians[W]) → W
  • cos(Radians[W]) → W
  • tan(Radians[W]) → W

Plain numbers and Degrees are rejected with TypeError.
"""

from __future__ import annotations
from typing import Protocol

from glsl_trig.angle.units import Radians
from glsl_trig.capability.base import Capability
from glsl_trig.numeric.canonical_eval import CANONICAL


class ForwardTrig(Protocol):
	def sin(self, theta): ...
	def cos(self, theta): ...
	def tan(self, theta): ...


FORWARD_TRIG: Capability[ForwardTrig] = Capability("ForwardTrig", ("sin", "cos", "tan"))


@FORWARD_TRIG.register(Radians)
class RadiansTrig:
	"""Radians[W] → W through the canonical evaluator."""

	@staticmethod
	def sin(theta: Radians):
		return CANONICAL.sin(theta.value)

	@staticmethod
	def cos(theta: Radians):
		return CANONICAL.cos(theta.value)

	@staticmethod
	def tan(theta: Radians):
		return CANONICAL.tan(theta.value)



def sin(theta): return FORWARD_TRIG.implementation(type(theta)).sin(theta)
def cos(theta): return FORWARD_TRIG.implementation(type(theta)).cos(theta)
def tan(theta): return FORWARD_TRIG.implementation(type(theta)).tan(theta)
