"""
Hyperbolic functions (GLSL 4.30 §8.1): sinh, cosh, tanh.

Plain number in, plain number of the same width out. Overflow yields ±inf.
"""

from __future__ import annotations
from typing import Protocol

from glsl_trig.capability.base import Capability
from glsl_trig.numeric.canonical_eval import CANONICAL
from glsl_trig.numeric.cast import NumericCast


class Hyperbolic(Protocol):
	def sinh(self, x): ...
	def cosh(self, x): ...
	def tanh(self, x): ...


HYPERBOLIC: Capability[Hyperbolic] = Capability("Hyperbolic", ("sinh", "cosh", "tanh"))


@HYPERBOLIC.register(*NumericCast.WIDTHS)
class ScalarHyperbolic:
	"""W → W through the canonical evaluator."""

	@staticmethod
	def sinh(x):
		return CANONICAL.sinh(x)

	@staticmethod
	def cosh(x):
		return CANONICAL.cosh(x)

	@staticmethod
	def tanh(x):
		return CANONICAL.tanh(x)



def sinh(x): return HYPERBOLIC.implementation(type(x)).sinh(x)
def cosh(x): return HYPERBOLIC.implementation(type(x)).cosh(x)
def tanh(x): return HYPERBOLIC.implementation(type(x)).tanh(x)
