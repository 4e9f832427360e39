"""
Evaluation configuration for the canonical evaluator.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict


# Policies that keep NaN/inf flowing through to the caller.
PASS_THROUGH_POLICIES = ("ignore", "warn")


@dataclass(frozen=True)
class EvalConfig:
	"""
	Floating-point error policy applied around every canonical routine.

	• invalid:  policy for out-of-domain inputs (asin(2.0), ...)
	• overflow: policy for overflow and division by zero (cosh(1e3), tan near π/2)
	"""
	invalid: str = "ignore"
	overflow: str = "ignore"

	def __post_init__(self) -> None:
		for name in ("invalid", "overflow"):
			v = getattr(self, name)
			if v not in PASS_THROUGH_POLICIES:
				raise ValueError(
					f"EvalConfig.{name} must be one of {PASS_THROUGH_POLICIES}, got {v!r}"
				)

	def errstate(self) -> Dict[str, str]:
		"""Return keyword arguments for numpy.errstate."""
		return {
			"invalid": self.invalid,
			"over": self.overflow,
			"divide": self.overflow,
			"under": "ignore",
		}


DEFAULT_CONFIG = EvalConfig()
