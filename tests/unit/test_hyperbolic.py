"""
Tests for sinh, cosh, tanh.
"""

import math
import warnings

import numpy as np
import pytest

from glsl_trig import Radians, cosh, sinh, tanh


class TestHyperbolic:

	@pytest.mark.parametrize("width", [np.float32, np.float64, float])
	def test_known_values(self, width) -> None:
		assert sinh(width(0.0)) == 0.0
		assert cosh(width(0.0)) == 1.0
		assert tanh(width(0.0)) == 0.0

	@pytest.mark.parametrize("fn", [sinh, cosh, tanh])
	@pytest.mark.parametrize("width", [np.float32, np.float64, float])
	def test_width_preserved(self, fn, width) -> None:
		assert type(fn(width(0.75))) is width

	@pytest.mark.parametrize("x", [0.1, 1.0, 3.5])
	def test_matches_math_module(self, x) -> None:
		assert sinh(x) == pytest.approx(math.sinh(x), rel=1e-15)
		assert cosh(x) == pytest.approx(math.cosh(x), rel=1e-15)
		assert tanh(x) == pytest.approx(math.tanh(x), rel=1e-15)

	@pytest.mark.parametrize("x", [0.2, 1.7, 4.0])
	def test_identity_cosh2_minus_sinh2(self, x) -> None:
		assert cosh(x) ** 2 - sinh(x) ** 2 == pytest.approx(1.0, rel=1e-12)

	def test_tanh_saturates(self) -> None:
		assert tanh(50.0) == 1.0
		assert tanh(-50.0) == -1.0

	def test_overflow_passes_through_as_inf(self) -> None:
		with warnings.catch_warnings():
			warnings.simplefilter("error")
			assert cosh(1000.0) == float("inf")
			assert sinh(-1000.0) == float("-inf")
			assert np.isinf(cosh(np.float32(100.0)))

	def test_angle_rejected(self) -> None:
		with pytest.raises(TypeError, match="Radians does not implement Hyperbolic"):
			sinh(Radians(0.5))

	def test_float32_close_to_native(self) -> None:
		for x in (0.25, 1.5, 8.0):
			x32 = np.float32(x)
			assert float(cosh(x32)) == pytest.approx(float(np.cosh(x32)), rel=1e-6)
