"""
Tests for the class-keyed capability tables.
"""

import logging

import numpy as np
import pytest

from glsl_trig import (
	ANGLE_UNITS,
	CAPABILITIES,
	FORWARD_TRIG,
	HYPERBOLIC,
	INVERSE_TRIG,
	Capability,
	Degrees,
	Radians,
	Vec2,
	Vec3,
	Vec4,
)


class _Shape:
	pass


class _Circle(_Shape):
	pass


class TestCapability:

	def _demo(self) -> Capability:
		return Capability("Demo", ("area", "name"))

	def test_register_and_resolve(self) -> None:
		cap = self._demo()

		@cap.register(_Shape)
		class ShapeDemo:
			@staticmethod
			def area(s): return 0.0
			@staticmethod
			def name(s): return "shape"

		assert cap.implementation(_Shape) is ShapeDemo
		assert cap.implements(_Shape)
		assert cap.implementors() == (_Shape,)

	def test_subclass_falls_back_along_mro(self) -> None:
		cap = self._demo()

		@cap.register(_Shape)
		class ShapeDemo:
			@staticmethod
			def area(s): return 0.0
			@staticmethod
			def name(s): return "shape"

		assert cap.implementation(_Circle) is ShapeDemo

	def test_exact_class_wins_over_base(self) -> None:
		cap = self._demo()

		@cap.register(_Shape)
		class ShapeDemo:
			@staticmethod
			def area(s): return 0.0
			@staticmethod
			def name(s): return "shape"

		@cap.register(_Circle)
		class CircleDemo:
			@staticmethod
			def area(s): return 3.14
			@staticmethod
			def name(s): return "circle"

		assert cap.implementation(_Circle) is CircleDemo
		assert cap.implementation(_Shape) is ShapeDemo

	def test_missing_operation_rejected(self) -> None:
		cap = self._demo()
		with pytest.raises(TypeError, match="missing Demo operations: name"):
			@cap.register(_Shape)
			class Partial:
				@staticmethod
				def area(s): return 0.0

		assert not cap.implements(_Shape)

	def test_unregistered_class(self) -> None:
		cap = self._demo()
		with pytest.raises(TypeError, match="int does not implement Demo"):
			cap.implementation(int)
		assert not cap.implements(int)

	def test_invalid_construction(self) -> None:
		with pytest.raises(ValueError):
			Capability("Empty", ())
		with pytest.raises(ValueError):
			self._demo().register()

	def test_registration_is_logged(self, caplog) -> None:
		cap = self._demo()
		caplog.set_level(logging.DEBUG, logger="glsl_trig.capability.base")

		class ShapeDemo:
			@staticmethod
			def area(s): return 0.0
			@staticmethod
			def name(s): return "shape"

		cap.register(_Shape)(ShapeDemo)
		cap.register(_Shape)(ShapeDemo)
		messages = [r.getMessage() for r in caplog.records]
		assert "Demo: registered ShapeDemo for _Shape" in messages
		assert "Demo: replacing implementation for _Shape" in messages


class TestBuiltinCapabilities:

	def test_forward_trig_implemented_on_angles_and_vectors_only(self) -> None:
		assert FORWARD_TRIG.implementors() == (Radians, Vec2, Vec3, Vec4)
		assert not FORWARD_TRIG.implements(float)
		assert not FORWARD_TRIG.implements(Degrees)

	@pytest.mark.parametrize("cap", [INVERSE_TRIG, HYPERBOLIC])
	def test_plain_number_capabilities_cover_every_width(self, cap) -> None:
		for cls in (np.float32, np.float64, float, Vec2, Vec3, Vec4):
			assert cap.implements(cls)
		assert not cap.implements(Radians)
		assert not cap.implements(int)

	def test_angle_units_on_both_wrappers(self) -> None:
		for cls in (Radians, Degrees, Vec2, Vec3, Vec4):
			assert ANGLE_UNITS.implements(cls)
		assert not ANGLE_UNITS.implements(float)

	def test_operation_sets(self) -> None:
		ops = {c.name: c.operations for c in CAPABILITIES}
		assert ops == {
			"ForwardTrig": ("sin", "cos", "tan"),
			"InverseTrig": ("asin", "acos", "atan", "atan2"),
			"Hyperbolic": ("sinh", "cosh", "tanh"),
			"AngleUnits": ("radians", "degrees"),
		}
