"""
Elementwise broadcast of the scalar capabilities over Vec2, Vec3 and Vec4.

One routine serves every capability and every arity:

	broadcast(op, v1, ..., vk) = type(v1)(op(v1[0], ..., vk[0]), ..., op(v1[N-1], ..., vk[N-1]))

Each vector implementation forwards every operation of its capability to the
scalar free function of the same name, so the element type (Radians[W] or W)
picks the scalar implementation per component. All components are computed
before the result is built; a failure on any component builds nothing.
"""

from __future__ import annotations
from functools import partial
from typing import Callable, Dict

from glsl_trig.capability import conversion, hyperbolic, inverse, trig
from glsl_trig.capability.base import Capability
from glsl_trig.vector.vec import VECTOR_TYPES


def broadcast(op: Callable, *vecs):
	"""Apply `op` componentwise across vectors of one class."""
	if not vecs:
		raise TypeError("broadcast needs at least one vector")
	cls = type(vecs[0])
	for v in vecs[1:]:
		if type(v) is not cls:
			raise TypeError(f"cannot broadcast {cls.__name__} with {type(v).__name__}")
	return cls.from_components([op(*cs) for cs in zip(*vecs)])


class VectorImpl:
	"""Vector implementation of one capability built from its scalar free functions."""

	def __init__(self, capability: Capability, scalar_ops: Dict[str, Callable]) -> None:
		self.__name__ = f"Vector{capability.name}"
		for op in capability.operations:
			setattr(self, op, partial(broadcast, scalar_ops[op]))


_SCALAR_MODULES = (
	(trig.FORWARD_TRIG, trig),
	(inverse.INVERSE_TRIG, inverse),
	(hyperbolic.HYPERBOLIC, hyperbolic),
	(conversion.ANGLE_UNITS, conversion),
)

for _capability, _module in _SCALAR_MODULES:
	_impl = VectorImpl(_capability, {op: getattr(_module, op) for op in _capability.operations})
	_capability.register(*VECTOR_TYPES)(_impl)
