"""
Fixed-arity vectors Vec2, Vec3, Vec4.

Immutable, ordered aggregates whose components share one element kind. The
kind of a component is its class plus, for angle wrappers, the width of the
wrapped value, so Vec2(Radians(f32), Radians(f64)) is rejected just like
Vec2(1.0, np.float32(1.0)).

  • v[i], v.x / v.y / v.z / v.w   component access
  • iter(v), len(v)               ordered traversal, arity
  • VecN.from_components(it)      build from exactly N values
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Tuple, TypeVar


T = TypeVar("T")


def element_kind(c) -> Tuple[type, type]:
	"""Return (class, width) for a component; plain numbers are their own width."""
	return (type(c), getattr(c, "width", type(c)))


class _VecN(Generic[T]):
	"""Shared behaviour for the fixed-arity vector dataclasses."""

	ARITY: int = 0
	NAMES: Tuple[str, ...] = ()

	def __post_init__(self) -> None:
		kinds = {element_kind(c) for c in self}
		if len(kinds) > 1:
			found = ", ".join(sorted(f"{k[0].__name__}[{k[1].__name__}]" for k in kinds))
			raise TypeError(f"{type(self).__name__} components must share one element kind, got {found}")

	@classmethod
	def from_components(cls, components: Iterable[T]):
		comps = tuple(components)
		if len(comps) != cls.ARITY:
			raise ValueError(f"{cls.__name__} needs {cls.ARITY} components, got {len(comps)}")
		return cls(*comps)

	def __iter__(self) -> Iterator[T]:
		for name in self.NAMES:
			yield getattr(self, name)

	def __len__(self) -> int:
		return self.ARITY

	def __getitem__(self, i):
		return tuple(self)[i]

	@property
	def kind(self) -> Tuple[type, type]:
		return element_kind(self.x)


@dataclass(frozen=True)
class Vec2(_VecN[T]):
	x: T
	y: T
	ARITY = 2
	NAMES = ("x", "y")


@dataclass(frozen=True)
class Vec3(_VecN[T]):
	x: T
	y: T
	z: T
	ARITY = 3
	NAMES = ("x", "y", "z")


@dataclass(frozen=True)
class Vec4(_VecN[T]):
	x: T
	y: T
	z: T
	w: T
	ARITY = 4
	NAMES = ("x", "y", "z", "w")


VECTOR_TYPES = (Vec2, Vec3, Vec4)
