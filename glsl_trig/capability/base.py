"""
Capability tables.

A Capability is a named, ordered set of operation names plus a table mapping a
Python class to the implementation of those operations for values of that
class. Call sites never name the implementation:

	FORWARD_TRIG.implementation(type(theta)).sin(theta)

The lookup is keyed on the class only; values carry no dispatch tag.
"""

from __future__ import annotations
import logging
from typing import Dict, Generic, Sequence, Tuple, TypeVar


logger = logging.getLogger(__name__)

I = TypeVar("I")


class Capability(Generic[I]):
	"""Class-keyed registry of implementations for one set of operations."""

	def __init__(self, name: str, operations: Sequence[str]) -> None:
		if not operations:
			raise ValueError("a capability needs at least one operation")
		self.name = name
		self.operations: Tuple[str, ...] = tuple(operations)
		self._table: Dict[type, I] = {}

	def register(self, *classes: type):
		"""
		Decorator recording `impl` as the implementation for every class in
		`classes`. The implementation must expose a callable for each operation.
		"""
		if not classes:
			raise ValueError("register needs at least one class")

		def deco(impl: I) -> I:
			missing = [op for op in self.operations if not callable(getattr(impl, op, None))]
			if missing:
				raise TypeError(
					f"{getattr(impl, '__name__', impl)!r} is missing {self.name} operations: {', '.join(missing)}"
				)
			for cls in classes:
				if cls in self._table:
					logger.debug("%s: replacing implementation for %s", self.name, cls.__name__)
				self._table[cls] = impl
				logger.debug("%s: registered %s for %s", self.name, getattr(impl, "__name__", impl), cls.__name__)
			return impl

		return deco

	def implementation(self, cls: type) -> I:
		"""Return the implementation for `cls`, falling back along its MRO."""
		impl = self._table.get(cls)
		if impl is not None:
			return impl
		for base in cls.__mro__[1:]:
			impl = self._table.get(base)
			if impl is not None:
				return impl
		raise TypeError(f"{cls.__name__} does not implement {self.name}")

	def implements(self, cls: type) -> bool:
		try:
			self.implementation(cls)
		except TypeError:
			return False
		return True

	def implementors(self) -> Tuple[type, ...]:
		return tuple(self._table)

	def __repr__(self) -> str:
		return f"Capability({self.name!r}, {self.operations!r})"
