"""
Vector types and elementwise broadcast (production package)

Importing this package registers Vec2, Vec3 and Vec4 with every capability.
"""

from .vec import Vec2, Vec3, Vec4, VECTOR_TYPES, element_kind
from .broadcast import broadcast, VectorImpl

__all__ = ["Vec2", "Vec3", "Vec4", "VECTOR_TYPES", "element_kind", "broadcast", "VectorImpl"]
