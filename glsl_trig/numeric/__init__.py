"""
Numeric substrate (production package)

Public API re-export:
	NumericCast    : width registry and canonical conversions
	EvalConfig     : floating-point error policy
	CanonicalEval  : cast-evaluate-cast wrapper over numpy ufuncs
"""

from .cast import NumericCast, is_width, width_of, to_canonical, from_canonical
from .config import EvalConfig, DEFAULT_CONFIG
from .canonical_eval import CanonicalEval, CANONICAL

__all__ = [
	"NumericCast", "is_width", "width_of", "to_canonical", "from_canonical",
	"EvalConfig", "DEFAULT_CONFIG",
	"CanonicalEval", "CANONICAL",
]
