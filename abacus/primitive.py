"""
Build the primitive namespace: the fixed set of builtin functions,
and the handful of constants a session may preload on request.
"""
import math
from typing import NamedTuple, Callable

class Primitive(NamedTuple):
	name: str
	arity: int
	fn: Callable[..., float]
	doc: str

BUILTINS: dict[str, Primitive] = {}

def _builtin(name:str, arity:int, fn, doc:str):
	BUILTINS[name] = Primitive(name, arity, fn, doc)

def _log(x, base):
	if base == 1: raise ValueError("logarithm to base one")
	return math.log(x, base)

_builtin("abs", 1, abs, "absolute value")
_builtin("sqrt", 1, math.sqrt, "square root")
_builtin("exp", 1, math.exp, "e to the power x")
_builtin("ln", 1, math.log, "natural logarithm")
_builtin("log10", 1, math.log10, "common logarithm")
_builtin("log2", 1, math.log2, "binary logarithm")
_builtin("sin", 1, math.sin, "sine of radians")
_builtin("cos", 1, math.cos, "cosine of radians")
_builtin("tan", 1, math.tan, "tangent of radians")
_builtin("asin", 1, math.asin, "arcsine, in radians")
_builtin("acos", 1, math.acos, "arccosine, in radians")
_builtin("atan", 1, math.atan, "arctangent, in radians")
_builtin("sinh", 1, math.sinh, "hyperbolic sine")
_builtin("cosh", 1, math.cosh, "hyperbolic cosine")
_builtin("tanh", 1, math.tanh, "hyperbolic tangent")
_builtin("floor", 1, lambda x: float(math.floor(x)), "round toward negative infinity")
_builtin("ceil", 1, lambda x: float(math.ceil(x)), "round toward positive infinity")
_builtin("round", 1, lambda x: float(round(x)), "round half to even")
_builtin("atan2", 2, math.atan2, "arctangent of y/x, minding the quadrant")
_builtin("hypot", 2, math.hypot, "length of the hypotenuse")
_builtin("min", 2, min, "lesser of two")
_builtin("max", 2, max, "greater of two")
_builtin("pow", 2, math.pow, "x to the power y")
_builtin("log", 2, _log, "logarithm of x to the given base")

CONSTANTS = {
	"pi": math.pi,
	"e": math.e,
	"tau": math.tau,
}
