"""
Tree-walking evaluation of a single statement.

There is exactly one visit_ method per kind of expression node,
and a test makes sure it stays that way.
Operands evaluate left to right; the first error aborts the statement.
"""
import math
import operator
from boozetools.support.foundation import Visitor
from . import syntax
from .environment import Environment
from .front_end import MAX_DEPTH, depth_ceiling
from .primitive import BUILTINS
from .errors import UndefinedFunction, ArityMismatch, DivisionByZero, DomainError, NestingTooDeep

def _divide(a:float, b:float) -> float:
	if b == 0: raise ZeroDivisionError
	return a / b

def _power(a:float, b:float) -> float:
	if a < 0 and not float(b).is_integer():
		raise ValueError("negative base with a fractional exponent has no real value")
	if a == 0 and b < 0: raise ZeroDivisionError
	return a ** b

BINARY = {
	"+": operator.add,
	"-": operator.sub,
	"*": operator.mul,
	"/": _divide,
	"^": _power,
}

UNARY = {
	"-": operator.neg,
	"+": operator.pos,
}

def _apply(glyph:str, fn, args, site) -> float:
	try:
		result = float(fn(*args))
	except ZeroDivisionError:
		raise DivisionByZero(site) from None
	except OverflowError:
		raise DomainError(glyph, "result out of range", site) from None
	except ValueError as ex:
		raise DomainError(glyph, str(ex), site) from None
	if not math.isfinite(result):
		raise DomainError(glyph, "result out of range", site)
	return result

class Evaluator(Visitor):
	""" Reduce a tree to a number, in the context of some environment. """

	def __init__(self, env:Environment, max_depth:int=MAX_DEPTH):
		self.env = env
		self.max_depth = min(max_depth, depth_ceiling())

	def evaluate(self, expr:syntax.Expression) -> float:
		return self.visit(expr, 0)

	def visit(self, expr:syntax.Expression, depth:int):
		if depth > self.max_depth: raise NestingTooDeep(self.max_depth, expr)
		return super().visit(expr, depth)

	def visit_Literal(self, expr:syntax.Literal, depth:int):
		if not math.isfinite(expr.value):
			raise DomainError("number", "literal out of range", expr)
		return expr.value

	def visit_VariableRef(self, expr:syntax.VariableRef, depth:int):
		return self.env.lookup(expr.name, expr)

	def visit_BinaryOp(self, expr:syntax.BinaryOp, depth:int):
		a = self.visit(expr.lhs, depth+1)
		b = self.visit(expr.rhs, depth+1)
		return _apply(expr.op, BINARY[expr.op], (a, b), expr)

	def visit_UnaryOp(self, expr:syntax.UnaryOp, depth:int):
		return UNARY[expr.op](self.visit(expr.operand, depth+1))

	def visit_Assignment(self, expr:syntax.Assignment, depth:int):
		return self.env.bind(expr.name, self.visit(expr.value, depth+1))

	def visit_FunctionCall(self, expr:syntax.FunctionCall, depth:int):
		try: primitive = BUILTINS[expr.name]
		except KeyError: raise UndefinedFunction(expr.name, expr) from None
		if len(expr.args) != primitive.arity:
			raise ArityMismatch(expr.name, primitive.arity, len(expr.args), expr)
		args = [self.visit(a, depth+1) for a in expr.args]
		return _apply(expr.name, primitive.fn, args, expr)

def evaluate(expr:syntax.Expression, env:Environment, max_depth:int=MAX_DEPTH) -> float:
	return Evaluator(env, max_depth).evaluate(expr)
