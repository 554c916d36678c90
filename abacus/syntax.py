"""
The set of expression-tree nodes.
The parser calls these constructors; nothing else should.
Every node can report the character offsets of its leftmost and rightmost extent,
which is what lets diagnostics underline the guilty part of a statement.
"""
from typing import Sequence

class Expression:
	def left(self) -> int:
		""" Return the offset of the leftmost character of this phrase """
		raise NotImplementedError(type(self))
	def right(self) -> int:
		""" Return the offset just past the rightmost character of this phrase """
		raise NotImplementedError(type(self))
	def span(self) -> tuple[int, int]: return self.left(), self.right()

class Literal(Expression):
	def __init__(self, value:float, token):
		self.value = value
		self._token = token
	def left(self): return self._token.left()
	def right(self): return self._token.right()
	def __repr__(self): return "%r" % self.value

class VariableRef(Expression):
	def __init__(self, token):
		self.name = token.text
		self._token = token
	def left(self): return self._token.left()
	def right(self): return self._token.right()
	def __repr__(self): return "<ref:%s>" % self.name

class BinaryOp(Expression):
	def __init__(self, op:str, lhs:Expression, rhs:Expression):
		assert isinstance(lhs, Expression) and isinstance(rhs, Expression)
		self.op, self.lhs, self.rhs = op, lhs, rhs
	def left(self): return self.lhs.left()
	def right(self): return self.rhs.right()
	def __repr__(self): return "(%r %s %r)" % (self.lhs, self.op, self.rhs)

class UnaryOp(Expression):
	def __init__(self, op_token, operand:Expression):
		assert isinstance(operand, Expression)
		self.op, self.operand = op_token.text, operand
		self._token = op_token
	def left(self): return self._token.left()
	def right(self): return self.operand.right()
	def __repr__(self): return "(%s%r)" % (self.op, self.operand)

class Assignment(Expression):
	def __init__(self, target:VariableRef, value:Expression):
		assert isinstance(target, VariableRef) and isinstance(value, Expression)
		self.name, self.value = target.name, value
		self._target = target
	def left(self): return self._target.left()
	def right(self): return self.value.right()
	def __repr__(self): return "(%s = %r)" % (self.name, self.value)

class FunctionCall(Expression):
	def __init__(self, name_token, args:Sequence[Expression], close_token):
		assert all(isinstance(a, Expression) for a in args)
		self.name, self.args = name_token.text, tuple(args)
		self._name_token, self._close_token = name_token, close_token
	def left(self): return self._name_token.left()
	def right(self): return self._close_token.right()
	def __repr__(self): return "%s(%s)" % (self.name, ", ".join(map(repr, self.args)))

NODE_TYPES = (Literal, VariableRef, BinaryOp, UnaryOp, Assignment, FunctionCall)
