"""
Everything that can go wrong with a statement.

Each error knows its `site`, meaning the token or tree node to blame,
when there is such a thing. That's what the diagnostics underline.
Syntax errors are also boozetools ParseErrors, so anything that knows
how to catch a parse failure will catch these.
"""
from boozetools.parsing.interface import ParseError

PARTNER = {"(": ")", "[": "]"}

class CalculatorError(Exception):
	site = None
	def describe(self) -> str:
		raise NotImplementedError(type(self))
	def __str__(self): return self.describe()

class CalculatorSyntaxError(CalculatorError, ParseError):
	pass

class UnexpectedToken(CalculatorSyntaxError):
	def __init__(self, found, context:str):
		super().__init__(found, context)
		self.found, self.context, self.site = found, context, found
	def describe(self):
		return "Did not expect %r while looking for %s." % (self.found.text, self.context)

class UnexpectedEnd(CalculatorSyntaxError):
	def __init__(self, context:str, site=None):
		super().__init__(context)
		self.context, self.site = context, site
	def describe(self):
		return "Ran out of input while looking for %s." % self.context

class UnmatchedParen(CalculatorSyntaxError):
	""" The token is either a stray closer or the opener that never got closed. """
	def __init__(self, token, opener=None):
		super().__init__(token, opener)
		self.token = self.site = token
		self.opener = opener
	def describe(self):
		if self.opener is not None:
			pattern = "This %r does not match the %r before it; expected %r."
			return pattern % (self.token.text, self.opener.text, PARTNER[self.opener.text])
		if self.token.kind == "(":
			return "This %r is never closed." % self.token.text
		else:
			return "This %r has no matching opener." % self.token.text

class BadCharacter(CalculatorSyntaxError):
	def __init__(self, text:str, span:slice):
		super().__init__(text, span)
		self.text, self.span = text, span
		self.site = self
	def left(self): return self.span.start
	def right(self): return self.span.stop
	def describe(self):
		return "The character %r means nothing to me." % self.text

class EvalError(CalculatorError):
	pass

class UndefinedVariable(EvalError):
	def __init__(self, name:str, site=None):
		super().__init__(name)
		self.name, self.site = name, site
	def describe(self):
		return "No such variable %r." % self.name

class UndefinedFunction(EvalError):
	def __init__(self, name:str, site=None):
		super().__init__(name)
		self.name, self.site = name, site
	def describe(self):
		return "No such function %r." % self.name

class ArityMismatch(EvalError):
	def __init__(self, name:str, expected:int, got:int, site=None):
		super().__init__(name, expected, got)
		self.name, self.expected, self.got, self.site = name, expected, got, site
	def describe(self):
		plural = '' if self.expected == 1 else 's'
		pattern = "%s takes %d argument%s, but got %d instead."
		return pattern % (self.name, self.expected, plural, self.got)

class DivisionByZero(EvalError):
	def __init__(self, site=None):
		super().__init__()
		self.site = site
	def describe(self):
		return "Division by zero."

class DomainError(EvalError):
	""" The operation has no real-valued answer for these operands. """
	def __init__(self, operator:str, message:str, site=None):
		super().__init__(operator, message)
		self.operator, self.message, self.site = operator, message, site
	def describe(self):
		return "%s: %s" % (self.operator, self.message)

class NestingTooDeep(EvalError):
	def __init__(self, limit:int, site=None):
		super().__init__(limit)
		self.limit, self.site = limit, site
	def describe(self):
		return "Expression is too deep or too long: it nests past %d levels." % self.limit
