"""
Precedence-climbing parser.

The binary operators that live in the climbing loop are assignment, additive,
and multiplicative. Prefix signs and exponentiation bind tighter than any of
those, so they get their own little recursive-descent layer beneath the loop.
Thus `-2^2` is `-(2^2)` and `2^-1` is a half.

Every recursion carries a depth counter. Nesting deeper than the limit raises
NestingTooDeep long before Python's own stack gets anywhere near trouble.
"""
import sys
from typing import Iterable, Iterator

from . import syntax
from .scanner import Token, TokenStream, NUMBER, NAME, OPERATOR, OPEN, CLOSE, COMMA, END
from .errors import UnexpectedToken, UnexpectedEnd, UnmatchedParen, NestingTooDeep, PARTNER

MAX_DEPTH = 200

def depth_ceiling() -> int:
	""" Deepest limit that still leaves the interpreter stack plenty of headroom. """
	return sys.getrecursionlimit() // 5

# glyph -> (precedence, right-associative)
BINARY = {
	"=": (1, True),
	"+": (2, False),
	"-": (2, False),
	"*": (3, False),
	"/": (3, False),
}
PREFIX = frozenset("+-")
POWER = "^"

class Parser:
	""" One statement's worth of parsing, with a single token of lookahead. """

	def __init__(self, tokens:Iterable[Token], max_depth:int=MAX_DEPTH):
		self._tokens: Iterator[Token] = iter(tokens)
		self._max_depth = min(max_depth, depth_ceiling())
		self._open = []
		self.lookahead = next(self._tokens)

	def advance(self) -> Token:
		token = self.lookahead
		if token.kind != END:
			self.lookahead = next(self._tokens)
		return token

	def check_depth(self, depth:int):
		if depth > self._max_depth:
			raise NestingTooDeep(self._max_depth, self.lookahead)

	def statement(self) -> syntax.Expression:
		if self.lookahead.kind == END:
			raise UnexpectedEnd("expression", self.lookahead)
		tree = self.expression(0, 0)
		token = self.lookahead
		if token.kind == CLOSE: raise UnmatchedParen(token)
		if token.kind != END: raise UnexpectedToken(token, "an operator or the end of the statement")
		return tree

	def expression(self, min_precedence:int, depth:int) -> syntax.Expression:
		self.check_depth(depth)
		lhs = self.unary(depth)
		while self.lookahead.kind == OPERATOR and self.lookahead.text in BINARY:
			precedence, right_assoc = BINARY[self.lookahead.text]
			if precedence < min_precedence: break
			op = self.advance()
			if op.text == "=" and not isinstance(lhs, syntax.VariableRef):
				raise UnexpectedToken(op, "a plain variable name to the left of '='")
			rhs = self.expression(precedence if right_assoc else precedence+1, depth+1)
			if op.text == "=":
				lhs = syntax.Assignment(lhs, rhs)
			else:
				lhs = syntax.BinaryOp(op.text, lhs, rhs)
		return lhs

	def unary(self, depth:int) -> syntax.Expression:
		self.check_depth(depth)
		if self.lookahead.kind == OPERATOR and self.lookahead.text in PREFIX:
			op = self.advance()
			return syntax.UnaryOp(op, self.unary(depth+1))
		base = self.primary(depth)
		if self.lookahead.kind == OPERATOR and self.lookahead.text == POWER:
			self.advance()
			return syntax.BinaryOp(POWER, base, self.unary(depth+1))
		return base

	def primary(self, depth:int) -> syntax.Expression:
		token = self.advance()
		if token.kind == NUMBER:
			return syntax.Literal(token.value, token)
		if token.kind == NAME:
			if self.lookahead.kind == OPEN and self.lookahead.text == "(":
				return self.call(token, depth)
			return syntax.VariableRef(token)
		if token.kind == OPEN:
			self._open.append(token)
			inner = self.expression(0, depth+1)
			self.close(token)
			return inner
		if token.kind == CLOSE:
			if self._open: raise UnexpectedToken(token, "an operand")
			raise UnmatchedParen(token)
		if token.kind == END:
			if self._open: raise UnmatchedParen(self._open[-1])
			raise UnexpectedEnd("an operand", token)
		raise UnexpectedToken(token, "an operand")

	def call(self, name:Token, depth:int) -> syntax.FunctionCall:
		opener = self.advance()
		self._open.append(opener)
		args = []
		if self.lookahead.kind != CLOSE:
			args.append(self.expression(0, depth+1))
			while self.lookahead.kind == COMMA:
				self.advance()
				args.append(self.expression(0, depth+1))
		closer = self.close(opener)
		return syntax.FunctionCall(name, args, closer)

	def close(self, opener:Token) -> Token:
		token = self.lookahead
		if token.kind == END:
			raise UnmatchedParen(opener)
		if token.kind != CLOSE:
			raise UnexpectedToken(token, "%r to match the %r" % (PARTNER[opener.text], opener.text))
		if token.text != PARTNER[opener.text]:
			raise UnmatchedParen(token, opener)
		self._open.pop()
		return self.advance()

def parse_tokens(tokens:Iterable[Token], max_depth:int=MAX_DEPTH) -> syntax.Expression:
	""" Parse exactly one statement; the tokens must end with END. """
	return Parser(tokens, max_depth).statement()

def parse_text(text:str, max_depth:int=MAX_DEPTH) -> syntax.Expression:
	return parse_tokens(TokenStream(text), max_depth)
