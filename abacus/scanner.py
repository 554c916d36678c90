"""
The scanner turns a line of text into tokens.

A TokenStream is lazy and restartable: each iteration scans the text afresh,
and every scan ends with exactly one END token. Trouble only surfaces when
the scan actually reaches the offending character.
"""
import sys
from typing import NamedTuple, Optional, Iterator

from boozetools.scanning.miniscan import Definition

from .errors import BadCharacter, PARTNER

NUMBER = "number"
NAME = "name"
OPERATOR = "operator"
OPEN = "("
CLOSE = ")"
COMMA = ","
END = "<END>"

OPERATORS = frozenset("+-*/^=")

class Token(NamedTuple):
	kind: str
	text: str
	value: Optional[float]
	span: slice

	def left(self): return self.span.start
	def right(self): return self.span.stop
	def __repr__(self):
		return "<%s %r>" % (self.kind, self.text) if self.kind != END else "<END>"

def _classify(glyph:str) -> str:
	if glyph in OPERATORS: return OPERATOR
	if glyph in PARTNER: return OPEN
	if glyph in PARTNER.values(): return CLOSE
	assert glyph == ",", glyph
	return COMMA

_rules = Definition()
_rules.ignore(r"\s+")

@_rules.on(r"(\d+(\.\d*)?|\.\d+)([eE][+\-]?\d+)?")
def _scan_number(yy):
	yy.token(NUMBER, Token(NUMBER, yy.match(), float(yy.match()), yy.slice()))

@_rules.on(r"[A-Za-z_]\w*")
def _scan_name(yy):
	yy.token(NAME, Token(NAME, sys.intern(yy.match()), None, yy.slice()))

@_rules.on(r"[+\-*\/\^=(),\[\]]")
def _scan_punctuation(yy):
	kind = _classify(yy.match())
	yy.token(kind, Token(kind, yy.match(), None, yy.slice()))

# One character at a time, so the complaint waits until the scan reaches it.
@_rules.on(r"[^\s\w+\-*\/\^=(),\[\]]")
def _scan_bogus(yy):
	raise BadCharacter(yy.match(), yy.slice())

def scan(text:str) -> Iterator[Token]:
	""" Generate tokens lazily; a BadCharacter comes out only when reached. """
	for kind, token in _rules.scan(text):
		yield token
	yield Token(END, "", None, slice(len(text), len(text)))

class TokenStream:
	""" Something the parser can iterate over, as many times as it likes. """
	def __init__(self, text:str):
		self.text = text
	def __iter__(self) -> Iterator[Token]:
		return scan(self.text)
	def __repr__(self):
		return "<TokenStream %r>" % self.text
