"""
This is the overall control for evaluating statements one at a time.
A session owns exactly one environment for its whole life.
"""
from typing import Optional
from boozetools.support.failureprone import SourceText

from .scanner import TokenStream
from .front_end import parse_tokens, MAX_DEPTH, depth_ceiling
from .evaluator import Evaluator
from .environment import Environment
from .diagnostics import Report
from .errors import CalculatorError
from .primitive import CONSTANTS

class Session:
	def __init__(self, report:Report, *, max_depth:int=MAX_DEPTH, constants:bool=False):
		if max_depth < 1: raise ValueError("max_depth must be at least one", max_depth)
		self.report = report
		self.max_depth = min(max_depth, depth_ceiling())
		self.env = Environment(CONSTANTS if constants else None)
		self._evaluator = Evaluator(self.env, self.max_depth)

	def execute(self, text:str, label:str="<input>") -> Optional[float]:
		"""
		Scan, parse, and evaluate one statement.
		Answer the value, or else file an issue with the report and answer None.
		A parse failure never touches the environment.
		"""
		source = SourceText(text, filename=label)
		try:
			stream = TokenStream(text)
			if self.report.verbose: self.report.info("Tokens:", list(stream))
			tree = parse_tokens(stream, self.max_depth)
			self.report.info("Parsed:", tree)
			return self._evaluator.evaluate(tree)
		except CalculatorError as ex:
			self.report.failed(source, ex)
			return None

	def clear(self):
		self.env.clear()
