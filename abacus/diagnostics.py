import sys, random
from typing import Any, Optional
from boozetools.support.failureprone import SourceText, illustration

from .errors import CalculatorError

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm, ", "", ""]
	oaths = ['Drat', 'Fiddlesticks', 'Rats', 'Good Grief', 'Nuts', 'Great Scott', 'Curses']
	resignations = [
		'That does not compute.',
		'The abacus beads are in a tangle.',
		'I cannot finish that one.',
		'Let us try that again.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, oaths, resignations)))

class Report:
	""" Collects issues and, on request, bemoans them to the console. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def verbose(self): return self._verbose
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	@property
	def issues(self): return tuple(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def failed(self, source:SourceText, ex:CalculatorError):
		""" File an issue for some error that aborted a statement. """
		kind = type(ex).__name__
		if ex.site is None:
			problem = []
		else:
			problem = [Annotation(source, ex.site, kind)]
		self.issue(Pic(ex.describe(), problem, kind=kind))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message=""):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

class Annotation:
	def __init__(self, source:SourceText, node, caption:str=""):
		self.source = source
		self.slice = slice(node.left(), node.right())
		self.caption = caption
	def illustrate(self):
		row, col = self.source.find_row_col(self.slice.start)
		single_line = self.source.line_of_text(row)
		width = max(1, self.slice.stop - self.slice.start)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=(), kind:Optional[str]=None):
		self.kind = kind
		self._intro, self._anns, self._footer = intro, anns, footer
	@property
	def description(self): return self._intro
	def as_text(self):
		lines = [self._intro]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	if issues:
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
