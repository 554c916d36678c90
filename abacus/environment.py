"""
Simplest possible environment concept: one flat scope per session.

Sessions own their environment and hand it to the evaluator explicitly,
so there is nothing global to trip over and any number of sessions can coexist.
"""
from typing import Iterator
from .errors import UndefinedVariable

class Environment:
	def __init__(self, bindings:dict[str, float]=None):
		self._bindings = dict(bindings or {})

	def bind(self, name:str, value:float) -> float:
		self._bindings[name] = value
		return value

	def lookup(self, name:str, site=None) -> float:
		try: return self._bindings[name]
		except KeyError: raise UndefinedVariable(name, site) from None

	def __contains__(self, name:str): return name in self._bindings
	def __len__(self): return len(self._bindings)
	def names(self) -> list[str]: return sorted(self._bindings)
	def items(self) -> Iterator[tuple[str, float]]:
		for name in self.names(): yield name, self._bindings[name]

	def clear(self):
		""" Forget everything. The REPL's `clear` command lands here. """
		self._bindings.clear()

	def __repr__(self): return "<Environment %r>" % self._bindings
