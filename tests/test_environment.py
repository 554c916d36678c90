import unittest

from abacus.environment import Environment
from abacus.errors import UndefinedVariable

class EnvironmentTests(unittest.TestCase):

	def setUp(self) -> None:
		self.env = Environment()

	def test_starts_empty(self):
		self.assertEqual(0, len(self.env))
		self.assertEqual([], self.env.names())

	def test_bind_answers_the_value(self):
		self.assertEqual(2.5, self.env.bind("x", 2.5))
		self.assertEqual(2.5, self.env.lookup("x"))

	def test_rebind_overwrites(self):
		self.env.bind("x", 1)
		self.env.bind("x", 2)
		self.assertEqual(2, self.env.lookup("x"))
		self.assertEqual(1, len(self.env))

	def test_lookup_unbound(self):
		with self.assertRaises(UndefinedVariable) as cm:
			self.env.lookup("nope")
		self.assertEqual("nope", cm.exception.name)
		self.assertIsNone(cm.exception.site)

	def test_listing_is_sorted(self):
		for name in "cab":
			self.env.bind(name, ord(name))
		self.assertEqual(["a", "b", "c"], self.env.names())
		self.assertEqual([("a", 97), ("b", 98), ("c", 99)], list(self.env.items()))

	def test_clear(self):
		self.env.bind("x", 1)
		self.env.clear()
		self.assertNotIn("x", self.env)
		with self.assertRaises(UndefinedVariable):
			self.env.lookup("x")

	def test_initial_bindings_are_copied(self):
		seed = {"pi": 3.14}
		env = Environment(seed)
		env.bind("pi", 3)
		self.assertEqual(3.14, seed["pi"])

	def test_sessions_are_independent(self):
		other = Environment()
		self.env.bind("x", 1)
		self.assertNotIn("x", other)

if __name__ == '__main__':
	unittest.main()
