import unittest

from abacus.scanner import TokenStream, scan, NUMBER, NAME, OPERATOR, OPEN, CLOSE, COMMA, END
from abacus.errors import BadCharacter

def kinds(text):
	return [t.kind for t in scan(text)]

def texts(text):
	return [t.text for t in scan(text)]

class ScannerTests(unittest.TestCase):

	def test_grouping(self):
		self.assertEqual(texts("[[()]()]"), ["[", "[", "(", ")", "]", "(", ")", "]", ""])
		self.assertEqual(kinds("[()]"), [OPEN, OPEN, CLOSE, CLOSE, END])

	def test_numbers(self):
		for text, value in [
			("1337", 1337.0),
			("98", 98.0),
			("3.1415", 3.1415),
			(".001", 0.001),
			("2.", 2.0),
			("1.5e3", 1500.0),
			("25E-2", 0.25),
		]:
			with self.subTest(text):
				tokens = list(scan(text))
				self.assertEqual(2, len(tokens))
				self.assertEqual(NUMBER, tokens[0].kind)
				self.assertEqual(value, tokens[0].value)

	def test_words(self):
		self.assertEqual(["tan", ""], texts("tan"))
		self.assertEqual([NAME, NAME, END], kinds("sin     cos   "))
		self.assertEqual(["x_1", ""], texts("x_1"))

	def test_expression(self):
		self.assertEqual(
			["2", "/", "(", "pi", "-", "x", "^", "2", ")", "=", "2.018", ""],
			texts("2/(pi - x^2) = 2.018"),
		)
		self.assertEqual([NAME, OPEN, NUMBER, COMMA, NUMBER, CLOSE, END], kinds("atan2(1, 2)"))
		self.assertEqual([NUMBER, OPERATOR, OPERATOR, NUMBER, END], kinds("1--2"))

	def test_spans(self):
		tokens = list(scan("  12 + abc"))
		self.assertEqual(slice(2, 4), tokens[0].span)
		self.assertEqual(slice(5, 6), tokens[1].span)
		self.assertEqual(slice(7, 10), tokens[2].span)
		self.assertEqual(slice(10, 10), tokens[3].span)

	def test_exactly_one_end(self):
		for text in ["", "   ", "1 + 2"]:
			with self.subTest(text):
				tokens = list(scan(text))
				self.assertEqual(END, tokens[-1].kind)
				self.assertEqual(1, sum(t.kind == END for t in tokens))

	def test_stream_is_restartable(self):
		stream = TokenStream("x = 1 + 2")
		self.assertEqual(list(stream), list(stream))

	def test_bad_character_is_lazy(self):
		tokens = scan("1 + $")
		self.assertEqual("1", next(tokens).text)
		self.assertEqual("+", next(tokens).text)
		with self.assertRaises(BadCharacter) as cm:
			next(tokens)
		self.assertEqual("$", cm.exception.text)
		self.assertEqual(slice(4, 5), cm.exception.span)

	def test_bad_characters(self):
		for text, glyph, where in [
			("1 . 2", ".", 2),
			("x # y", "#", 2),
			("2 × 3", "×", 2),
			("é", "é", 0),
			("7 ! ", "!", 2),
		]:
			with self.subTest(text):
				with self.assertRaises(BadCharacter) as cm:
					list(scan(text))
				self.assertEqual(glyph, cm.exception.text)
				self.assertEqual(slice(where, where+1), cm.exception.span)

	def test_blanks_of_every_sort(self):
		self.assertEqual([NUMBER, OPERATOR, NUMBER, END], kinds("\t1\r\n+  2\n"))
		self.assertEqual(slice(4, 5), list(scan("\t1\r\n+  2\n"))[1].span)

if __name__ == '__main__':
	unittest.main()
