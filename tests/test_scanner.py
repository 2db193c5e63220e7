import unittest

from sysdc.errors import SysDCSyntaxError, StrayCharacter
from sysdc.scanner import scan, TokenKind as K, Tokenizer

def _kinds(text):
	return [t.kind for t in scan(text)]

class ScannerTests(unittest.TestCase):
	def test_keywords_and_punctuation(self):
		self.assertEqual(
			[K.IMPORT, K.IDENTIFIER, K.DATA, K.IDENTIFIER, K.BRACE_OPEN, K.IDENTIFIER, K.COLON, K.IDENTIFIER, K.BRACE_CLOSE, K.END],
			_kinds("import a data Box { x: int32 }"),
		)
		self.assertEqual(
			[K.IDENTIFIER, K.PAREN_OPEN, K.PAREN_CLOSE, K.ARROW, K.AT, K.PLUS, K.DOT, K.EQUALS, K.COMMA, K.END],
			_kinds("f()->@+.=,"),
		)

	def test_keywords_need_whole_words(self):
		self.assertEqual([K.IDENTIFIER, K.IDENTIFIER, K.MODULE, K.END], _kinds("database modules module"))

	def test_comments_vanish(self):
		self.assertEqual([K.MODULE, K.IDENTIFIER, K.END], _kinds("// one\nmodule /* two\nlines */ M // three"))

	def test_spans(self):
		tokens = scan("data  Box", "u")
		self.assertEqual("u", tokens[1].span.unit)
		self.assertEqual(slice(6, 9), tokens[1].span.slice)
		self.assertEqual(3, tokens[1].span.width())
		self.assertEqual(1, tokens[-1].span.width())

	def test_stray_character(self):
		for text in ["a - b", "x: int32;", "#"]:
			with self.subTest(text):
				with self.assertRaises(StrayCharacter):
					scan(text)

class TokenizerTests(unittest.TestCase):
	def test_accept_and_require(self):
		tokens = Tokenizer("module M")
		self.assertIsNone(tokens.accept(K.DATA))
		self.assertTrue(tokens.peek_is(K.MODULE))
		self.assertEqual("module", tokens.require(K.MODULE).text)
		self.assertEqual("M", tokens.accept(K.IDENTIFIER).text)
		self.assertFalse(tokens.has_token())
		self.assertIsNotNone(tokens.accept(K.END))
		self.assertIsNotNone(tokens.accept(K.END))

	def test_require_complains(self):
		tokens = Tokenizer("data")
		with self.assertRaises(SysDCSyntaxError) as cm:
			tokens.require(K.MODULE)
		self.assertEqual((K.MODULE,), cm.exception.expected)
		self.assertIs(K.DATA, cm.exception.found)

if __name__ == '__main__':
	unittest.main()
