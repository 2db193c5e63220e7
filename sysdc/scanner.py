"""
The tokenizer: source text in, forward-only token stream out.

The parser only ever needs one token of lookahead, so this hands out
exactly three ways to look at the stream: peek at the kind of the next
token, take it if it's the kind you hoped for, or insist on it.
"""
import re
import sys
from enum import Enum
from typing import NamedTuple, Optional
from .location import Span
from .errors import SysDCSyntaxError, StrayCharacter

class TokenKind(Enum):
	DATA = "data"
	MODULE = "module"
	IMPORT = "import"
	IDENTIFIER = "identifier"
	BRACE_OPEN = "{"
	BRACE_CLOSE = "}"
	PAREN_OPEN = "("
	PAREN_CLOSE = ")"
	COLON = ":"
	COMMA = ","
	ARROW = "->"
	AT = "@"
	PLUS = "+"
	DOT = "."
	EQUALS = "="
	END = "end of input"

	def __str__(self):
		if self in (TokenKind.IDENTIFIER, TokenKind.END): return self.value
		return "'%s'" % self.value

KEYWORDS = {k.value: k for k in (TokenKind.DATA, TokenKind.MODULE, TokenKind.IMPORT)}
PUNCTUATION = {k.value: k for k in TokenKind if not (k.value.isalpha() or k is TokenKind.END)}

_IGNORE = re.compile(r"(?:\s+|//[^\n]*|/\*.*?\*/)+", re.S)
_WORD = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_PUNCTUATION = re.compile("|".join(re.escape(p) for p in sorted(PUNCTUATION, key=len, reverse=True)))

class Token(NamedTuple):
	kind: TokenKind
	text: str
	span: Span

def scan(text:str, unit:str="") -> list[Token]:
	""" The whole stream at once, END token included. """
	tokens, at = [], 0
	while True:
		ignored = _IGNORE.match(text, at)
		if ignored: at = ignored.end()
		if at >= len(text):
			tokens.append(Token(TokenKind.END, "", Span(unit, slice(at, at))))
			return tokens
		word = _WORD.match(text, at)
		if word:
			lexeme = sys.intern(word.group())
			kind = KEYWORDS.get(lexeme, TokenKind.IDENTIFIER)
			match = word
		else:
			match = _PUNCTUATION.match(text, at)
			if match is None:
				raise StrayCharacter(text[at], Span(unit, slice(at, at+1)))
			lexeme = match.group()
			kind = PUNCTUATION[lexeme]
		tokens.append(Token(kind, lexeme, Span(unit, slice(at, match.end()))))
		at = match.end()

class Tokenizer:
	def __init__(self, text:str, unit:str=""):
		self._tokens = scan(text, unit)
		self._index = 0

	def _current(self) -> Token: return self._tokens[self._index]

	def has_token(self) -> bool:
		return self._current().kind is not TokenKind.END

	def peek_is(self, kind:TokenKind) -> bool:
		return self._current().kind is kind

	def accept(self, kind:TokenKind) -> Optional[Token]:
		""" Take the next token if it's of this kind; otherwise leave the stream alone. """
		token = self._current()
		if token.kind is not kind: return None
		if token.kind is not TokenKind.END: self._index += 1
		return token

	def require(self, kind:TokenKind) -> Token:
		return self.accept(kind) or self.complain(kind)

	def complain(self, *expected:TokenKind):
		token = self._current()
		raise SysDCSyntaxError(expected, token.kind, token.span)
