"""
Recursive-descent parser: tokens in, unchecked unit (and its imports) out.

One method per production. A production whose leading token is absent simply
isn't there, so the method returns None and the caller carries on. Once the
leading token matches, the production is committed and any later missing
token is a syntax error.
"""
from enum import Enum
from typing import Callable, Optional, TypeVar
from . import syntax
from .domain import from_hint, Unsolved
from .errors import DuplicateAnnotation, MissingAnnotation, UnknownAnnotation, UnknownAttribute
from .ontology import Name
from .scanner import TokenKind, Tokenizer, Token
from .structure import Binding

T = TypeVar("T")

class Annotation(Enum):
	RETURN = "return"
	SPAWN = "spawn"

class Attribute(Enum):
	USE = "use"

class Statement(Enum):
	""" What may appear within the braces after a spawn's result. """
	LET = "let"
	RETURN = "return"

def _vocabulary(kind:type[Enum], token:Token, complaint:type[Exception]):
	try: return kind(token.text)
	except ValueError: raise complaint(token.text, token.span) from None

class Parser:
	def __init__(self, tokenizer:Tokenizer, unit:Name):
		self._tokens = tokenizer
		self._unit = unit

	def _list(self, production:Callable[[], Optional[T]], delimiter:Optional[TokenKind]=None) -> list[T]:
		items = []
		while True:
			item = production()
			if item is None: break
			items.append(item)
			if delimiter is not None and not self._tokens.accept(delimiter): break
		return items

	def _some(self, production:Callable[[], Optional[T]], delimiter:Optional[TokenKind]=None) -> list[T]:
		""" As _list, but the first element is mandatory. """
		items = self._list(production, delimiter)
		if not items: self._tokens.complain(TokenKind.IDENTIFIER)
		return items

	def parse(self) -> tuple[syntax.SysDCUnit, list[Name]]:
		""" unit := import* (data | module)* """
		imports = []
		while self._tokens.accept(TokenKind.IMPORT):
			imports.extend(self._some(self.parse_import, TokenKind.COMMA))
		unit = syntax.SysDCUnit(self._unit, imports=imports)
		while self._tokens.has_token():
			data = self.parse_data()
			if data is not None:
				unit.data.append(data)
				continue
			module = self.parse_module()
			if module is not None:
				unit.modules.append(module)
				continue
			self._tokens.complain(TokenKind.DATA, TokenKind.MODULE)
		return unit, list(imports)

	def parse_import(self) -> Optional[Name]:
		segments = self._segments()
		if segments is not None: return Name.root().qualify(segments)

	def parse_data(self) -> Optional[syntax.SysDCData]:
		""" data := 'data' ID '{' (field (',' field)*)? '}' """
		if not self._tokens.accept(TokenKind.DATA): return None
		name = self._unit.child(self._tokens.require(TokenKind.IDENTIFIER).text)
		self._tokens.require(TokenKind.BRACE_OPEN)
		members = self._list(lambda: self.parse_field(name), TokenKind.COMMA)
		self._tokens.require(TokenKind.BRACE_CLOSE)
		return syntax.SysDCData(name, members)

	def parse_module(self) -> Optional[syntax.SysDCModule]:
		""" module := 'module' ID '{' function* '}' """
		if not self._tokens.accept(TokenKind.MODULE): return None
		name = self._unit.child(self._tokens.require(TokenKind.IDENTIFIER).text)
		self._tokens.require(TokenKind.BRACE_OPEN)
		functions = self._list(lambda: self.parse_function(name))
		self._tokens.require(TokenKind.BRACE_CLOSE)
		return syntax.SysDCModule(name, functions)

	def parse_function(self, module:Name) -> Optional[syntax.SysDCFunction]:
		""" function := ID '(' (field (',' field)*)? ')' '->' ID '{' body '}' """
		token = self._tokens.accept(TokenKind.IDENTIFIER)
		if token is None: return None
		name = module.child(token.text)
		self._tokens.require(TokenKind.PAREN_OPEN)
		args = self._list(lambda: self.parse_field(name), TokenKind.COMMA)
		self._tokens.require(TokenKind.PAREN_CLOSE)
		self._tokens.require(TokenKind.ARROW)
		return_type = from_hint(self._tokens.require(TokenKind.IDENTIFIER).text, name)
		self._tokens.require(TokenKind.BRACE_OPEN)
		returns, spawns = self.parse_body(name)
		self._tokens.require(TokenKind.BRACE_CLOSE)
		return syntax.SysDCFunction(name, args, Binding(returns, return_type), spawns)

	def parse_body(self, function:Name) -> tuple[Name, list[syntax.SysDCSpawn]]:
		""" body := annotation* ; annotation := attribute* '@' ID annotation-tail """
		returns, spawns, last = None, [], None
		while True:
			attributes = self._list(lambda: self.parse_attribute(function))
			if not self._tokens.accept(TokenKind.AT):
				if attributes:
					# Attributes trailing the last spawn of a body belong to that spawn.
					if last is Annotation.SPAWN and self._tokens.peek_is(TokenKind.BRACE_CLOSE):
						spawns[-1].details.extend(_uses(attributes))
					else:
						self._tokens.complain(TokenKind.AT)
				break
			word = self._tokens.require(TokenKind.IDENTIFIER)
			annotation = _vocabulary(Annotation, word, UnknownAnnotation)
			last = annotation
			if annotation is Annotation.RETURN:
				if attributes:
					raise UnknownAttribute(attributes[0][0].value, word.span)
				if returns is not None:
					raise DuplicateAnnotation(annotation.value, function)
				returns = self._require_var(function)
			elif annotation is Annotation.SPAWN:
				result = self.parse_field(function) or self._tokens.complain(TokenKind.IDENTIFIER)
				spawn = syntax.SysDCSpawn(result, _uses(attributes))
				self.parse_spawn_block(spawn, function)
				spawns.append(spawn)
			else: assert False, annotation
		if returns is None:
			raise MissingAnnotation(Annotation.RETURN.value, function)
		return returns, spawns

	def parse_attribute(self, scope:Name) -> Optional[tuple[Attribute, list[Name]]]:
		""" attribute := '+' ID var (',' var)* """
		if not self._tokens.accept(TokenKind.PLUS): return None
		attribute = _vocabulary(Attribute, self._tokens.require(TokenKind.IDENTIFIER), UnknownAttribute)
		return attribute, self._some(lambda: self.parse_var(scope), TokenKind.COMMA)

	def parse_spawn_block(self, spawn:syntax.SysDCSpawn, function:Name):
		"""
		spawn-block := '{' (let | return)* '}'
		let := 'let' ID '=' var '(' (var (',' var)*)? ')'
		return := 'return' var
		"""
		if not self._tokens.accept(TokenKind.BRACE_OPEN): return
		scope = function.child("@"+spawn.result.name.segment, anonymous=True)
		while not self._tokens.accept(TokenKind.BRACE_CLOSE):
			word = self._tokens.accept(TokenKind.IDENTIFIER) or self._tokens.complain(TokenKind.IDENTIFIER, TokenKind.BRACE_CLOSE)
			statement = _vocabulary(Statement, word, UnknownAnnotation)
			if statement is Statement.LET:
				name = scope.child(self._tokens.require(TokenKind.IDENTIFIER).text)
				self._tokens.require(TokenKind.EQUALS)
				callee = self._require_var(scope)
				self._tokens.require(TokenKind.PAREN_OPEN)
				args = self._list(lambda: self.parse_var(scope), TokenKind.COMMA)
				self._tokens.require(TokenKind.PAREN_CLOSE)
				unsolved = [Binding(a, Unsolved()) for a in args]
				spawn.details.append(syntax.LetTo(name, Binding(callee, Unsolved()), unsolved))
			elif statement is Statement.RETURN:
				spawn.details.append(syntax.Return(self._require_var(scope)))
			else: assert False, statement

	def parse_var(self, scope:Name) -> Optional[Name]:
		""" var := ID ('.' ID)* """
		segments = self._segments()
		if segments is not None: return scope.child(".".join(segments))

	def _require_var(self, scope:Name) -> Name:
		return self.parse_var(scope) or self._tokens.complain(TokenKind.IDENTIFIER)

	def _segments(self) -> Optional[list[str]]:
		head = self._tokens.accept(TokenKind.IDENTIFIER)
		if head is None: return None
		segments = [head.text]
		while self._tokens.accept(TokenKind.DOT):
			segments.append(self._tokens.require(TokenKind.IDENTIFIER).text)
		return segments

	def parse_field(self, scope:Name) -> Optional[Binding]:
		""" field := ID ':' ID """
		token = self._tokens.accept(TokenKind.IDENTIFIER)
		if token is None: return None
		self._tokens.require(TokenKind.COLON)
		type_text = self._tokens.require(TokenKind.IDENTIFIER).text
		return Binding(scope.child(token.text), from_hint(type_text, scope))

def _uses(attributes:list[tuple[Attribute, list[Name]]]) -> list[syntax.Use]:
	uses = []
	for attribute, names in attributes:
		assert attribute is Attribute.USE, attribute
		uses.extend(syntax.Use(name) for name in names)
	return uses

def parse_text(unit_name:str, text:str) -> tuple[syntax.SysDCUnit, list[Name]]:
	""" Tokenize and parse one unit. The unit is named directly under the root. """
	unit = Name.root().child(unit_name)
	return Parser(Tokenizer(text, unit_name), unit).parse()
