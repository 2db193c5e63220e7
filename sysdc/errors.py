"""
Everything that can stop a compile.

All of these are terminal: the first one raised aborts the whole attempt.
Each carries enough context to explain itself via str(), and the ones the
front-end raises also know where in the source they happened.
"""
from typing import Optional, Sequence
from .location import Span
from .ontology import Name

class SysDCError(Exception):
	span: Optional[Span] = None

class SysDCSyntaxError(SysDCError):
	""" A mandatory token did not show up. """
	def __init__(self, expected:Sequence, found, span:Optional[Span]=None):
		super().__init__(tuple(expected), found)
		self.expected, self.found, self.span = tuple(expected), found, span
	def __str__(self):
		wanted = " or ".join(map(str, self.expected))
		return "Expected %s but found %s." % (wanted, self.found)

class StrayCharacter(SysDCSyntaxError):
	""" Something in the text that cannot begin any token. """
	def __init__(self, text:str, span:Span):
		super().__init__((), text, span)
	def __str__(self): return "Found a stray character %r." % self.found

class DuplicateAnnotation(SysDCError):
	def __init__(self, which:str, where:Name):
		super().__init__(which, where)
		self.which, self.where = which, where
	def __str__(self): return "Annotation @%s appears more than once in %s." % (self.which, self.where)

class MissingAnnotation(SysDCError):
	def __init__(self, which:str, where:Name):
		super().__init__(which, where)
		self.which, self.where = which, where
	def __str__(self): return "Annotation @%s is missing from %s." % (self.which, self.where)

class UnknownAnnotation(SysDCError):
	def __init__(self, name:str, span:Optional[Span]=None):
		super().__init__(name)
		self.name, self.span = name, span
	def __str__(self): return "There is no such annotation as %r." % self.name

class UnknownAttribute(SysDCError):
	def __init__(self, name:str, span:Optional[Span]=None):
		super().__init__(name)
		self.name, self.span = name, span
	def __str__(self): return "There is no such attribute as %r here." % self.name

class UnresolvedName(SysDCError):
	def __init__(self, attempted:str, imports:Sequence[Name]=()):
		super().__init__(attempted, tuple(imports))
		self.attempted, self.imports = attempted, tuple(imports)
	def __str__(self):
		text = "I don't see what %r refers to." % self.attempted
		if self.imports:
			text += " (Tried imports: %s)" % ", ".join(map(str, self.imports))
		return text

class DuplicateDefinition(SysDCError):
	def __init__(self, name:Name):
		super().__init__(name)
		self.name = name
	def __str__(self): return "%s is defined more than once in the same scope." % self.name

class TypeMismatch(SysDCError):
	def __init__(self, expected, actual, index:Optional[int]=None):
		super().__init__(expected, actual, index)
		self.expected, self.actual, self.index = expected, actual, index
	def __str__(self):
		text = "Types need to match, but %s was expected and %s was found." % (self.expected, self.actual)
		if self.index is not None:
			text = "At argument %d: %s" % (self.index, text)
		return text

class ArityMismatch(TypeMismatch):
	""" A call supplies more or fewer arguments than the callee declares. The absent side is None. """
	def __str__(self):
		if self.expected is None:
			return "At argument %d: the callee takes no such argument, but got %s." % (self.index, self.actual)
		return "At argument %d: the callee wants %s, but no argument was given." % (self.index, self.expected)
