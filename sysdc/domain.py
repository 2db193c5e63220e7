"""
The Algebra of Type References
===============================

A SysDCType says what sort of value a name holds.

* The four primitives are ready-made and resolve to themselves.
* An Unsolved type is a placeholder the parser leaves behind. With a hint,
  it remembers the identifier text and the scope that wrote it. Without one,
  the type must come from whatever the name turns out to mean.
* A Solved type points at the full name of a concrete data type.

Unsolved types belong only to unchecked trees. Type references compare by value.
"""
from typing import Optional
from .ontology import Name

class SysDCType:
	def _key(self): raise NotImplementedError(type(self))
	def is_solved(self) -> bool: return True
	def __eq__(self, other):
		return type(self) is type(other) and self._key() == other._key()
	def __hash__(self): return hash((type(self).__name__, self._key()))
	def __repr__(self): return "<%s %s>" % (type(self).__name__, self)

class Primitive(SysDCType):
	def __init__(self, keyword:str): self.keyword = keyword
	def _key(self): return self.keyword
	def __str__(self): return self.keyword

INT32 = Primitive("int32")
FLOAT32 = Primitive("float32")
STRING = Primitive("string")
NONE = Primitive("none")

PRIMITIVES = {p.keyword: p for p in (INT32, FLOAT32, STRING, NONE)}

class Unsolved(SysDCType):
	def __init__(self, hint:Optional[str]=None, scope:Optional[Name]=None):
		assert (hint is None) == (scope is None), "A hint needs a declaring scope, and vice versa."
		self.hint, self.scope = hint, scope
	def has_hint(self) -> bool: return self.hint is not None
	def is_solved(self) -> bool: return False
	def _key(self): return self.hint, self.scope
	def __str__(self):
		return "?" if self.hint is None else "?%s@%s" % (self.hint, self.scope)

class Solved(SysDCType):
	def __init__(self, name:Name):
		assert isinstance(name, Name)
		self.name = name
	def _key(self): return self.name
	def __str__(self): return self.name.full_path()

def from_hint(text:str, scope:Name) -> SysDCType:
	""" What the parser makes of a type written in the source. """
	return PRIMITIVES.get(text) or Unsolved(text, scope)
