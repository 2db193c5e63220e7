"""
Names say where a thing lives.

Every scope the parser opens (unit, data, module, function, spawn, variable)
gets a Name. A Name is a segment plus a link to the enclosing Name, so
descendants refer to (but never own) their ancestors. Two names are the same
name exactly when their full dotted paths agree.

A reference to a variable keeps its dotted text as a single segment
under the scope where it was written (``move`` / ``box.x``), which lets
the resolver know where to begin looking.
"""
from typing import Optional, Iterable, Iterator

class Name:
	segment: str
	anonymous: bool  # Synthetic scopes, such as the inside of a spawn.

	def __init__(self, segment:str, parent:Optional["Name"]=None, anonymous:bool=False):
		assert isinstance(segment, str)
		assert parent is None or segment, "Only the root goes without a segment."
		self.segment, self._parent, self.anonymous = segment, parent, anonymous
		if parent is None or parent.is_root(): self._path = segment
		else: self._path = parent._path + "." + segment

	@staticmethod
	def root() -> "Name": return Name("")

	def is_root(self) -> bool: return self._parent is None

	def child(self, segment:str, anonymous:bool=False) -> "Name":
		return Name(segment, self, anonymous)

	def qualify(self, segments:Iterable[str]) -> "Name":
		""" Descend through several children at once. """
		name = self
		for s in segments: name = name.child(s)
		return name

	def parent(self, skip_anonymous:bool=False) -> Optional["Name"]:
		up = self._parent
		while skip_anonymous and up is not None and up.anonymous:
			up = up._parent
		return up

	def full_path(self) -> str: return self._path

	def segments(self) -> tuple[str, ...]:
		""" Root excluded, outermost first. """
		return tuple(n.segment for n in reversed(list(self.ancestry())) if not n.is_root())

	def ancestry(self) -> Iterator["Name"]:
		""" This name, then each enclosing one, ending with the root. """
		name = self
		while name is not None:
			yield name
			name = name._parent

	def unit(self) -> Optional["Name"]:
		""" The outermost non-root ancestor, which names a unit. """
		segments = self.segments()
		if segments: return Name.root().child(segments[0])

	def __eq__(self, other):
		return isinstance(other, Name) and self._path == other._path
	def __hash__(self): return hash(self._path)
	def __str__(self): return self._path
	def __repr__(self): return "<Name %s>" % self._path
