"""
The catalog's notion of a name-space: one flat layer keyed by full name.

Nested scopes fall out of the names themselves, since every name knows
its parent, so a single layer that refuses duplicate keys is enough.
"""
from typing import Generic, Iterable, Optional, TypeVar
from .ontology import Name

class AlreadyExists(KeyError): pass

T = TypeVar('T')

class Layer(Generic[T]):
	""" Lightly enhanced dictionary: It does not like duplicate keys. """
	_symbol: dict[Name, T]

	def __init__(self):
		self._symbol = {}

	def __contains__(self, key: Name) -> bool:
		return key in self._symbol

	def symbol(self, key: Name) -> Optional[T]:
		return self._symbol.get(key)

	def mount(self, key: Name, symbol: T) -> T:
		if key in self._symbol:
			raise AlreadyExists(key)
		self._symbol[key] = symbol
		return symbol

	def each_symbol(self) -> Iterable[T]:
		return self._symbol.values()
