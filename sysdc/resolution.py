"""
All the definition resolution stuff goes here.

The Catalog indexes every definition in the whole system by full name,
once, before anything gets checked. After that it answers two questions:
what does this name mean (and what type has it), and what parameter types
does this function want. Both honor the import list of whoever is asking.

Lookup rule, in brief:

* Look for the name's head segment in the scope where the name was written,
  then each enclosing scope out to the root. The first hit commits:
  any further dotted segments then walk down through namespaces or
  through the members of a variable's data type.
* Failing that, re-root the name under each imported unit in the order
  the imports were declared. First success wins. There's no such thing
  as an ambiguity error.
"""
from typing import Optional, Sequence
from . import syntax
from .conversion import LeafStrategy, Imports
from .domain import SysDCType, Solved, Unsolved
from .errors import UnresolvedName, DuplicateDefinition
from .ontology import Name
from .space import Layer, AlreadyExists
from .structure import Binding

class Definition:
	def __init__(self, name:Name): self.name = name
	def __repr__(self): return "{%s:%s}" % (self.name, type(self).__name__)

class UnitDfn(Definition): pass
class ModuleDfn(Definition): pass
class DataDfn(Definition): pass

class FunctionDfn(Definition):
	def __init__(self, name:Name, params:Sequence[SysDCType], result:SysDCType):
		super().__init__(name)
		self.params, self.result = tuple(params), result

class VariableDfn(Definition):
	""" Members, arguments, and spawn results: all have a declared type. """
	def __init__(self, name:Name, typ:SysDCType):
		super().__init__(name)
		self.typ = typ

class LetDfn(Definition):
	""" A let-binding takes whatever type its callee returns. """
	def __init__(self, name:Name, callee:Name):
		super().__init__(name)
		self.callee = callee

_NAMESPACES = (UnitDfn, ModuleDfn, DataDfn)

class Catalog:
	_layer: Layer[Definition]
	_imports: dict[Name, tuple[Name, ...]]
	_pending: set[LetDfn]  # Lets whose type is being worked out right now.

	def __init__(self, system:syntax.SysDCSystem):
		self._layer = Layer()
		self._imports = {}
		self._pending = set()
		for unit in system.units: self._index_unit(unit)
		for unit in system.units:
			for im in unit.imports:
				if not isinstance(self._layer.symbol(im), UnitDfn):
					raise UnresolvedName(im.full_path())

	def _define(self, dfn:Definition):
		try: self._layer.mount(dfn.name, dfn)
		except AlreadyExists: raise DuplicateDefinition(dfn.name) from None

	def _index_unit(self, unit:syntax.SysDCUnit):
		self._define(UnitDfn(unit.name))
		self._imports[unit.name] = tuple(unit.imports)
		for data in unit.data:
			self._define(DataDfn(data.name))
			for member in data.members:
				self._define(VariableDfn(member.name, member.typ))
		for module in unit.modules:
			self._define(ModuleDfn(module.name))
			for fn in module.functions:
				self._index_function(fn)

	def _index_function(self, fn:syntax.SysDCFunction):
		self._define(FunctionDfn(fn.name, [a.typ for a in fn.args], fn.returns.typ))
		for arg in fn.args:
			self._define(VariableDfn(arg.name, arg.typ))
		for spawn in fn.spawns:
			self._define(VariableDfn(spawn.result.name, spawn.result.typ))
			for child in spawn.details:
				if isinstance(child, syntax.LetTo):
					self._define(LetDfn(child.name, child.func.name))

	def imports_of(self, unit:Name) -> tuple[Name, ...]:
		return self._imports.get(unit, ())

	def _home_imports(self, dfn:Definition) -> tuple[Name, ...]:
		# A definition's own types mean what they mean in its own unit.
		return self.imports_of(dfn.name.unit())

	def resolve(self, name:Name, imports:Imports) -> tuple[Name, SysDCType]:
		""" Only variables and let-bindings are values. """
		found, dfn = self._locate(name, imports)
		if not isinstance(dfn, (VariableDfn, LetDfn)):
			raise UnresolvedName(name.full_path(), imports)
		return found, self._type_of(dfn)

	def resolve_callee(self, name:Name, imports:Imports) -> tuple[Name, SysDCType]:
		""" The function a let calls, and the type it returns. """
		found, dfn = self._locate(name, imports)
		if not isinstance(dfn, FunctionDfn):
			raise UnresolvedName(name.full_path(), imports)
		return found, self._type_of(dfn)

	def arg_types(self, name:Name, imports:Imports) -> list[SysDCType]:
		_, dfn = self._locate(name, imports)
		if not isinstance(dfn, FunctionDfn):
			raise UnresolvedName(name.full_path(), imports)
		home = self._home_imports(dfn)
		return [self.resolve_type(p, home) for p in dfn.params]

	def resolve_type(self, typ:SysDCType, imports:Imports) -> SysDCType:
		if typ.is_solved(): return typ
		assert isinstance(typ, Unsolved) and typ.has_hint(), typ
		for scope in typ.scope.ancestry():
			dfn = self._layer.symbol(scope.child(typ.hint))
			if isinstance(dfn, DataDfn): return Solved(dfn.name)
		for im in imports:
			dfn = self._layer.symbol(im.child(typ.hint))
			if isinstance(dfn, DataDfn): return Solved(dfn.name)
		raise UnresolvedName(typ.scope.child(typ.hint).full_path(), imports)

	def _locate(self, name:Name, imports:Imports) -> tuple[Name, Definition]:
		head, *rest = name.segment.split(".")
		for scope in name.parent().ancestry():
			dfn = self._layer.symbol(scope.child(head))
			if dfn is not None:
				found = self._walk(dfn, rest)
				if found is None: break
				return found
		else:
			for im in imports:
				dfn = self._layer.symbol(im.child(head))
				if dfn is not None:
					found = self._walk(dfn, rest)
					if found is not None: return found
		raise UnresolvedName(name.full_path(), imports)

	def _walk(self, dfn:Definition, rest:Sequence[str]) -> Optional[tuple[Name, Definition]]:
		"""
		Follow the remaining segments down from a definition. Through a namespace,
		that means a child definition. Through a variable, it means a member
		of the variable's data type, but the name keeps growing from the variable.
		"""
		name = dfn.name
		for segment in rest:
			if isinstance(dfn, _NAMESPACES):
				dfn = self._layer.symbol(dfn.name.child(segment))
				if dfn is not None: name = dfn.name
			elif isinstance(dfn, (VariableDfn, LetDfn)):
				typ = self._type_of(dfn)
				if not isinstance(typ, Solved): return None
				dfn = self._layer.symbol(typ.name.child(segment))
				name = name.child(segment)
			else:
				return None
			if dfn is None: return None
		return name, dfn

	def _type_of(self, dfn:Definition) -> SysDCType:
		home = self._home_imports(dfn)
		if isinstance(dfn, VariableDfn): return self.resolve_type(dfn.typ, home)
		if isinstance(dfn, FunctionDfn): return self.resolve_type(dfn.result, home)
		if isinstance(dfn, LetDfn):
			# A let whose callee is reached through the let itself has no type.
			if dfn in self._pending:
				raise UnresolvedName(dfn.callee.full_path(), home)
			self._pending.add(dfn)
			try: _, callee = self._locate(dfn.callee, home)
			finally: self._pending.discard(dfn)
			if not isinstance(callee, FunctionDfn):
				raise UnresolvedName(dfn.callee.full_path(), home)
			return self._type_of(callee)
		assert False, dfn

class NameResolution(LeafStrategy):
	"""
	The leaf strategy that makes a checked tree:
	a leaf with a written type gets that type resolved;
	a leaf without one gets looked up by name, and must be a value;
	the callee of a let must be a function.
	"""
	def __init__(self, catalog:Catalog):
		self._catalog = catalog

	def leaf(self, binding:Binding, imports:Imports) -> Binding:
		typ = binding.typ
		if typ.is_solved() or typ.has_hint():
			return Binding(binding.name, self._catalog.resolve_type(typ, imports))
		return Binding(*self._catalog.resolve(binding.name, imports))

	def callee(self, binding:Binding, imports:Imports) -> Binding:
		return Binding(*self._catalog.resolve_callee(binding.name, imports))
