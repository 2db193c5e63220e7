"""
The type-match checker makes one pass over a checked system and insists:

* A function's return variable has the type the function declares.
* A spawn's Return children have the spawn's own declared type.
* A LetTo passes arguments whose types agree, position by position,
  with what the callee declares. Too many or too few is an ArityMismatch.

Order is units, then modules, then functions, just as declared.
The first disagreement ends the check.
"""
from typing import Sequence
from boozetools.support.foundation import Visitor
from .. import structure
from ..domain import SysDCType
from ..errors import TypeMismatch, ArityMismatch
from ..ontology import Name
from ..resolution import Catalog

class TypeMatchChecker(Visitor):
	def __init__(self, catalog:Catalog):
		self._catalog = catalog

	def tour(self, items, *args) -> None:
		for i in items: self.visit(i, *args)

	def check_system(self, system:structure.SysDCSystem) -> None:
		self.tour(system.units)

	def visit_SysDCUnit(self, unit:structure.SysDCUnit):
		imports = self._catalog.imports_of(unit.name)
		for module in unit.modules:
			self.tour(module.functions, imports)

	def visit_SysDCFunction(self, fn:structure.SysDCFunction, imports:Sequence[Name]):
		declared = fn.returns.typ
		_, actual = self._catalog.resolve(fn.returns.name, imports)
		if declared != actual:
			raise TypeMismatch(declared, actual)
		self.tour(fn.spawns, imports)

	def visit_SysDCSpawn(self, spawn:structure.SysDCSpawn, imports:Sequence[Name]):
		self.tour(spawn.details, spawn, imports)

	def visit_Use(self, use:structure.Use, spawn:structure.SysDCSpawn, imports:Sequence[Name]):
		pass  # Already resolved, which is all a use needs.

	def visit_Return(self, ret:structure.Return, spawn:structure.SysDCSpawn, imports:Sequence[Name]):
		if spawn.result.typ != ret.typ:
			raise TypeMismatch(spawn.result.typ, ret.typ)

	def visit_LetTo(self, let:structure.LetTo, spawn:structure.SysDCSpawn, imports:Sequence[Name]):
		params = self._catalog.arg_types(let.func.name, imports)
		_compare_arguments(params, [a.typ for a in let.args])

def _compare_arguments(need:Sequence[SysDCType], got:Sequence[SysDCType]):
	for index, (n, g) in enumerate(zip(need, got)):
		if n != g:
			raise TypeMismatch(n, g, index)
	if len(need) != len(got):
		index = min(len(need), len(got))
		expected = need[index] if index < len(need) else None
		actual = got[index] if index < len(got) else None
		raise ArityMismatch(expected, actual, index)
