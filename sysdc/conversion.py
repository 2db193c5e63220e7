"""
One top-down walk from the unchecked tree to the checked tree.

The walk knows the shape of the tree and nothing about names or types.
Whatever should happen to each (name, type) leaf is up to the strategy
it's given: copy it verbatim, resolve it against the catalog, or whatever
else comes along. The first exception out of a strategy ends the walk;
no half-built tree ever escapes.
"""
from abc import ABC, abstractmethod
from typing import Sequence
from boozetools.support.foundation import Visitor
from . import syntax, structure
from .ontology import Name
from .structure import Binding

Imports = Sequence[Name]

class LeafStrategy(ABC):
	@abstractmethod
	def leaf(self, binding:Binding, imports:Imports) -> Binding:
		""" Turn one unchecked leaf into its checked form, or raise. """

	def callee(self, binding:Binding, imports:Imports) -> Binding:
		""" The function a let calls. Most strategies treat it like any other leaf. """
		return self.leaf(binding, imports)

class Verbatim(LeafStrategy):
	""" A plain structural copy. """
	def leaf(self, binding:Binding, imports:Imports) -> Binding:
		return binding

class Conversion(Visitor):
	def __init__(self, strategy:LeafStrategy):
		self._strategy = strategy

	def _leaf(self, binding:Binding, imports:Imports) -> Binding:
		return self._strategy.leaf(binding, imports)

	def _leaves(self, bindings:Sequence[Binding], imports:Imports) -> tuple[Binding, ...]:
		return tuple(self._leaf(b, imports) for b in bindings)

	def _tour(self, items, imports:Imports) -> tuple:
		return tuple(self.visit(i, imports) for i in items)

	def convert(self, system:syntax.SysDCSystem) -> structure.SysDCSystem:
		return self.visit(system)

	def visit_SysDCSystem(self, system:syntax.SysDCSystem):
		return structure.SysDCSystem(tuple(self.visit(unit) for unit in system.units))

	def visit_SysDCUnit(self, unit:syntax.SysDCUnit):
		imports = tuple(unit.imports)
		return structure.SysDCUnit(unit.name, self._tour(unit.data, imports), self._tour(unit.modules, imports))

	def visit_SysDCData(self, data:syntax.SysDCData, imports:Imports):
		return structure.SysDCData(data.name, self._leaves(data.members, imports))

	def visit_SysDCModule(self, module:syntax.SysDCModule, imports:Imports):
		return structure.SysDCModule(module.name, self._tour(module.functions, imports))

	def visit_SysDCFunction(self, fn:syntax.SysDCFunction, imports:Imports):
		args = self._leaves(fn.args, imports)
		returns = self._leaf(fn.returns, imports)
		return structure.SysDCFunction(fn.name, args, returns, self._tour(fn.spawns, imports))

	def visit_SysDCSpawn(self, spawn:syntax.SysDCSpawn, imports:Imports):
		result = self._leaf(spawn.result, imports)
		return structure.SysDCSpawn(result, self._tour(spawn.details, imports))

	def visit_Use(self, use:syntax.Use, imports:Imports):
		return structure.Use(*self._leaf(use.binding(), imports))

	def visit_Return(self, ret:syntax.Return, imports:Imports):
		return structure.Return(*self._leaf(ret.binding(), imports))

	def visit_LetTo(self, let:syntax.LetTo, imports:Imports):
		func = self._strategy.callee(let.func, imports)
		return structure.LetTo(let.name, func, self._leaves(let.args, imports))
