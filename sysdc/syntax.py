"""
The set of parse-nodes in simple form: the unchecked tree.

The parser builds these incrementally, appending to their lists as it goes.
Types in here may still be Unsolved; the conversion pass turns each node
into its counterpart in structure.py. Class-level annotations say what
each field holds.

Nodes compare by value, which is what makes re-parsing comparable.
"""
from typing import Optional
from .ontology import Name
from .domain import SysDCType, Unsolved
from .structure import Binding

class Node:
	def __eq__(self, other):
		return type(self) is type(other) and vars(self) == vars(other)
	__hash__ = None
	def __repr__(self):
		return "%s(%s)" % (type(self).__name__, ", ".join("%s=%r" % kv for kv in vars(self).items()))

class Use(Node):
	def __init__(self, name:Name, typ:SysDCType=None):
		self.name, self.typ = name, typ or Unsolved()
	def binding(self) -> Binding: return Binding(self.name, self.typ)

class Return(Node):
	def __init__(self, name:Name, typ:SysDCType=None):
		self.name, self.typ = name, typ or Unsolved()
	def binding(self) -> Binding: return Binding(self.name, self.typ)

class LetTo(Node):
	""" A call: the name is bound to whatever the callee returns. """
	func: Binding
	args: list[Binding]
	def __init__(self, name:Name, func:Binding, args:list[Binding]):
		self.name, self.func, self.args = name, func, args

class SysDCSpawn(Node):
	result: Binding
	details: list[Node]
	def __init__(self, result:Binding, details:Optional[list[Node]]=None):
		self.result = result
		self.details = details or []

class SysDCFunction(Node):
	args: list[Binding]
	returns: Binding  # The declared type sits on the return-variable's binding.
	spawns: list[SysDCSpawn]
	def __init__(self, name:Name, args:list[Binding], returns:Binding, spawns:list[SysDCSpawn]):
		self.name, self.args, self.returns, self.spawns = name, args, returns, spawns

class SysDCModule(Node):
	def __init__(self, name:Name, functions:Optional[list[SysDCFunction]]=None):
		self.name = name
		self.functions = functions or []

class SysDCData(Node):
	def __init__(self, name:Name, members:Optional[list[Binding]]=None):
		self.name = name
		self.members = members or []

class SysDCUnit(Node):
	imports: list[Name]  # Resolution metadata only; the checked form drops it.
	def __init__(self, name:Name, data=None, modules=None, imports=None):
		self.name = name
		self.data: list[SysDCData] = data or []
		self.modules: list[SysDCModule] = modules or []
		self.imports = imports or []

class SysDCSystem(Node):
	def __init__(self, units:list[SysDCUnit]):
		self.units = units
