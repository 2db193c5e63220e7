"""
The checked model: what the compiler hands to downstream tools.

Every type in here is fully resolved and nothing changes after
construction. Same shape as the unchecked tree in syntax.py, except
units no longer carry their import lists.
"""
from typing import NamedTuple, Union
from .ontology import Name
from .domain import SysDCType

class Binding(NamedTuple):
	""" A name paired with its type; the leaf of every tree. """
	name: Name
	typ: SysDCType

class Use(NamedTuple):
	name: Name
	typ: SysDCType

class Return(NamedTuple):
	name: Name
	typ: SysDCType

class LetTo(NamedTuple):
	name: Name
	func: Binding
	args: tuple[Binding, ...]

SysDCSpawnChild = Union[Use, Return, LetTo]

class SysDCSpawn(NamedTuple):
	result: Binding
	details: tuple[SysDCSpawnChild, ...]

class SysDCFunction(NamedTuple):
	name: Name
	args: tuple[Binding, ...]
	returns: Binding
	spawns: tuple[SysDCSpawn, ...]

class SysDCModule(NamedTuple):
	name: Name
	functions: tuple[SysDCFunction, ...]

class SysDCData(NamedTuple):
	name: Name
	members: tuple[Binding, ...]

class SysDCUnit(NamedTuple):
	name: Name
	data: tuple[SysDCData, ...]
	modules: tuple[SysDCModule, ...]

class SysDCSystem(NamedTuple):
	units: tuple[SysDCUnit, ...]
