"""
Term-by-term mapping between the checked model and plain data:
dicts, lists, and strings that any codec (json, msgpack, ...) can carry.

Names travel as their full paths. A segment beginning with '@' is the
anonymous scope of a spawn, so it comes back anonymous.
"""
from boozetools.support.foundation import Visitor
from . import structure
from .domain import SysDCType, Primitive, Solved, PRIMITIVES
from .ontology import Name
from .structure import Binding

def _name_term(name:Name) -> str: return name.full_path()

def _name(path:str) -> Name:
	name = Name.root()
	for segment in path.split("."):
		name = name.child(segment, anonymous=segment.startswith("@"))
	return name

def _type_term(typ:SysDCType) -> dict:
	if isinstance(typ, Primitive): return {"primitive": typ.keyword}
	if isinstance(typ, Solved): return {"data": typ.name.full_path()}
	raise ValueError("Only checked types go into interchange, not %r" % typ)

def _type(term:dict) -> SysDCType:
	if "primitive" in term: return PRIMITIVES[term["primitive"]]
	return Solved(_name(term["data"]))

def _binding_term(b:Binding) -> list:
	return [_name_term(b.name), _type_term(b.typ)]

def _binding(term:list) -> Binding:
	name, typ = term
	return Binding(_name(name), _type(typ))

class _Terms(Visitor):
	def visit_SysDCSystem(self, system:structure.SysDCSystem):
		return {"units": [self.visit(u) for u in system.units]}

	def visit_SysDCUnit(self, unit:structure.SysDCUnit):
		return {
			"name": _name_term(unit.name),
			"data": [self.visit(d) for d in unit.data],
			"modules": [self.visit(m) for m in unit.modules],
		}

	def visit_SysDCData(self, data:structure.SysDCData):
		return {"name": _name_term(data.name), "members": [_binding_term(m) for m in data.members]}

	def visit_SysDCModule(self, module:structure.SysDCModule):
		return {"name": _name_term(module.name), "functions": [self.visit(f) for f in module.functions]}

	def visit_SysDCFunction(self, fn:structure.SysDCFunction):
		return {
			"name": _name_term(fn.name),
			"args": [_binding_term(a) for a in fn.args],
			"returns": _binding_term(fn.returns),
			"spawns": [self.visit(s) for s in fn.spawns],
		}

	def visit_SysDCSpawn(self, spawn:structure.SysDCSpawn):
		return {"result": _binding_term(spawn.result), "details": [self.visit(c) for c in spawn.details]}

	def visit_Use(self, use:structure.Use):
		return {"use": _binding_term(Binding(*use))}

	def visit_Return(self, ret:structure.Return):
		return {"return": _binding_term(Binding(*ret))}

	def visit_LetTo(self, let:structure.LetTo):
		return {"let_to": {
			"name": _name_term(let.name),
			"func": _binding_term(let.func),
			"args": [_binding_term(a) for a in let.args],
		}}

def as_terms(system:structure.SysDCSystem) -> dict:
	return _Terms().visit(system)

def _child(term:dict):
	if "use" in term: return structure.Use(*_binding(term["use"]))
	if "return" in term: return structure.Return(*_binding(term["return"]))
	let = term["let_to"]
	return structure.LetTo(_name(let["name"]), _binding(let["func"]), tuple(map(_binding, let["args"])))

def _function(term:dict) -> structure.SysDCFunction:
	spawns = tuple(
		structure.SysDCSpawn(_binding(s["result"]), tuple(map(_child, s["details"])))
		for s in term["spawns"]
	)
	return structure.SysDCFunction(_name(term["name"]), tuple(map(_binding, term["args"])), _binding(term["returns"]), spawns)

def from_terms(terms:dict) -> structure.SysDCSystem:
	units = []
	for u in terms["units"]:
		data = tuple(structure.SysDCData(_name(d["name"]), tuple(map(_binding, d["members"]))) for d in u["data"])
		modules = tuple(
			structure.SysDCModule(_name(m["name"]), tuple(map(_function, m["functions"])))
			for m in u["modules"]
		)
		units.append(structure.SysDCUnit(_name(u["name"]), data, modules))
	return structure.SysDCSystem(tuple(units))
