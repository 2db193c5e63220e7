"""
The pipeline, start to finish:

	text --> tokens --> unchecked unit (and imports), once per unit
	units --> unchecked system --> catalog
	catalog + unchecked system --> checked system --> type-match check

Every stage raises on the first problem; nothing partial comes out.
"""
from typing import Iterable, Sequence
from . import syntax, structure
from .conversion import Conversion
from .front_end import parse_text
from .ontology import Name
from .resolution import Catalog, NameResolution
from .static.check import TypeMatchChecker

class Compiler:
	""" Collect units one at a time, then check them all together. """
	_units: list[syntax.SysDCUnit]

	def __init__(self):
		self._units = []

	def add_unit(self, unit_name:str, text:str, imports:Sequence[Name]=()) -> syntax.SysDCUnit:
		unit, _ = parse_text(unit_name, text)
		self.add_parsed(unit, imports)
		return unit

	def add_parsed(self, unit:syntax.SysDCUnit, imports:Sequence[Name]=()) -> None:
		unit.imports.extend(i for i in imports if i not in unit.imports)
		self._units.append(unit)

	def generate_system(self) -> structure.SysDCSystem:
		system = syntax.SysDCSystem(self._units)
		catalog = Catalog(system)
		checked = Conversion(NameResolution(catalog)).convert(system)
		TypeMatchChecker(catalog).check_system(checked)
		return checked

def compile_units(pairs:Iterable[tuple[str, str]]) -> structure.SysDCSystem:
	""" Whatever an input source yields, as (unit name, unit text) pairs. """
	compiler = Compiler()
	for unit_name, text in pairs:
		compiler.add_unit(unit_name, text)
	return compiler.generate_system()
