import unittest

from sysdc import syntax
from sysdc.domain import INT32, STRING, Unsolved
from sysdc.errors import (
	SysDCSyntaxError, StrayCharacter, DuplicateAnnotation, MissingAnnotation,
	UnknownAnnotation, UnknownAttribute,
)
from sysdc.front_end import parse_text
from sysdc.ontology import Name
from sysdc.structure import Binding

UNIT = Name.root().child("test")

def _parse(text) -> syntax.SysDCUnit:
	unit, _ = parse_text("test", text)
	return unit

def _function(text) -> syntax.SysDCFunction:
	return _parse(text).modules[0].functions[0]

class DataTests(unittest.TestCase):
	def test_empty_data_in_all_layouts(self):
		unit = _parse("""
			data A {}
			data B{}
			data C{

			}
			data D
			{}
			data
			E
			{

			}
		""")
		self.assertEqual([UNIT.child(x) for x in "ABCDE"], [d.name for d in unit.data])
		self.assertTrue(all(d.members == [] for d in unit.data))
		self.assertEqual([], unit.modules)

	def test_members_keep_their_hints(self):
		unit = _parse("""
			data Box {
				x: int32,
				y: UserDefinedData,
			}
		""")
		box = UNIT.child("Box")
		expect = syntax.SysDCData(box, [
			Binding(box.child("x"), INT32),
			Binding(box.child("y"), Unsolved("UserDefinedData", box)),
		])
		self.assertEqual(syntax.SysDCUnit(UNIT, [expect], []), unit)

	def test_illegal_members(self):
		for text in [
			"data Box { x: int32 y: int32 }",
			"data Box { x: int32, y: }",
			"data Box x: int32, y: int32",
		]:
			with self.subTest(text):
				with self.assertRaises(SysDCSyntaxError):
					_parse(text)

class ModuleTests(unittest.TestCase):
	def test_empty_modules(self):
		unit = _parse("module A {} module B{} module\nC\n{\n}")
		self.assertEqual([UNIT.child(x) for x in "ABC"], [m.name for m in unit.modules])
		self.assertEqual([], unit.data)

	def test_function_with_only_return(self):
		fn = _function("""
			module BoxModule {
				new() -> Box {
					@return box
				}
			}
		""")
		name = UNIT.child("BoxModule").child("new")
		self.assertEqual(syntax.SysDCFunction(name, [], Binding(name.child("box"), Unsolved("Box", name)), []), fn)

	def test_function_with_return_and_spawn(self):
		fn = _function("""
			module BoxModule {
				new() -> Box {
					@return box

					@spawn box: Box
				}
			}
		""")
		name = fn.name
		spawn = syntax.SysDCSpawn(Binding(name.child("box"), Unsolved("Box", name)))
		self.assertEqual([spawn], fn.spawns)
		self.assertEqual(name.child("box"), fn.returns.name)

	def test_function_in_full(self):
		fn = _function("""
			module BoxModule {
				move(box: Box, dx: int32, dy: int32) -> Box {
					@return movedBox

					+use box.x, box.y
					+use dx, dy
					@spawn movedBox: Box
				}
			}
		""")
		name = fn.name
		self.assertEqual([
			Binding(name.child("box"), Unsolved("Box", name)),
			Binding(name.child("dx"), INT32),
			Binding(name.child("dy"), INT32),
		], fn.args)
		uses = [syntax.Use(name.child(v)) for v in ("box.x", "box.y", "dx", "dy")]
		self.assertEqual([syntax.SysDCSpawn(Binding(name.child("movedBox"), Unsolved("Box", name)), uses)], fn.spawns)

	def test_illegal_functions(self):
		for text in [
			"module M { move() -> { } }",
			"module M { move(box: Box, dx: int32, dy: ) -> int32 { } }",
			"module M { move() { } }",
		]:
			with self.subTest(text):
				with self.assertRaises(SysDCSyntaxError):
					_parse(text)

class AnnotationTests(unittest.TestCase):
	def test_return_is_mandatory(self):
		with self.assertRaises(MissingAnnotation) as cm:
			_parse("module M { f() -> int32 { @spawn r: int32 } }")
		self.assertEqual("return", cm.exception.which)

	def test_return_only_once(self):
		with self.assertRaises(DuplicateAnnotation):
			_parse("module M { f() -> int32 { @return a @return b } }")

	def test_unknown_annotation(self):
		with self.assertRaises(UnknownAnnotation) as cm:
			_parse("module M { f() -> int32 { @return a @modify a } }")
		self.assertEqual("modify", cm.exception.name)
		self.assertIsNotNone(cm.exception.span)

	def test_unknown_attribute(self):
		with self.assertRaises(UnknownAttribute):
			_parse("module M { f(x: int32) -> int32 { @return r +modify x @spawn r: int32 } }")

	def test_attributes_do_not_decorate_return(self):
		with self.assertRaises(UnknownAttribute):
			_parse("module M { f(x: int32) -> int32 { +use x @return x } }")

	def test_trailing_use_joins_last_spawn(self):
		fn = _function("module M { f(x: int32) -> int32 { @return r @spawn r:int32 +use x} }")
		self.assertEqual([syntax.Use(fn.name.child("x"))], fn.spawns[0].details)

	def test_trailing_use_without_spawn(self):
		with self.assertRaises(SysDCSyntaxError):
			_parse("module M { f(x: int32) -> int32 { @return x +use x } }")

	def test_trailing_use_after_return(self):
		with self.assertRaises(SysDCSyntaxError):
			_parse("module M { f(x: int32) -> int32 { @spawn r: int32 @return r +use x } }")

class SpawnBlockTests(unittest.TestCase):
	def test_let_and_return(self):
		fn = _function("""
			module M {
				f(x: int32, y: string) -> int32 {
					@return r
					+use x
					@spawn r: int32 {
						let t = Other.g(x, y)
						return t
					}
				}
			}
		""")
		inner = fn.name.child("@r", anonymous=True)
		self.assertTrue(inner.anonymous)
		spawn = fn.spawns[0]
		self.assertEqual([
			syntax.Use(fn.name.child("x")),
			syntax.LetTo(inner.child("t"), Binding(inner.child("Other.g"), Unsolved()), [
				Binding(inner.child("x"), Unsolved()),
				Binding(inner.child("y"), Unsolved()),
			]),
			syntax.Return(inner.child("t")),
		], spawn.details)

	def test_empty_call(self):
		fn = _function("module M { f() -> none { @return r @spawn r: none { let t = g() } } }")
		self.assertEqual([], fn.spawns[0].details[0].args)

	def test_unknown_statement(self):
		with self.assertRaises(UnknownAnnotation):
			_parse("module M { f() -> none { @return r @spawn r: none { call g() } } }")

	def test_unclosed_block(self):
		with self.assertRaises(SysDCSyntaxError):
			_parse("module M { f() -> none { @return r @spawn r: none { let t = g() ")

class UnitTests(unittest.TestCase):
	def test_full(self):
		unit = _parse("""
			data Box {
				x: int32,
				y: int32
			}

			module BoxModule {
				move(box: Box, dx: int32, dy: int32) -> Box {
					@return movedBox

					+use box.x, box.y, dx, dy
					@spawn movedBox: Box
				}
			}
		""")
		self.assertEqual(1, len(unit.data))
		self.assertEqual(1, len(unit.modules))
		self.assertEqual(4, len(unit.modules[0].functions[0].spawns[0].details))

	def test_imports(self):
		unit, imports = parse_text("cart", "import catalog, money.Currency import tax data Cart {}")
		root = Name.root()
		expect = [root.child("catalog"), root.qualify(["money", "Currency"]), root.child("tax")]
		self.assertEqual(expect, imports)
		self.assertEqual(expect, unit.imports)
		unit.imports.append(root.child("extra"))
		self.assertEqual(3, len(imports))

	def test_imports_come_first(self):
		with self.assertRaises(SysDCSyntaxError):
			_parse("data Cart {} import catalog")

	def test_neither_data_nor_module(self):
		with self.assertRaises(SysDCSyntaxError) as cm:
			_parse("data Box {} function f() -> int32 {}")
		self.assertIn("'data'", str(cm.exception))

	def test_stray_character_knows_where(self):
		with self.assertRaises(StrayCharacter) as cm:
			_parse("data Box { x: int32; }")
		self.assertEqual("test", cm.exception.span.unit)
		self.assertEqual(19, cm.exception.span.slice.start)

	def test_empty_text(self):
		self.assertEqual(syntax.SysDCUnit(UNIT), _parse("  // nothing to see here\n"))

	def test_parsing_is_deterministic(self):
		text = "data A { s: string } module M { f(a: A) -> string { @return r +use a.s @spawn r: string } }"
		self.assertEqual(_parse(text), _parse(text))
		self.assertEqual(STRING, _parse(text).data[0].members[0].typ)

if __name__ == '__main__':
	unittest.main()
