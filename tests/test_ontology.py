import unittest

from sysdc.ontology import Name
from sysdc.space import Layer, AlreadyExists

class NameTests(unittest.TestCase):
	def setUp(self):
		self.root = Name.root()
		self.fn = self.root.qualify(["shop", "CartModule", "checkout"])

	def test_paths(self):
		self.assertEqual("", self.root.full_path())
		self.assertEqual("shop.CartModule.checkout", self.fn.full_path())
		self.assertEqual(("shop", "CartModule", "checkout"), self.fn.segments())
		self.assertEqual((), self.root.segments())

	def test_equality_is_by_path(self):
		again = Name.root().child("shop").child("CartModule").child("checkout")
		self.assertEqual(self.fn, again)
		self.assertEqual(hash(self.fn), hash(again))
		self.assertNotEqual(self.fn, self.fn.parent())
		self.assertNotEqual(self.fn, "shop.CartModule.checkout")

	def test_dotted_reference_is_one_segment(self):
		ref = self.fn.child("cart.item")
		self.assertEqual("cart.item", ref.segment)
		self.assertEqual(self.fn, ref.parent())

	def test_ancestry_ends_at_root(self):
		chain = list(self.fn.ancestry())
		self.assertEqual(4, len(chain))
		self.assertIs(self.fn, chain[0])
		self.assertTrue(chain[-1].is_root())

	def test_unit(self):
		self.assertEqual(self.root.child("shop"), self.fn.unit())
		self.assertEqual(self.root.child("shop"), self.root.child("shop").unit())
		self.assertIsNone(self.root.unit())

	def test_anonymous_parents_can_be_skipped(self):
		inner = self.fn.child("@price", anonymous=True).child("subtotal")
		self.assertEqual("@price", inner.parent().segment)
		self.assertEqual(self.fn, inner.parent(skip_anonymous=True))

class LayerTests(unittest.TestCase):
	def test_refuses_duplicates(self):
		layer = Layer()
		a = Name.root().child("a")
		layer.mount(a, 1)
		self.assertIn(Name.root().child("a"), layer)
		self.assertEqual(1, layer.symbol(a))
		self.assertIsNone(layer.symbol(a.child("b")))
		with self.assertRaises(AlreadyExists):
			layer.mount(Name.root().child("a"), 2)
		self.assertEqual([1], list(layer.each_symbol()))

if __name__ == '__main__':
	unittest.main()
