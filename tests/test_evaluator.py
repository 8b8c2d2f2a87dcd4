import unittest

from reflect.diagnostics import (
	ReflectError, UnknownType, NoMatchingSignature, AmbiguousSignature, UnknownEnumSymbol,
	CapabilityNotImplemented, InvocationError,
)
from reflect.evaluator import create, create_from_ast
from reflect.front_end import parse, ParseError
from reflect.values import Integer, Symbol, Instance
import specimens

RESAMPLE = "Resample(Momentum(SMA,[100,50],[0.3,0.7]),900)"

class CreateTests(unittest.TestCase):
	def setUp(self) -> None:
		self.registry = specimens.build_registry()

	def _create(self, text, capability=None):
		return create(text, capability, registry=self.registry)

	def _fail(self, text, capability=None) -> ReflectError:
		with self.assertRaises(ReflectError) as cm:
			self._create(text, capability)
		return cm.exception

	def test_momentum(self):
		handle = self._create("Momentum(SMA,[100,50,20],[0.2,0.3,0.5])")
		self.assertIsInstance(handle, Instance)
		self.assertEqual("Momentum", handle.descriptor.name)
		momentum = handle.obj
		self.assertIsInstance(momentum, specimens.Momentum)
		self.assertIs(specimens.MovingAverage.SMA, momentum.kind)
		self.assertEqual([100, 50, 20], momentum.windows)
		self.assertEqual([0.2, 0.3, 0.5], momentum.weights)

	def test_nested(self):
		handle = self._create(RESAMPLE, specimens.SIGNAL)
		resample = handle.obj
		self.assertIsInstance(resample, specimens.Resample)
		self.assertEqual(900, resample.period)
		self.assertIsInstance(resample.source, specimens.Momentum)
		self.assertIs(specimens.MovingAverage.SMA, resample.source.kind)

	def test_integers_widen_inside_lists(self):
		momentum = self._create("Momentum(EMA,[10],[1])").obj
		self.assertEqual([1.0], momentum.weights)
		self.assertIsInstance(momentum.weights[0], float)

	def test_every_creation_is_fresh(self):
		a, b = self._create(RESAMPLE), self._create(RESAMPLE)
		self.assertIsNot(a.obj, b.obj)
		self.assertIsNot(a.obj.source, b.obj.source)

	def test_from_ast_twice(self):
		tree = parse(RESAMPLE)
		a = create_from_ast(tree, registry=self.registry)
		b = create_from_ast(tree, registry=self.registry)
		self.assertIsNot(a.obj, b.obj)

	def test_hand_built_type(self):
		constant = self._create("Constant(2)", "Signal")
		self.assertEqual(2.0, constant.obj.level)

	def test_bare_literal(self):
		self.assertEqual(Integer(42), self._create("42"))
		self.assertEqual(Symbol("SMA"), self._create("SMA"))

	def test_unknown_type(self):
		ex = self._fail("Bogus()")
		self.assertIsInstance(ex, UnknownType)
		self.assertEqual("Bogus", ex.name)
		self.assertEqual((0, 5), ex.site.span())
		self.assertEqual("Bogus()", ex.text)

	def test_unknown_type_deep_inside(self):
		ex = self._fail("Resample(Bogus(1),900)")
		self.assertIsInstance(ex, UnknownType)
		self.assertEqual((9, 14), ex.site.span())

	def test_parse_error_passes_through(self):
		self.assertIsInstance(self._fail("Momentum(SMA,[1],[2.0]"), ParseError)

	def test_unknown_enum_symbol(self):
		ex = self._fail("Momentum(WMA,[10],[1.0])")
		self.assertIsInstance(ex, UnknownEnumSymbol)
		self.assertEqual(("MovingAverage", "WMA"), (ex.enum, ex.symbol))

	def test_no_matching_signature(self):
		ex = self._fail("Momentum(SMA,[10],[1.0],7)")
		self.assertIsInstance(ex, NoMatchingSignature)
		self.assertEqual("Momentum", ex.member)
		self.assertEqual("(symbol, list[int], list[float], int)", ex.argument_kinds())

	def test_capability_is_checked_on_arguments(self):
		ex = self._fail("Resample(Journal(trades),60)")
		self.assertIsInstance(ex, NoMatchingSignature)
		self.assertEqual((0, 28), ex.site.span())

	def test_ambiguous(self):
		ex = self._fail("Window(5)")
		self.assertIsInstance(ex, AmbiguousSignature)
		self.assertEqual(2, len(ex.candidates))
		self.assertEqual(5, self._create("Window(5.0)").obj.size)

	def test_required_capability(self):
		ex = self._fail("Journal(trades)", specimens.SIGNAL)
		self.assertIsInstance(ex, CapabilityNotImplemented)
		self.assertEqual(("Journal", "Signal"), (ex.type_name, ex.capability))
		self.assertIsInstance(self._create("Journal(trades)", "Sink").obj, specimens.Journal)

	def test_literal_lacks_every_capability(self):
		self.assertIsInstance(self._fail("42", "Signal"), CapabilityNotImplemented)

	def test_invocation_error(self):
		ex = self._fail("Resample(Momentum(SMA,[10,20],[1.0]),60)")
		self.assertIsInstance(ex, InvocationError)
		self.assertEqual("Momentum", ex.member)
		self.assertIsInstance(ex.__cause__, ValueError)
		self.assertIs(ex.cause, ex.__cause__)
		self.assertEqual(9, ex.site.left())

	def test_as_text(self):
		ex = self._fail("Resample(Bogus(1),900)")
		text = ex.as_text()
		self.assertTrue(text.startswith("There is no registered type called 'Bogus'."))
		self.assertIn("Resample(Bogus(1),900)", text)

	def test_empty_registry(self):
		from reflect.registry import Registry
		with self.assertRaises(UnknownType):
			create("Momentum(SMA,[1],[1.0])", registry=Registry())

if __name__ == '__main__':
	unittest.main()
