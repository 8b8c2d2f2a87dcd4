import unittest

from reflect.diagnostics import ReflectError, UnknownType, NoMatchingSignature, UnacceptableArgument, AmbiguousSignature, InvocationError
from reflect.dispatch import call_method, call_static
from reflect.evaluator import create
from reflect.values import Float, ListValue
import specimens

class DispatchTests(unittest.TestCase):
	def setUp(self) -> None:
		self.registry = specimens.build_registry()
		self.momentum = create("Momentum(EMA,[10,20],[0.25,0.75])", registry=self.registry)

	def _method(self, instance, name, *args):
		return call_method(instance, name, args, registry=self.registry)

	def _static(self, type_name, name, *args):
		return call_static(type_name, name, args, registry=self.registry)

	def test_method(self):
		self.assertEqual(20, self._method(self.momentum, "longest"))
		self.assertEqual(10.0, self._method(self.momentum, "update", 10.0))

	def test_method_widens(self):
		result = self._method(self.momentum, "update", 4)
		self.assertEqual(4.0, result)

	def test_overload_by_argument_kind(self):
		self.assertEqual([1.0, 2.0], self._method(self.momentum, "update", [1, 2]))

	def test_tagged_arguments_are_welcome(self):
		self.assertEqual([3.0], self._method(self.momentum, "update", ListValue([Float(3.0)])))

	def test_no_such_method(self):
		with self.assertRaises(NoMatchingSignature) as cm:
			self._method(self.momentum, "reset")
		self.assertEqual("Momentum.reset", cm.exception.member)
		self.assertEqual((), cm.exception.candidates)

	def test_wrong_arguments(self):
		with self.assertRaises(NoMatchingSignature) as cm:
			self._method(self.momentum, "update", "x")
		self.assertEqual(2, len(cm.exception.candidates))

	def test_method_raises(self):
		journal = create("Journal(trades)", registry=self.registry)
		with self.assertRaises(InvocationError) as cm:
			self._method(journal, "boom", 3)
		self.assertEqual("Journal.boom", cm.exception.member)
		self.assertIsInstance(cm.exception.__cause__, RuntimeError)

	def test_static_raises(self):
		with self.assertRaises(InvocationError) as cm:
			self._static("Journal", "rotate", 3)
		self.assertEqual("Journal.rotate", cm.exception.member)
		self.assertIsInstance(cm.exception.__cause__, OSError)
		self.assertEqual("Journal.rotate raised OSError: cannot rotate journals, keeping 3", str(cm.exception))

	def test_late_binding(self):
		self.momentum.obj.longest = lambda: -1
		self.assertEqual(-1, self._method(self.momentum, "longest"))

	def test_hand_built_method(self):
		constant = create("Constant(1.5)", registry=self.registry)
		self.assertEqual(1.5, self._method(constant, "level"))

	def test_static(self):
		self.assertEqual("ema", self._static("Momentum", "describe", "EMA"))
		self.assertEqual(1000, self._static("Momentum", "limit"))

	def test_static_by_hand(self):
		self.assertEqual(-5, self._static("Constant", "trade", "SELL", 5))
		self.assertEqual("#abc", self._static("Constant", "tag", "abc"))
		self.assertEqual(0.0, self._static("Constant", "zero").level)

	def test_static_takes_instances_by_capability(self):
		self.assertIs(self.momentum.obj, self._static("Constant", "wrap", self.momentum))
		journal = create("Journal(trades)", registry=self.registry)
		with self.assertRaises(NoMatchingSignature):
			self._static("Constant", "wrap", journal)

	def test_static_unknown_type(self):
		with self.assertRaises(UnknownType):
			self._static("Bogus", "zero")

	def test_static_no_such_function(self):
		with self.assertRaises(NoMatchingSignature):
			self._static("Momentum", "longest")

	def test_methods_and_statics_are_separate(self):
		with self.assertRaises(NoMatchingSignature):
			self._method(self.momentum, "describe", "EMA")

	def test_flags_are_refused(self):
		with self.assertRaises(UnacceptableArgument) as cm:
			self._method(self.momentum, "update", True)
		self.assertEqual(1, cm.exception.position)
		self.assertEqual(2, len(cm.exception.candidates))
		self.assertIsInstance(cm.exception.__cause__, TypeError)

	def test_oversized_int_is_refused(self):
		with self.assertRaises(NoMatchingSignature) as cm:
			self._static("Constant", "trade", "BUY", 2**64)
		self.assertIsInstance(cm.exception, UnacceptableArgument)
		self.assertEqual(2, cm.exception.position)
		self.assertIn("Constant.trade", str(cm.exception))
		self.assertIsInstance(cm.exception.__cause__, ValueError)

	def test_unwrappable_argument_is_a_reflect_error(self):
		for bogon in [None, {"a": 1}, [1, False]]:
			with self.subTest(repr(bogon)):
				with self.assertRaises(ReflectError):
					self._method(self.momentum, "update", bogon)

class AmbiguousDispatchTests(unittest.TestCase):
	def test_ambiguous_static(self):
		from reflect.descriptors import Signature, TypeDescriptor
		from reflect.kinds import INTEGER, FLOAT
		from reflect.registry import Registry
		registry = Registry()
		registry.register_type(TypeDescriptor("Clock", statics=[
			Signature("tick", [INTEGER], lambda n: "int"),
			Signature("tick", [FLOAT], lambda x: "float"),
		]))
		with self.assertRaises(AmbiguousSignature):
			call_static("Clock", "tick", [1], registry=registry)
		self.assertEqual("float", call_static("Clock", "tick", [1.0], registry=registry))

if __name__ == '__main__':
	unittest.main()
