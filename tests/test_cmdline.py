import io
import unittest
from unittest import mock

from reflect import cmdline
import specimens

class CommandLineTests(unittest.TestCase):
	def setUp(self) -> None:
		self.registry = specimens.build_registry(seal=False)

	def _run(self, *argv, stdin=None):
		args = cmdline.parser.parse_args(argv)
		with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
			with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
				status = cmdline.run(args, registry=self.registry, stdin=stdin)
		return status, out.getvalue(), err.getvalue()

	def test_parse_only(self):
		status, out, err = self._run("Momentum(SMA,[1],[0.5])")
		self.assertEqual(0, status)
		self.assertTrue(out.startswith("Ctor Momentum\n  Symbol('SMA')"))
		self.assertEqual("", err)

	def test_parse_only_needs_no_registrations(self):
		status, out, err = self._run("Bogus(1)")
		self.assertEqual(0, status)

	def test_create(self):
		status, out, err = self._run("-c", "Resample(Momentum(SMA,[100,50],[0.3,0.7]),900)")
		self.assertEqual(0, status)
		self.assertIn("<Instance of Resample", out)

	def test_require_implies_create(self):
		status, out, err = self._run("-r", "Sink", "Journal(trades)")
		self.assertEqual(0, status)
		self.assertIn("<Instance of Journal", out)

	def test_failure_goes_to_stderr(self):
		status, out, err = self._run("-c", "Bogus()", "Constant(1)")
		self.assertEqual(1, status)
		self.assertIn("There is no registered type called 'Bogus'.", err)
		self.assertIn("<Instance of Constant", out)

	def test_syntax_error(self):
		status, out, err = self._run("Foo(1,2")
		self.assertEqual(1, status)
		self.assertIn("Syntax error at the end of input", err)

	def test_capability_refused(self):
		status, out, err = self._run("-r", "Signal", "Journal(trades)")
		self.assertEqual(1, status)
		self.assertIn("does not implement capability 'Signal'", err)

	def test_reads_standard_input(self):
		stdin = io.StringIO("42\n\n  SMA  \n")
		status, out, err = self._run(stdin=stdin)
		self.assertEqual(0, status)
		self.assertEqual(["Integer(42)", "Symbol('SMA')"], out.splitlines())

	def test_verbose(self):
		status, out, err = self._run("-vv", "42")
		self.assertIn("Expression: 42", err)
		self.assertIn("Known types: Momentum, Resample", err)

	def test_missing_module(self):
		status, out, err = self._run("-m", "no.such.module.anywhere", "42")
		self.assertEqual(1, status)
		self.assertIn("Could not import no.such.module.anywhere", err)
		self.assertEqual("", out)

	def test_seals_the_registry(self):
		self._run("42")
		self.assertTrue(self.registry.is_sealed())

if __name__ == '__main__':
	unittest.main()
