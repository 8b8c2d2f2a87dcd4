"""
Parse, and optionally build, constructor expressions.

{0}

For example:

    reflect "Resample(Momentum(SMA,[100,50],[0.3,0.7]),900)"

will print the syntax tree, while

    reflect -m signals -c "Resample(Momentum(SMA,[100,50],[0.3,0.7]),900)"

will import the module `signals` (which registers its types when imported)
and then build the thing, printing a representation of the result.

With no expressions on the command line, they are read from standard input, one per line.

    reflect -h

will explain all the arguments.
"""
import sys, argparse
from importlib import import_module

parser = argparse.ArgumentParser(
	prog="reflect",
	description="Parse and instantiate constructor expressions.",
)
parser.add_argument("expression", nargs="*", help="for example: Momentum(SMA,[100,50],[0.3,0.7])")
parser.add_argument('-m', "--module", action="append", default=[], help="Import this module first, for its registrations. May be repeated.")
parser.add_argument('-c', "--create", action="store_true", help="Build each expression instead of just printing its syntax tree.")
parser.add_argument('-r', "--require", metavar="CAPABILITY", help="Insist that each result implement this capability. Implies --create.")
parser.add_argument('-v', "--verbose", action="count", default=0, help="Say more about what's going on.")

def run(args, *, registry=None, stdin=None) -> int:
	from .diagnostics import Report, ReflectError
	from .front_end import parse
	from .evaluator import create_from_ast
	from .registry import REGISTRY
	from .syntax import sketch
	registry = REGISTRY if registry is None else registry
	report = Report(verbose=args.verbose)
	for name in args.module:
		report.info("Importing", name)
		try: import_module(name)
		except ImportError as ex:
			report.trace("Could not import %s: %s" % (name, ex))
			return 1
	registry.seal()
	report.debug("Known types:", ", ".join(registry.type_names()) or "(none)")
	report.debug("Known enums:", ", ".join(registry.enum_names()) or "(none)")
	if args.expression: expressions = args.expression
	else: expressions = [line.strip() for line in (stdin or sys.stdin) if line.strip()]
	for text in expressions:
		report.info("Expression:", text)
		try:
			tree = parse(text)
			if args.create or args.require:
				print(repr(create_from_ast(tree, args.require, registry=registry)))
			else:
				print(sketch(tree))
		except ReflectError as ex:
			report.complain(ex.blame(None, text))
	return 1 if report.sick() else 0

def main():
	if len(sys.argv) > 1 or not sys.stdin.isatty():
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
