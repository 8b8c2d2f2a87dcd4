"""
Argument resolution: given evaluated arguments and some candidate signatures,
find the one signature that accepts them, and the coerced Python arguments to call it with.

The rules, position by position:

	int argument        fits an int parameter, or a float parameter (widened)
	float argument      fits only a float parameter
	symbol argument     fits a plain symbol parameter, or an enum parameter if it names a member
	list argument       fits list[int] if every element is int,
	                    or list[float] if every element is int or float (widened one by one)
	instance argument   fits an instance parameter if its type declares that capability

Exactly one candidate must fit. If none does, that is NoMatchingSignature.
If several do, that is AmbiguousSignature: there is no tie-breaking, ever.
Candidates are considered in registration order, so the outcome is a pure function of the inputs.
"""
from typing import Any, NamedTuple, Sequence
from boozetools.support.foundation import Visitor
from .diagnostics import NoMatchingSignature, AmbiguousSignature, UnknownEnumSymbol
from .descriptors import Signature
from .kinds import Kind, INTEGER, FLOAT, SYMBOL, EnumOf, ListOf, InstanceOf
from .values import Value, Integer, Float, Symbol, ListValue, Instance

class Resolution(NamedTuple):
	signature: Signature
	arguments: list[Any]

class _Incompatible(Exception):
	""" One argument does not fit one parameter. """

class _NotAMember(_Incompatible):
	""" A symbol did not fit an enum parameter, though the enum itself is known. """
	def __init__(self, enum: str, symbol: str):
		super().__init__(enum, symbol)
		self.enum, self.symbol = enum, symbol

class Coercion(Visitor):
	"""
	Dispatch on the tag of the argument; compare with the kind of the parameter.
	Produces the Python value the callee will receive, or raises _Incompatible.
	"""
	def __init__(self, registry):
		self._registry = registry

	def visit_Integer(self, arg: Integer, kind: Kind):
		if kind is INTEGER: return arg.value
		if kind is FLOAT: return float(arg.value)
		raise _Incompatible

	def visit_Float(self, arg: Float, kind: Kind):
		if kind is FLOAT: return arg.value
		raise _Incompatible

	def visit_Symbol(self, arg: Symbol, kind: Kind):
		if kind is SYMBOL: return arg.text
		if isinstance(kind, EnumOf):
			enum = self._registry.find_enum(kind.enum)
			if enum is None: raise _Incompatible
			if arg.text not in enum: raise _NotAMember(enum.name, arg.text)
			return enum.member(arg.text)
		raise _Incompatible

	def visit_ListValue(self, arg: ListValue, kind: Kind):
		if isinstance(kind, ListOf):
			return [self.visit(e, kind.element) for e in arg.elements]
		raise _Incompatible

	def visit_Instance(self, arg: Instance, kind: Kind):
		if isinstance(kind, InstanceOf) and arg.descriptor.implements(kind.capability):
			return arg.obj
		raise _Incompatible

def resolve(member: str, candidates: Sequence[Signature], args: Sequence[Value], registry) -> Resolution:
	"""
	The `member` is only for diagnostics: something like "Momentum" or "Momentum.update".
	The `registry` supplies enum tables.
	"""
	for a in args: assert isinstance(a, Value), a
	coercion = Coercion(registry)
	viable, near_misses = [], []
	for candidate in candidates:
		if candidate.arity() != len(args): continue
		coerced, misfits = [], []
		for arg, kind in zip(args, candidate.params):
			try: coerced.append(coercion.visit(arg, kind))
			except _Incompatible as ex: misfits.append(ex)
		if not misfits: viable.append(Resolution(candidate, coerced))
		elif all(isinstance(m, _NotAMember) for m in misfits): near_misses.append(misfits[0])
	if len(viable) == 1:
		return viable[0]
	if viable:
		raise AmbiguousSignature(member, args, [r.signature for r in viable])
	if near_misses:
		miss = near_misses[0]
		raise UnknownEnumSymbol(miss.enum, miss.symbol, member, args, candidates)
	raise NoMatchingSignature(member, args, candidates)
