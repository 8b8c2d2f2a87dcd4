"""
The instantiation engine: walk a syntax tree from the leaves up, and build what it describes.

Literals play themselves. Lists become ListValues. Each constructor node looks up
its type, evaluates its arguments (so nested constructors come first), resolves
among the type's constructors, and calls the winner.

Evaluation is all-or-nothing. The first failure anywhere aborts the lot,
and whatever got built along the way is simply dropped.
"""
from typing import Optional
from boozetools.support.foundation import Visitor
from .diagnostics import ReflectError, UnknownType, ResolutionError, CapabilityNotImplemented, InvocationError
from .descriptors import CAPABILITY, capability_name
from .front_end import parse
from .registry import REGISTRY, Registry
from .resolution import resolve
from .values import Value, ListValue, Instance
from . import syntax

class Instantiation(Visitor):
	def __init__(self, registry: Registry):
		self._registry = registry

	def visit_Literal(self, it: syntax.Literal) -> Value:
		return it.value

	def visit_ListExpr(self, it: syntax.ListExpr) -> ListValue:
		return ListValue([self.visit(e) for e in it.elements])

	def visit_CtorExpr(self, it: syntax.CtorExpr) -> Instance:
		descriptor = self._registry.find_type(it.name.text)
		if descriptor is None: raise UnknownType(it.name.text).blame(it.name)
		args = [self.visit(a) for a in it.args]
		try: choice = resolve(descriptor.name, descriptor.constructors, args, self._registry)
		except ResolutionError as ex: raise ex.blame(it)
		try: obj = choice.signature.function(*choice.arguments)
		except Exception as ex: raise InvocationError(descriptor.name, ex).blame(it) from ex
		return Instance(descriptor, obj)

def create_from_ast(tree: syntax.Expression, required_capability: Optional[CAPABILITY] = None, *, registry: Registry = None) -> Value:
	"""
	Build whatever the tree describes. Usually that's an Instance.
	A bare literal at the root evaluates to itself, but it implements no capabilities.
	"""
	registry = REGISTRY if registry is None else registry
	result = Instantiation(registry).visit(tree)
	if required_capability is not None:
		wanted = capability_name(required_capability)
		if not isinstance(result, Instance):
			raise CapabilityNotImplemented(result.kind_name(), wanted).blame(tree)
		if not result.descriptor.implements(wanted):
			raise CapabilityNotImplemented(result.descriptor.name, wanted).blame(tree)
	return result

def create(text: str, required_capability: Optional[CAPABILITY] = None, *, registry: Registry = None) -> Value:
	""" Parse and instantiate in one step. Errors come back knowing the text they concern. """
	try:
		tree = parse(text)
		return create_from_ast(tree, required_capability, registry=registry)
	except ReflectError as ex:
		raise ex.blame(None, text)
