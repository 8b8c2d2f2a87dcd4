"""
Calling members of things known only by name.

Arguments arrive as an already-typed vector, not as text. Plain Python
ints, floats, strings, and lists are accepted too; they get wrapped first.
Results come back exactly as the member returned them.
"""
from typing import Any, Sequence
from .diagnostics import UnknownType, NoMatchingSignature, UnacceptableArgument, InvocationError
from .descriptors import Signature, TypeDescriptor
from .registry import REGISTRY, Registry
from .resolution import resolve
from .values import Value, Instance, wrap

def call_method(instance: Instance, name: str, args: Sequence = (), *, registry: Registry = None) -> Any:
	assert isinstance(instance, Instance), type(instance)
	descriptor = instance.descriptor
	return _call(descriptor, descriptor.methods_named(name), name, args, registry, instance.obj)

def call_static(type_name: str, name: str, args: Sequence = (), *, registry: Registry = None) -> Any:
	registry = REGISTRY if registry is None else registry
	descriptor = registry.find_type(type_name)
	if descriptor is None: raise UnknownType(type_name)
	return _call(descriptor, descriptor.statics_named(name), name, args, registry)

def _call(descriptor: TypeDescriptor, candidates: Sequence[Signature], name: str, args: Sequence, registry, *receiver) -> Any:
	registry = REGISTRY if registry is None else registry
	member = "%s.%s" % (descriptor.name, name)
	values = _wrap_arguments(member, candidates, args)
	if not candidates: raise NoMatchingSignature(member, values, ())
	choice = resolve(member, candidates, values, registry)
	try: return choice.signature.function(*receiver, *choice.arguments)
	except Exception as ex: raise InvocationError(member, ex) from ex

def _wrap_arguments(member: str, candidates: Sequence[Signature], args: Sequence) -> list[Value]:
	values = []
	for position, item in enumerate(args, 1):
		try: values.append(wrap(item))
		except (TypeError, ValueError) as ex: raise UnacceptableArgument(member, position, str(ex), candidates) from ex
	return values
