"""
Parameter kinds: what a constructor, method, or static function expects in each position.

Scalars are singletons. The others carry the name of whatever they refer to
(an enum, or a capability) rather than the thing itself, so a signature may
mention an enum that has not been registered yet.
"""

class Kind:
	def __eq__(self, other):
		return type(self) is type(other) and self._key() == other._key()
	def __hash__(self):
		return hash((type(self), self._key()))
	def _key(self): return id(self)

class Scalar(Kind):
	def __init__(self, name:str): self.name = name
	def __str__(self): return self.name
	def __repr__(self): return "<%s>" % self.name

INTEGER = Scalar("int")
FLOAT = Scalar("float")
SYMBOL = Scalar("symbol")

class EnumOf(Kind):
	""" A symbol which must be a member of the named enum. """
	def __init__(self, enum:str):
		assert isinstance(enum, str), type(enum)
		self.enum = enum
	def _key(self): return self.enum
	def __str__(self): return self.enum
	def __repr__(self): return "<enum %s>" % self.enum

class ListOf(Kind):
	def __init__(self, element:Scalar):
		assert element is INTEGER or element is FLOAT, element
		self.element = element
	def _key(self): return self.element
	def __str__(self): return "list[%s]" % self.element
	def __repr__(self): return "<%s>" % self

class InstanceOf(Kind):
	""" Any constructed instance whose type declares the named capability. """
	def __init__(self, capability:str):
		assert isinstance(capability, str), type(capability)
		self.capability = capability
	def _key(self): return self.capability
	def __str__(self): return "<%s>" % self.capability
	def __repr__(self): return "<instance of %s>" % self.capability
