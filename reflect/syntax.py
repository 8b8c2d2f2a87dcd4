"""
The set of parse-nodes in simple form.
The parser calls these constructors with subordinate nodes in a bottom-up fashion.
A tree belongs to whoever asked for the parse; nothing else keeps a reference.
"""
from typing import Sequence
from boozetools.support.foundation import Visitor
from .ontology import Phrase, Nom
from .values import Value, Integer, Float, Symbol

class Expression(Phrase):
	pass

class Literal(Expression):
	""" An integer, float, or symbol exactly as written. """
	value: Value
	def __init__(self, value: Value, left: int, right: int):
		assert isinstance(value, (Integer, Float, Symbol)), type(value)
		self.value, self._left, self._right = value, left, right
	def __repr__(self): return "<Literal %r>" % self.value
	def left(self): return self._left
	def right(self): return self._right

class ListExpr(Expression):
	elements: Sequence[Literal]
	def __init__(self, elements: Sequence[Literal], left: int, right: int):
		self.elements, self._left, self._right = tuple(elements), left, right
	def __repr__(self): return "<List %r>" % (list(self.elements),)
	def left(self): return self._left
	def right(self): return self._right

class CtorExpr(Expression):
	name: Nom
	args: Sequence[Expression]
	def __init__(self, name: Nom, args: Sequence[Expression], right: int):
		self.name, self.args, self._right = name, tuple(args), right
	def __repr__(self): return "<Ctor %s%r>" % (self.name.text, list(self.args))
	def left(self): return self.name.left()
	def right(self): return self._right

###############################################################################

class Outline(Visitor):
	"""
	Reduce a tree to nested plain data, forgetting positions.
	Two parses of the same text always outline the same way,
	so this is also the notion of structural equality.
	"""
	def visit_Literal(self, it: Literal): return it.value
	def visit_ListExpr(self, it: ListExpr): return [self.visit(e) for e in it.elements]
	def visit_CtorExpr(self, it: CtorExpr): return it.name.text, [self.visit(a) for a in it.args]

def outline(tree: Expression): return Outline().visit(tree)

class Depth(Visitor):
	""" Parenthesis nesting depth. Lists and literals add nothing. """
	def visit_Literal(self, it: Literal): return 0
	def visit_ListExpr(self, it: ListExpr): return 0
	def visit_CtorExpr(self, it: CtorExpr): return 1 + max((self.visit(a) for a in it.args), default=0)

def depth(tree: Expression) -> int: return Depth().visit(tree)

class Sketch(Visitor):
	""" Produce an indented picture of the tree, one node per line. """
	def __init__(self):
		self.lines = []
	def visit_Literal(self, it: Literal, indent: str):
		self.lines.append(indent + repr(it.value))
	def visit_ListExpr(self, it: ListExpr, indent: str):
		self.lines.append(indent + "List")
		for e in it.elements: self.visit(e, indent + "  ")
	def visit_CtorExpr(self, it: CtorExpr, indent: str):
		self.lines.append(indent + "Ctor " + it.name.text)
		for a in it.args: self.visit(a, indent + "  ")

def sketch(tree: Expression) -> str:
	s = Sketch()
	s.visit(tree, "")
	return "\n".join(s.lines)
