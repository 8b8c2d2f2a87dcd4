"""
These most-fundamental classes sit apart from the rest to avoid circular imports.
Everything that can be blamed for a problem is a Phrase: it knows where
it came from in the expression text, so diagnostics can point at it.

Positions here are plain character offsets into the text handed to the parser.
Left is inclusive; right is exclusive, the way Python slices work.
"""

class Phrase:
	def left(self) -> int:
		""" Return the offset of the first character of this phrase """
		raise NotImplementedError(type(self))
	def right(self) -> int:
		""" Return the offset just past the last character of this phrase """
		raise NotImplementedError(type(self))
	def span(self) -> tuple[int, int]: return self.left(), self.right()

class Nom(Phrase):
	""" Representing the occurrence of a name anywhere. """
	def __init__(self, text:str, spot:int):
		assert isinstance(text, str)
		assert isinstance(spot, int), type(spot)
		self.text, self.spot = text, spot
	def __repr__(self): return "<Name %r>" % self.text
	def key(self): return self.text
	def left(self): return self.spot
	def right(self): return self.spot + len(self.text)

class Spot(Phrase):
	""" A bare position, such as the place where the parser gave up. """
	def __init__(self, offset:int, width:int=0):
		self.offset, self.width = offset, width
	def __repr__(self): return "<Spot %d>" % self.offset
	def left(self): return self.offset
	def right(self): return self.offset + self.width
