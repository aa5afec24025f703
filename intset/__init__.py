# copyright (c) 2021 Jason Forbes

from .core import IntSetError, EmptySetError, ValueOutOfRangeError
from .sets import GrowSet, ShrinkSet

__all__ = ["GrowSet", "ShrinkSet", "IntSetError", "EmptySetError",
           "ValueOutOfRangeError"]
