# copyright (c) 2021 Jason Forbes

import collections.abc, logging
from array import array

log = logging.getLogger(__name__)



class IntSetError(Exception): pass
class EmptySetError(IntSetError, KeyError): pass
class ValueOutOfRangeError(IntSetError, ValueError): pass



# unsigned typecodes, narrowest first
typecodes = ('B', 'H', 'I', 'L', 'Q')

def pick_typecode(capacity:int):
    """Smallest unsigned typecode able to store every index below capacity."""
    for tc in typecodes:
        if capacity <= 1 << (array(tc).itemsize * 8):
            return tc
    raise OverflowError(f"capacity {capacity} does not fit any array typecode.")



class SparseSetCore(collections.abc.Set):
    """Paired dense/sparse index arrays over the universe [0, capacity).

    dense[:n] holds the active values, sparse[v] is the position of v in
    dense. Slots outside the active region are stale and only ever reached
    through the membership check, which validates them against each other.
    Both arrays are allocated once and never change length.
    """
    __slots__ = ('n', 'sparse', 'dense')
    __hash__ = None

    def __init__(self, capacity:int, full=False):
        if type(capacity) is not int or capacity < 0:
            raise ValueError("capacity must be a non-negative int.")
        tc = pick_typecode(capacity)
        if full:
            self.dense = array(tc, range(capacity))
            self.sparse = array(tc, self.dense)
            self.n = capacity
        else:
            self.dense = array(tc, bytes(array(tc).itemsize * capacity))
            self.sparse = array(tc, self.dense)
            self.n = 0
        log.debug("%s allocated: capacity=%d typecode=%r",
                  self.__class__.__name__, capacity, tc)

    @property
    def capacity(self):
        return len(self.dense)

    def _in_universe(self, value):
        return isinstance(value, int) and 0 <= value < len(self.sparse)

    def contains(self, value):
        if not self._in_universe(value):
            return False
        i = self.sparse[value]
        return i < self.n and self.dense[i] == value

    __contains__ = contains

    def size(self):
        return self.n

    __len__ = size

    def values(self):
        """Read-only view of the active values. Not a copy: it is invalid
        after the next mutation of the set."""
        return memoryview(self.dense)[:self.n].toreadonly()

    def __iter__(self):
        return iter(self.values())

    def _append(self, value):
        # caller guarantees value is in the universe and not active
        self.dense[self.n] = value
        self.sparse[value] = self.n
        self.n += 1

    def _swap_remove(self, value):
        # caller guarantees value is active
        i = self.sparse[value]
        last_i = self.n - 1
        last = self.dense[last_i]
        self.dense[i] = last
        self.dense[last_i] = value
        self.sparse[last] = i
        self.sparse[value] = last_i
        self.n = last_i

    def _require_nonempty(self):
        if not self.n:
            raise EmptySetError("pop from an empty set")

    @classmethod
    def _from_iterable(cls, it):
        # results of set algebra may not fit any single universe
        return frozenset(it)

    def __repr__(self):
        c = f"{self.__class__.__module__}.{self.__class__.__qualname__}"
        return f"<{c} capacity={self.capacity} {list(self.values())}>"
