# copyright (c) 2021 Jason Forbes

"""Fixed-capacity integer sets with O(1) contains, size and pop.

Neither set allocates memory after construction.
"""

from .core import SparseSetCore, ValueOutOfRangeError



class GrowSet(SparseSetCore):
    """Starts out empty. Integers in [0, capacity) can be added, and
    clear() empties the set in O(1) time."""
    __slots__ = ()

    def __init__(self, capacity:int):
        super().__init__(capacity, full=False)

    def add(self, value):
        """Adding a value more than once is not an error. Values outside
        [0, capacity) raise ValueOutOfRangeError."""
        if not self._in_universe(value):
            if not isinstance(value, int):
                raise TypeError(f"expected int, got {type(value).__name__}")
            raise ValueOutOfRangeError(
                f"{value} is outside the set's range [0, {self.capacity}).")
        if not self.contains(value):
            self._append(value)

    def clear(self):
        self.n = 0

    def pop(self):
        self._require_nonempty()
        self.n -= 1
        return self.dense[self.n]



class ShrinkSet(SparseSetCore):
    """Starts out holding every integer in [0, capacity). Members can be
    removed, and refill() restores the full set in O(1) time."""
    __slots__ = ()

    def __init__(self, capacity:int):
        super().__init__(capacity, full=True)

    def remove(self, value):
        # not an error if value is absent
        if self.contains(value):
            self._swap_remove(value)

    discard = remove

    def refill(self):
        # every removal only permutes slots, so the whole range stays mapped
        self.n = len(self.dense)

    def pop(self):
        self._require_nonempty()
        value = self.dense[0]
        self._swap_remove(value)
        return value
