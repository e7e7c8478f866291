"""
Iterator pattern demo.

A half-open integer range that hands out a fresh iterator each time it is
iterated.
"""


class Range:
    """Iterable over the integers in [start, end)."""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end

    def __iter__(self) -> "RangeIterator":
        """Fresh iterator, so the range can be walked any number of times."""
        return RangeIterator(self.start, self.end)


class RangeIterator:
    """Concrete iterator; raises StopIteration once current reaches end."""

    def __init__(self, start: int, end: int):
        self._current = start
        self._end = end

    def __iter__(self) -> "RangeIterator":
        return self

    def has_next(self) -> bool:
        """True while values remain."""
        return self._current < self._end

    def __next__(self) -> int:
        """
        Next value of the range.

        Raises:
            StopIteration: Once current reaches end
        """
        if not self.has_next():

            raise StopIteration
        value = self._current
        self._current += 1
        return value


def main():
    for i in Range(5, 11):
        print(i)


if __name__ == '__main__':
    main()
