from bisect import bisect_left
from typing import Any, Iterable, Iterator, List

from infset.backing.backing_set import BackingSet


class SortedBackingSet(BackingSet):
    """Ordered backing set, keeping its elements in a sorted list.

    Membership is answered with a binary search, and the binary set
    operations merge the two sorted lists in linear time. Elements must
    be mutually comparable; iteration yields them in ascending order.

    Example::

        >>> s = SortedBackingSet([5, 1, 3])
        >>> list(s)
        [1, 3, 5]
        >>> list(s.difference(SortedBackingSet([3])))
        [1, 5]
    """

    __slots__ = ("_items", )

    def __init__(self, elements: Iterable = ()):
        self._items: List = []
        for element in sorted(elements):
            if not self._items or self._items[-1] != element:
                self._items.append(element)

    @classmethod
    def _from_sorted(cls, items: List) -> "SortedBackingSet":
        result = cls.__new__(cls)
        result._items = items
        return result

    def _index(self, element: Any) -> int:
        """Returns the position of `element` in the sorted list, or -1 if
        it is not stored"""
        try:
            i = bisect_left(self._items, element)
        except TypeError:
            return -1
        if i < len(self._items) and self._items[i] == element:
            return i
        return -1

    def insert(self, element: Any) -> bool:
        i = bisect_left(self._items, element)
        if i < len(self._items) and self._items[i] == element:
            return False
        self._items.insert(i, element)
        return True

    def remove(self, element: Any) -> bool:
        i = self._index(element)
        if i < 0:
            return False
        del self._items[i]
        return True

    def contains(self, element: Any) -> bool:
        return self._index(element) >= 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def _other_items(self, other: BackingSet) -> List:
        if isinstance(other, SortedBackingSet):
            return other._items
        return sorted(other)

    def _merge(self, other: BackingSet,
               keep_left: bool, keep_right: bool, keep_both: bool) -> List:
        """Walks both sorted lists at once, keeping the elements found only
        on the left, only on the right and on both sides as requested"""
        left, right = self._items, self._other_items(other)
        result: List = []
        i, j = 0, 0
        while i < len(left) and j < len(right):
            if left[i] < right[j]:
                if keep_left:
                    result.append(left[i])
                i += 1
            elif right[j] < left[i]:
                if keep_right:
                    result.append(right[j])
                j += 1
            else:
                if keep_both:
                    result.append(left[i])
                i += 1
                j += 1
        if keep_left:
            result.extend(left[i:])
        if keep_right:
            result.extend(right[j:])
        return result

    def union(self, other: BackingSet) -> "SortedBackingSet":
        return self._from_sorted(self._merge(other, True, True, True))

    def intersection(self, other: BackingSet) -> "SortedBackingSet":
        return self._from_sorted(self._merge(other, False, False, True))

    def difference(self, other: BackingSet) -> "SortedBackingSet":
        return self._from_sorted(self._merge(other, True, False, False))

    def symmetric_difference(self, other: BackingSet) -> "SortedBackingSet":
        return self._from_sorted(self._merge(other, True, True, False))

    def copy(self) -> "SortedBackingSet":
        return self._from_sorted(list(self._items))

    def __eq__(self, other) -> bool:
        if isinstance(other, SortedBackingSet):
            return self._items == other._items
        return super(SortedBackingSet, self).__eq__(other)
