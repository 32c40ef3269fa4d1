from typing import Hashable, Iterable, Iterator, Set

from infset.backing.backing_set import BackingSet


class HashBackingSet(BackingSet):
    """Hash based backing set, a thin wrapper around the builtin `set`.

    Elements must be hashable.

    Example::

        >>> s = HashBackingSet([1, 2])
        >>> s.insert(2)
        False
        >>> s.insert(3)
        True
        >>> sorted(s.union(HashBackingSet([7])))
        [1, 2, 3, 7]
    """

    __slots__ = ("_set", )

    def __init__(self, elements: Iterable = ()):
        self._set: Set = set(elements)

    def insert(self, element: Hashable) -> bool:
        if element in self._set:
            return False
        self._set.add(element)
        return True

    def remove(self, element: Hashable) -> bool:
        if element not in self._set:
            return False
        self._set.remove(element)
        return True

    def contains(self, element: Hashable) -> bool:
        try:
            return element in self._set
        except TypeError:
            # unhashable values can never have been stored
            return False

    def __len__(self) -> int:
        return len(self._set)

    def __iter__(self) -> Iterator:
        return iter(self._set)

    def _other_set(self, other: BackingSet) -> Set:
        if isinstance(other, HashBackingSet):
            return other._set
        return set(other)

    def union(self, other: BackingSet) -> "HashBackingSet":
        return HashBackingSet(self._set | self._other_set(other))

    def intersection(self, other: BackingSet) -> "HashBackingSet":
        return HashBackingSet(self._set & self._other_set(other))

    def difference(self, other: BackingSet) -> "HashBackingSet":
        return HashBackingSet(self._set - self._other_set(other))

    def symmetric_difference(self, other: BackingSet) -> "HashBackingSet":
        return HashBackingSet(self._set ^ self._other_set(other))

    def copy(self) -> "HashBackingSet":
        return HashBackingSet(self._set)

    def __eq__(self, other) -> bool:
        if isinstance(other, HashBackingSet):
            return self._set == other._set
        return super(HashBackingSet, self).__eq__(other)
