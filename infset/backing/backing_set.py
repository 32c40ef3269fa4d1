from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterable, Iterator


class BackingSet(ABC):
    """Abstract finite set used to store the explicit elements of an
    `InfiniteSet`.

    Concrete containers must provide insertion and removal reporting
    whether anything changed, membership tests, a count, and the four
    binary set operations returning a *new* container of the same class.
    Iteration is only needed by persistence and printing, never by the
    set algebra itself.
    """

    __slots__ = ()

    @abstractmethod
    def insert(self, element: Hashable) -> bool:
        """Adds `element` to the set

        Parameters
        ----------
        element : Hashable
            element to add

        Returns
        -------
        bool
            ``True`` if the element was not present before the call
        """

    @abstractmethod
    def remove(self, element: Hashable) -> bool:
        """Removes `element` from the set, if present

        Parameters
        ----------
        element : Hashable
            element to remove

        Returns
        -------
        bool
            ``True`` if the element was present before the call
        """

    @abstractmethod
    def contains(self, element: Hashable) -> bool:
        """Checks whether `element` is stored in the set"""

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator:
        pass

    @abstractmethod
    def union(self, other: "BackingSet") -> "BackingSet":
        """Elements present in `self` or in `other`"""

    @abstractmethod
    def intersection(self, other: "BackingSet") -> "BackingSet":
        """Elements present both in `self` and in `other`"""

    @abstractmethod
    def difference(self, other: "BackingSet") -> "BackingSet":
        """Elements present in `self` but not in `other`"""

    @abstractmethod
    def symmetric_difference(self, other: "BackingSet") -> "BackingSet":
        """Elements present in exactly one of `self` and `other`"""

    @abstractmethod
    def copy(self) -> "BackingSet":
        """Returns an independent copy of the set"""

    @classmethod
    def from_iterable(cls, elements: Iterable = ()) -> "BackingSet":
        return cls(elements)

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def is_subset(self, other: "BackingSet") -> bool:
        if len(self) > len(other):
            return False
        return all(other.contains(element) for element in self)

    def is_disjoint(self, other: "BackingSet") -> bool:
        if len(self) > len(other):
            self, other = other, self
        return not any(other.contains(element) for element in self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BackingSet):
            return False
        return len(self) == len(other) and self.is_subset(other)

    def __ne__(self, other: Any) -> bool:
        return not self == other

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, list(self))
