from copy import deepcopy
from enum import Enum
from typing import Any, Generic, Iterable, Optional, Type, TypeVar, Union

from infset.backing.backing_set import BackingSet
from infset.backing.hash_backing_set import HashBackingSet

T = TypeVar("T")


class SetKind(Enum):
    """How the stored elements of an `InfiniteSet` are interpreted.

    ``UNION`` means the stored elements are exactly the members of the set;
    ``COMPLEMENT`` means they are the only values *not* in the set.
    """
    UNION: str = "union"
    COMPLEMENT: str = "complement"


class InfiniteSet(Generic[T]):
    """A set that is either a finite union of elements or the complement of
    one, i.e. everything except a finite number of excluded elements.

    Both kinds share the same vocabulary: membership tests, insertion,
    removal and the usual set algebra. When the set is a complement, the
    meaning of the stored elements is inverted, so inserting an element
    removes it from the excluded ones and removing an element adds it to
    them.

    An empty complement contains literally everything, not only every value
    representable by the element type, so it makes most sense to use
    element types with an unbounded number of values (strings, integers,
    tuples...).

    The set has no length and cannot be iterated, since the members of a
    complement cannot be enumerated. Use `union_len` or `complement_len` to
    count the stored elements.

    Two sets are equal only if they have the same kind and the same stored
    elements; no attempt is made to detect different representations of the
    same set.

    Usage example::

        >>> s = InfiniteSet.all()
        >>> "abc" in s
        True
        >>> s.remove("abc")
        True
        >>> "abc" in s
        False
        >>> s
        ~InfiniteSet(['abc'])
        >>> s | InfiniteSet.from_elements(["abc"]) == InfiniteSet.all()
        True
    """

    __slots__ = ("_kind", "_storage")

    def __init__(self, elements: Union[Iterable[T], BackingSet] = (),
                 kind: SetKind = SetKind.UNION,
                 backing: Type[BackingSet] = HashBackingSet):
        """Constructs a set of the given `kind` from the given elements.

        Parameters
        ----------
        elements : Iterable or BackingSet
            elements to store; a `BackingSet` is copied and keeps its class
        kind : SetKind
            whether `elements` are the members (``UNION``) or the excluded
            values (``COMPLEMENT``) of the set
        backing : Type[BackingSet]
            class used to store the elements, unless `elements` is already
            a backing set
        """
        if not isinstance(kind, SetKind):
            raise TypeError("kind must be a SetKind, got %r" % (kind, ))
        if isinstance(elements, BackingSet):
            storage = elements.copy()
        else:
            storage = backing.from_iterable(elements)
        self._kind = kind
        self._storage = storage

    @classmethod
    def _wrap(cls, kind: SetKind, storage: BackingSet) -> "InfiniteSet[T]":
        """Builds a set owning `storage` directly, without copying it"""
        result = cls.__new__(cls)
        result._kind = kind
        result._storage = storage
        return result

    #-------------------------------------------------------------------------
    # Constructors
    #-------------------------------------------------------------------------

    @classmethod
    def empty(cls, backing: Type[BackingSet] = HashBackingSet) ->\
            "InfiniteSet[T]":
        """The set containing nothing"""
        return cls._wrap(SetKind.UNION, backing.from_iterable())

    @classmethod
    def all(cls, backing: Type[BackingSet] = HashBackingSet) ->\
            "InfiniteSet[T]":
        """The set containing everything"""
        return cls._wrap(SetKind.COMPLEMENT, backing.from_iterable())

    @classmethod
    def from_elements(cls, elements: Iterable[T],
                      backing: Type[BackingSet] = HashBackingSet) ->\
            "InfiniteSet[T]":
        """The set containing exactly the given elements"""
        return cls(elements, SetKind.UNION, backing)

    @classmethod
    def from_complement(cls, elements: Iterable[T],
                        backing: Type[BackingSet] = HashBackingSet) ->\
            "InfiniteSet[T]":
        """The set containing everything except the given elements"""
        return cls(elements, SetKind.COMPLEMENT, backing)

    #-------------------------------------------------------------------------
    # Inspection
    #-------------------------------------------------------------------------

    @property
    def kind(self) -> SetKind:
        return self._kind

    @property
    def storage(self) -> BackingSet:
        """The stored elements, whatever the kind of the set. Must not be
        modified by the caller."""
        return self._storage

    def is_union(self) -> bool:
        return self._kind is SetKind.UNION

    def is_complement(self) -> bool:
        return self._kind is SetKind.COMPLEMENT

    def as_union(self) -> Optional[BackingSet]:
        """The stored elements if this set is a union, ``None`` otherwise"""
        return self._storage if self.is_union() else None

    def as_complement(self) -> Optional[BackingSet]:
        """The excluded elements if this set is a complement, ``None``
        otherwise"""
        return self._storage if self.is_complement() else None

    def union_len(self) -> Optional[int]:
        """Number of members of a union, ``None`` for a complement"""
        return len(self._storage) if self.is_union() else None

    def complement_len(self) -> Optional[int]:
        """Number of excluded elements of a complement, ``None`` for a
        union"""
        return len(self._storage) if self.is_complement() else None

    def is_empty(self) -> bool:
        """Whether the set has no members. A complement is never empty."""
        return self.is_union() and len(self._storage) == 0

    def is_all(self) -> bool:
        """Whether the set contains everything"""
        return self.is_complement() and len(self._storage) == 0

    def contains(self, element: Any) -> bool:
        if self.is_union():
            return self._storage.contains(element)
        return not self._storage.contains(element)

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __bool__(self) -> bool:
        return not self.is_empty()

    #-------------------------------------------------------------------------
    # Mutation
    #-------------------------------------------------------------------------

    def insert(self, element: T) -> bool:
        """Makes `element` a member of the set.

        For a complement, this means that `element` is no longer excluded.

        Parameters
        ----------
        element : T
            element to insert

        Returns
        -------
        bool
            ``True`` if `element` was not a member before the call
        """
        if self.is_union():
            return self._storage.insert(element)
        return self._storage.remove(element)

    def remove(self, element: T) -> bool:
        """Makes sure `element` is not a member of the set.

        For a complement, this means that `element` becomes excluded.

        Parameters
        ----------
        element : T
            element to remove

        Returns
        -------
        bool
            ``True`` if `element` was a member before the call
        """
        if self.is_union():
            return self._storage.remove(element)
        return self._storage.insert(element)

    def clear(self) -> None:
        """Removes every member, turning the set into an empty union"""
        self._kind = SetKind.UNION
        self._storage = self._storage.from_iterable()

    def complement(self) -> None:
        """Inverts the set in place: members become non-members and vice
        versa. The stored elements are kept as they are."""
        if self.is_union():
            self._kind = SetKind.COMPLEMENT
        else:
            self._kind = SetKind.UNION

    def complemented(self) -> "InfiniteSet[T]":
        """Returns an inverted copy of the set"""
        result = self.copy()
        result.complement()
        return result

    def __invert__(self) -> "InfiniteSet[T]":
        return self.complemented()

    def copy(self) -> "InfiniteSet[T]":
        return self._wrap(self._kind, self._storage.copy())

    def __copy__(self) -> "InfiniteSet[T]":
        return self.copy()

    def __deepcopy__(self, memo) -> "InfiniteSet[T]":
        return self._wrap(self._kind, deepcopy(self._storage, memo))

    #-------------------------------------------------------------------------
    # Set algebra
    #-------------------------------------------------------------------------

    def _coerce(self, other: Any) -> "InfiniteSet":
        if isinstance(other, InfiniteSet):
            return other
        if isinstance(other, (set, frozenset)):
            return self._wrap(SetKind.UNION,
                              self._storage.from_iterable(other))
        raise NotImplementedError

    def _result(self, kind: SetKind, storage: BackingSet) -> "InfiniteSet":
        """Wraps the outcome of an operation, stored in the backing class
        of `self`"""
        if type(storage) is not type(self._storage):
            storage = self._storage.from_iterable(storage)
        return self._wrap(kind, storage)

    def union(self, other: "InfiniteSet[T]") -> "InfiniteSet[T]":
        """Elements in `self` or in `other`.

        Example::

            >>> s = InfiniteSet.from_elements([1, 2])
            >>> s.union(InfiniteSet.from_complement([2, 3]))
            ~InfiniteSet([3])
        """
        other = self._coerce(other)
        this, that = self._storage, other._storage
        if self.is_union():
            if other.is_union():
                return self._result(SetKind.UNION, this.union(that))
            return self._result(SetKind.COMPLEMENT, that.difference(this))
        if other.is_union():
            return self._result(SetKind.COMPLEMENT, this.difference(that))
        return self._result(SetKind.COMPLEMENT, this.intersection(that))

    def intersection(self, other: "InfiniteSet[T]") -> "InfiniteSet[T]":
        """Elements both in `self` and in `other`"""
        other = self._coerce(other)
        this, that = self._storage, other._storage
        if self.is_union():
            if other.is_union():
                return self._result(SetKind.UNION, this.intersection(that))
            return self._result(SetKind.UNION, this.difference(that))
        if other.is_union():
            return self._result(SetKind.UNION, that.difference(this))
        return self._result(SetKind.COMPLEMENT, this.union(that))

    def difference(self, other: "InfiniteSet[T]") -> "InfiniteSet[T]":
        """Elements in `self` but not in `other`"""
        other = self._coerce(other)
        this, that = self._storage, other._storage
        if self.is_union():
            if other.is_union():
                return self._result(SetKind.UNION, this.difference(that))
            return self._result(SetKind.UNION, this.intersection(that))
        if other.is_union():
            return self._result(SetKind.COMPLEMENT, this.union(that))
        return self._result(SetKind.UNION, that.difference(this))

    def symmetric_difference(self, other: "InfiniteSet[T]") ->\
            "InfiniteSet[T]":
        """Elements in exactly one of `self` and `other`"""
        other = self._coerce(other)
        return self.difference(other).union(other.difference(self))

    def _update(self, result: "InfiniteSet[T]") -> "InfiniteSet[T]":
        self._kind = result._kind
        self._storage = result._storage
        return self

    def __or__(self, other):
        return self.union(other)

    def __and__(self, other):
        return self.intersection(other)

    def __sub__(self, other):
        return self.difference(other)

    def __xor__(self, other):
        return self.symmetric_difference(other)

    def __ror__(self, other):
        return self._coerce(other).union(self)

    def __rand__(self, other):
        return self._coerce(other).intersection(self)

    def __rsub__(self, other):
        return self._coerce(other).difference(self)

    def __rxor__(self, other):
        return self._coerce(other).symmetric_difference(self)

    def __ior__(self, other):
        return self._update(self.union(other))

    def __iand__(self, other):
        return self._update(self.intersection(other))

    def __isub__(self, other):
        return self._update(self.difference(other))

    def __ixor__(self, other):
        return self._update(self.symmetric_difference(other))

    #-------------------------------------------------------------------------
    # Predicates
    #-------------------------------------------------------------------------

    def is_disjoint(self, other: "InfiniteSet[T]") -> bool:
        """Whether `self` and `other` have no member in common. Two
        complements always overlap."""
        other = self._coerce(other)
        if self.is_union():
            if other.is_union():
                return self._storage.is_disjoint(other._storage)
            return self._storage.is_subset(other._storage)
        if other.is_union():
            return other._storage.is_subset(self._storage)
        return False

    def is_subset(self, other: "InfiniteSet[T]") -> bool:
        """Whether every member of `self` is a member of `other`. A
        complement is never a subset of a union."""
        other = self._coerce(other)
        if self.is_union():
            if other.is_union():
                return self._storage.is_subset(other._storage)
            return self._storage.is_disjoint(other._storage)
        if other.is_union():
            return False
        return other._storage.is_subset(self._storage)

    def is_superset(self, other: "InfiniteSet[T]") -> bool:
        """Whether every member of `other` is a member of `self`"""
        return self._coerce(other).is_subset(self)

    def __le__(self, other):
        return self.is_subset(other)

    def __ge__(self, other):
        return self.is_superset(other)

    def __lt__(self, other):
        other = self._coerce(other)
        return self != other and self <= other

    def __gt__(self, other):
        other = self._coerce(other)
        return self != other and self >= other

    #-------------------------------------------------------------------------
    # Equality and printing
    #-------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, InfiniteSet)\
            and self._kind is other._kind\
            and self._storage == other._storage

    def __ne__(self, other: Any) -> bool:
        return not self == other

    # mutable, like the builtin set
    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        try:
            elements = sorted(self._storage)
        except TypeError:
            elements = list(self._storage)
        prefix = "~" if self.is_complement() else ""
        return "%s%s(%r)" % (prefix, self.__class__.__name__, elements)
