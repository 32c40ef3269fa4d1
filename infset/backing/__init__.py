"""Finite containers that can store the explicit elements of an
`InfiniteSet`."""

from infset.backing.backing_set import BackingSet
from infset.backing.hash_backing_set import HashBackingSet
from infset.backing.sorted_backing_set import SortedBackingSet

__all__ = ["BackingSet", "HashBackingSet", "SortedBackingSet"]
