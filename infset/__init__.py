"""
infset -- sets that are either a finite union of elements or the complement
of one

`InfiniteSet` lets allow-lists and deny-lists share one type: a union holds
the members of the set, a complement holds the only values that are *not*
members. Insertion, removal and the set algebra are interpreted according to
the kind of the set.
"""

from infset.backing import BackingSet, HashBackingSet, SortedBackingSet
from infset.expression import format_expression, parse_expression
from infset.infinite_set import InfiniteSet, SetKind

__version__ = "1.0"

__all__ = ["BackingSet", "HashBackingSet", "InfiniteSet", "SetKind",
           "SortedBackingSet", "format_expression", "parse_expression"]
