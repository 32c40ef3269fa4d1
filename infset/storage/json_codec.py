"""JSON representation of `InfiniteSet` objects.

A set is written as an object holding its kind and its stored elements::

    {"kind": "complement", "elements": ["Gene3D", "HMMPanther"]}

Elements are written in sorted order whenever they can be compared, so the
same set always produces the same text. Elements must be JSON serializable;
lists read back from JSON are turned into tuples so they remain hashable.
"""

import json
from typing import IO, Any, Dict, Type

from infset.backing.backing_set import BackingSet
from infset.backing.hash_backing_set import HashBackingSet
from infset.infinite_set import InfiniteSet, SetKind

__all__ = ["to_dict", "from_dict", "dumps", "loads", "dump", "load"]


def _sorted_if_possible(elements) -> list:
    try:
        return sorted(elements)
    except TypeError:
        return list(elements)


def _hashable(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_hashable(item) for item in value)
    return value


def to_dict(members: InfiniteSet) -> Dict[str, Any]:
    return {"kind": members.kind.value,
            "elements": _sorted_if_possible(members.storage)}


def from_dict(data: Dict[str, Any],
              backing: Type[BackingSet] = HashBackingSet) -> InfiniteSet:
    """Rebuilds a set from the output of `to_dict`

    Raises
    ------
    ValueError
        if `data` does not describe a set
    """
    if not isinstance(data, dict) or "kind" not in data\
            or "elements" not in data:
        raise ValueError("expected an object with 'kind' and 'elements' "
                         "keys, got %r" % (data, ))
    try:
        kind = SetKind(data["kind"])
    except ValueError:
        raise ValueError("unknown set kind: %r" % (data["kind"], ))
    if not isinstance(data["elements"], list):
        raise ValueError("'elements' must be a list, got %r"
                         % (data["elements"], ))
    elements = [_hashable(element) for element in data["elements"]]
    return InfiniteSet(elements, kind, backing)


def dumps(members: InfiniteSet, **kwds) -> str:
    return json.dumps(to_dict(members), **kwds)


def loads(text: str, backing: Type[BackingSet] = HashBackingSet) ->\
        InfiniteSet:
    try:
        data = json.loads(text)
    except ValueError:
        raise ValueError("Invalid json data for a set: %r" % text[:50])
    return from_dict(data, backing)


def dump(members: InfiniteSet, fp: IO, **kwds) -> None:
    json.dump(to_dict(members), fp, **kwds)


def load(fp: IO, backing: Type[BackingSet] = HashBackingSet) -> InfiniteSet:
    return loads(fp.read(), backing)
