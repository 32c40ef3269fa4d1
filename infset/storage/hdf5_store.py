import logging
import re
from typing import List, Optional, Type

import tables

from infset.backing.backing_set import BackingSet
from infset.backing.hash_backing_set import HashBackingSet
from infset.infinite_set import InfiniteSet, SetKind

ELEMENT_SIZE = 255

_NAME_REGEXP = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class StoredElement(tables.IsDescription):
    """Pytables registry holding one stored element of a set"""
    element = tables.StringCol(itemsize=ELEMENT_SIZE, pos=0)


class InfiniteSetStore:
    """HDF5 file holding named sets of strings.

    Each set lives in its own group under ``/sets``; the kind of the set is
    kept as a group attribute and its stored elements in an indexed table,
    so that membership can be answered straight from the file, without
    loading the whole set.

    Usage example::

        with InfiniteSetStore("sets.h5", "a") as store:
            store.save("trusted", parse_expression("ALL-Gene3D"))
            store.contains("trusted", "Gene3D")     # False
    """

    def __init__(self, path: str, mode: str = "r",
                 log: Optional[logging.Logger] = None):
        if mode not in ("r", "a", "w"):
            raise ValueError('`mode` must be in ("r", "w", "a"), got %s'
                             % mode)
        self.path = path
        self.mode = mode
        self.log = log or logging.getLogger(__name__)
        self._file = tables.open_file(path, mode)
        if mode != "r" and "/sets" not in self._file:
            self._file.create_group("/", "sets")

    def __enter__(self) -> "InfiniteSetStore":
        return self

    def __exit__(self, *args, **kwargs):
        self.close()

    @property
    def is_open(self) -> bool:
        return self._file.isopen

    def close(self) -> None:
        if self._file.isopen:
            self._file.close()

    def names(self) -> List[str]:
        """Names of the stored sets, in alphabetical order"""
        if "/sets" not in self._file:
            return []
        return sorted(node._v_name
                      for node in self._file.list_nodes("/sets"))

    def __contains__(self, name: str) -> bool:
        return name in self.names()

    def save(self, name: str, members: InfiniteSet[str]) -> None:
        """Stores `members` under `name`, replacing any set already stored
        under the same name.

        Raises
        ------
        ValueError
            if `name` is not a valid identifier, or an element is not a
            string or is too long to be stored
        IOError
            if the store was opened read-only
        """
        if self.mode == "r":
            raise IOError("Cannot save set to read-only store %s" % self.path)
        if not _NAME_REGEXP.match(name):
            raise ValueError("set name must be a valid identifier, got %r"
                             % name)
        encoded = [self._encode(element) for element in members.storage]

        if name in self:
            self._file.remove_node("/sets", name, recursive=True)
        group = self._file.create_group("/sets", name)
        group._v_attrs.kind = members.kind.value
        table = self._file.create_table(
            group, "elements", StoredElement,
            expectedrows=max(len(encoded), 1))
        row = table.row
        for element in encoded:
            row["element"] = element
            row.append()
        table.flush()
        table.cols.element.create_index()
        self._file.flush()
        self.log.debug("Saved set %s (%s, %d elements) to %s"
                       % (name, members.kind.value, len(encoded), self.path))

    def load(self, name: str,
             backing: Type[BackingSet] = HashBackingSet) ->\
            InfiniteSet[str]:
        """Reads the set stored under `name`

        Raises
        ------
        KeyError
            if no set is stored under that name
        """
        group = self._get_group(name)
        kind = SetKind(group._v_attrs.kind)
        elements = [element.decode("utf-8")
                    for element in group.elements.col("element")]
        return InfiniteSet(elements, kind, backing)

    def contains(self, name: str, element: str) -> bool:
        """Checks whether `element` is a member of the set stored under
        `name`, using the index of the stored elements. Strings too long
        to be stored are never among the stored elements."""
        group = self._get_group(name)
        value = self._to_bytes(element)
        if len(value) > ELEMENT_SIZE:
            stored = False
        else:
            stored = any(True for _ in group.elements.where(
                "element == value", condvars={"value": value}))
        if SetKind(group._v_attrs.kind) is SetKind.UNION:
            return stored
        return not stored

    def delete(self, name: str) -> None:
        if self.mode == "r":
            raise IOError("Cannot delete set from read-only store %s"
                          % self.path)
        self._get_group(name)
        self._file.remove_node("/sets", name, recursive=True)

    def _get_group(self, name: str):
        try:
            return self._file.get_node("/sets", name)
        except tables.NoSuchNodeError:
            raise KeyError("no set named %r in %s" % (name, self.path))

    @staticmethod
    def _to_bytes(element: str) -> bytes:
        if not isinstance(element, str):
            raise ValueError("only strings can be stored, got %r"
                             % (element, ))
        return element.encode("utf-8")

    def _encode(self, element: str) -> bytes:
        encoded = self._to_bytes(element)
        if len(encoded) > ELEMENT_SIZE:
            raise ValueError("element longer than %d bytes: %r"
                             % (ELEMENT_SIZE, element))
        return encoded
