import logging
from typing import Optional, Type

from infset.backing.backing_set import BackingSet
from infset.backing.hash_backing_set import HashBackingSet
from infset.infinite_set import InfiniteSet
from infset.utilities.open_anything import open_anything


class AllowedIdsFactory:
    """Reads the list of allowed ids from a file, if specified
    """

    def __init__(self, log: logging.Logger, ids_file: Optional[str] = None,
                 backing: Type[BackingSet] = HashBackingSet):
        self.log = log
        self.ids_file = ids_file
        self.backing = backing

    def get(self) -> InfiniteSet[str]:
        """Get the set of allowed ids (everything if the file was not given)

        Blank lines are ignored and surrounding whitespace is stripped
        from every id.

        Returns
        -------
        InfiniteSet[str]
            set of allowed ids
        """
        if self.ids_file is None:
            return InfiniteSet.all(self.backing)

        self.log.info("Loading allowed IDs from %s..." % self.ids_file)
        infile = open_anything(self.ids_file)
        try:
            ids = [line.strip() for line in infile if line.strip()]
        finally:
            if infile is not self.ids_file and self.ids_file != "-":
                infile.close()
        allowed = InfiniteSet.from_elements(ids, self.backing)
        self.log.info("%d allowed IDs loaded" % allowed.union_len())
        return allowed
