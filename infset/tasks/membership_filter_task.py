from infset.infinite_set import InfiniteSet
from infset.tasks.base import LoggedTask
from infset.utilities.open_anything import open_anything


class MembershipFilterTask(LoggedTask):
    """Keeps the lines of a tabular file whose key column is a member of a
    given set (or is not, when inverted)"""

    def process_file(self, filename: str, members: InfiniteSet[str],
                     column: int = 0, separator: str = "\t",
                     invert: bool = False) -> int:
        """Prints the selected lines of `filename` to the standard output

        Parameters
        ----------
        filename : str
            input file, ``-`` for the standard input
        members : InfiniteSet[str]
            set the key of every line is checked against
        column : int
            zero-based index of the key column
        separator : str
            column separator
        invert : bool
            keep the lines whose key is *not* a member instead

        Returns
        -------
        int
            number of lines printed
        """
        self.log.info("Processing %s..." % filename)

        kept, dropped, skipped = 0, 0, 0
        infile = open_anything(filename)
        try:
            for line in infile:
                line = line.rstrip("\n")
                if not line:
                    continue
                parts = line.split(separator)
                if column >= len(parts):
                    skipped += 1
                    continue
                if (parts[column].strip() in members) != invert:
                    print(line)
                    kept += 1
                else:
                    dropped += 1
        finally:
            if infile is not filename and filename != "-":
                infile.close()

        self.log.info("%d lines kept, %d dropped" % (kept, dropped))
        if skipped:
            self.log.warning("%d lines skipped for having fewer than %d "
                             "columns" % (skipped, column + 1))
        return kept
