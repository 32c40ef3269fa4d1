import bz2
import gzip
import io
import sys
from io import IOBase
from typing import IO
from urllib.request import urlopen


def open_anything(fname, encoding: str = "utf-8") -> IO:
    """Opens the given file for reading as text. The file may be given as
    a file object or a filename. If the filename ends in ``.bz2`` or
    ``.gz``, it will automatically be decompressed on the fly. If the
    filename starts with ``http://``, ``https://`` or ``ftp://``, the
    remote URL will be opened for reading. A single dash in place of the
    filename means the standard input.
    """
    if isinstance(fname, IOBase):
        return fname
    if fname == "-":
        return sys.stdin
    if fname.startswith(("http://", "https://", "ftp://")):
        return io.TextIOWrapper(urlopen(fname), encoding=encoding)
    if fname.endswith(".bz2"):
        return bz2.open(fname, "rt", encoding=encoding)
    if fname.endswith(".gz"):
        return gzip.open(fname, "rt", encoding=encoding)
    return open(fname, "r", encoding=encoding)
