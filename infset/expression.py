import re
from typing import Type

from infset.backing.backing_set import BackingSet
from infset.backing.hash_backing_set import HashBackingSet
from infset.infinite_set import InfiniteSet

__all__ = ["ALL_TOKEN", "parse_expression", "format_expression"]

ALL_TOKEN = "ALL"

_OPERATOR_REGEXP = re.compile(r"\s*([-+])\s*")


def parse_expression(text: str, all_token: str = ALL_TOKEN,
                     backing: Type[BackingSet] = HashBackingSet) ->\
        InfiniteSet[str]:
    """Builds an `InfiniteSet` of names from a textual expression.

    The expression consists of names and the operators ``+`` and ``-``,
    with their usual meaning of addition and exclusion. The special name
    given in `all_token` (``ALL`` by default) means every possible name,
    enabling expressions like ``ALL-HMMPanther`` (every name except
    HMMPanther). Some examples:

    - ``HMMPanther`` means HMMPanther only.
    - ``ALL`` means every possible name.
    - ``HMMPanther+HMMPfam`` means HMMPanther or HMMPfam.
    - ``ALL-HMMPanther-Gene3D`` means everything but HMMPanther or Gene3D.
    - ``ALL+HMMPanther`` extends everything with HMMPanther, so it is
      equivalent to ``ALL``.

    An empty expression denotes the empty set. A leading sign is allowed,
    so ``-Seg`` is the empty set minus Seg.

    Parameters
    ----------
    text : str
        the expression to parse
    all_token : str
        name standing for every possible name
    backing : Type[BackingSet]
        class used to store the names of the resulting set

    Returns
    -------
    InfiniteSet[str]
        the set described by the expression

    Raises
    ------
    ValueError
        if an operator is not followed by a name, e.g. ``a-`` or ``a+-b``
    """
    result: InfiniteSet[str] = InfiniteSet.empty(backing)
    if not text.strip():
        return result

    # names and operators alternate: [name, op, name, op, name...]
    tokens = _OPERATOR_REGEXP.split(text.strip())
    if not tokens[0] and len(tokens) > 1:
        # leading sign, as in "-Seg"
        tokens = tokens[1:]
    else:
        tokens = ["+"] + tokens

    for sign, name in zip(tokens[::2], tokens[1::2]):
        if not name:
            raise ValueError("missing name after %r in expression %r"
                             % (sign, text))
        if name == all_token:
            term = InfiniteSet.all(backing)
        else:
            term = InfiniteSet.from_elements([name], backing)
        if sign == "-":
            result -= term
        else:
            result |= term
    return result


def format_expression(members: InfiniteSet[str],
                      all_token: str = ALL_TOKEN) -> str:
    """Turns an `InfiniteSet` of names back into an expression that
    `parse_expression` understands, listing the names in sorted order.

    Example::

        >>> format_expression(InfiniteSet.from_complement(["b", "a"]))
        'ALL-a-b'
        >>> format_expression(InfiniteSet.from_elements(["b", "a"]))
        'a+b'

    Raises
    ------
    ValueError
        if a stored name cannot be written in an expression
    """
    for name in members.storage:
        if not isinstance(name, str) or name != name.strip() or not name\
                or "+" in name or "-" in name or name == all_token:
            raise ValueError("name cannot be written in an expression: %r"
                             % (name, ))
    names = sorted(members.storage)
    if members.is_union():
        return "+".join(names)
    return "".join([all_token] + ["-" + name for name in names])
