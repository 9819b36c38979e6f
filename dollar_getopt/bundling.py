"""
Splits bundled short options (``-abc``) into separate tokens (``-a -b -c``).
"""
from typing import List

from dollar_getopt.syntax import Syntax


def is_bundle(token: str, syntax: Syntax) -> bool:
    """
    >>> is_bundle("-abc", Syntax())
    True
    >>> is_bundle("-a", Syntax())
    False
    >>> is_bundle("--abc", Syntax())
    False
    >>> is_bundle("-a=bc", Syntax())
    False
    """
    return (
        len(token) > 2
        and token[0] == syntax.option_char
        and token[1] != syntax.option_char
        and token[2] != syntax.assign_char
    )


def unbundle(token: str, syntax: Syntax) -> List[str]:
    """
    >>> unbundle("-fzv", Syntax())
    ['-f', '-z', '-v']
    """
    return [syntax.option_char + c for c in token[1:]]


def expand(args: List[str], i: int, syntax: Syntax) -> None:
    """
    Replaces ``args[i]`` with its unbundled tokens, in place.

    >>> args = ["prog", "-nl", "file"]
    >>> expand(args, 1, Syntax())
    >>> args
    ['prog', '-n', '-l', 'file']
    """
    args[i : i + 1] = unbundle(args[i], syntax)
