"""
Decides whether an argument token is an occurrence of an option pattern.
"""
from dataclasses import dataclass
from typing import Optional

from dollar_getopt.configuration import Configuration
from dollar_getopt.syntax import Syntax


@dataclass(frozen=True)
class Match:
    """
    The outcome of :py:func:`classify`.

    Parameters
    ----------
    matched : bool
        Whether the token is an occurrence of the pattern.
    value : Optional[str]
        The value attached to the token. ``None`` means that no value was attached
        and that a value, if one is required, comes from the following token.
        An empty string is an explicitly empty value (e.g. ``-t=``).
    """

    matched: bool
    value: Optional[str] = None

    def __bool__(self) -> bool:
        return self.matched


NO_MATCH = Match(False)


def looks_like_option(token: str, syntax: Syntax) -> bool:
    """
    >>> looks_like_option("--verbose", Syntax())
    True
    >>> looks_like_option("file.txt", Syntax())
    False
    >>> looks_like_option("", Syntax())
    False
    """
    return token.startswith(syntax.option_char) if token else False


def variants(pattern: str) -> "list[str]":
    """
    >>> variants("verbose|loquacious|v")
    ['verbose', 'loquacious', 'v']
    """
    return pattern.split("|")


def canonical(pattern: str) -> str:
    """
    The name reported to callbacks: the first synonym of the pattern.

    >>> canonical("verbose|v")
    'verbose'
    """
    return variants(pattern)[0]


def classify(
    token: str,
    pattern: str,
    cfg: Configuration,
    numeric: bool,
    syntax: Syntax,
) -> Match:
    """
    Checks whether ``token`` is an occurrence of ``pattern`` and extracts the
    value attached to it, if any.

    Parameters
    ----------
    token : str
        A single element of the argument list.
    pattern : str
        ``|``-separated synonyms, e.g. ``"timeout|t"``.
    cfg : Configuration
        The configuration in effect for this declaration.
    numeric : bool
        Whether the destination is numeric. Matters only under
        :py:attr:`config.no_space_only_for_short_numeric_options <dollar_getopt.configuration.config>`.
    syntax : Syntax
        The characters in effect for this parse.

    Examples
    --------

    >>> cfg, syntax = Configuration(), Syntax()
    >>> classify("--timeout=5", "timeout|t", cfg, True, syntax)
    Match(matched=True, value='5')
    >>> classify("--timeout", "timeout|t", cfg, True, syntax)
    Match(matched=True, value=None)
    >>> classify("-t5", "timeout|t", cfg, True, syntax)
    Match(matched=True, value='5')
    >>> classify("-t=5", "timeout|t", cfg, True, syntax)
    Match(matched=True, value='5')
    >>> classify("--TimeOut", "timeout|t", cfg, True, syntax)
    Match(matched=True, value=None)

    Single-letter long options are not accepted:

    >>> classify("--t=5", "timeout|t", cfg, True, syntax)
    Match(matched=False, value=None)

    A multi-letter short option is a short option with an attached value:

    >>> classify("-timeout", "timeout|t", cfg, False, syntax)
    Match(matched=True, value='imeout')
    """
    option_char = syntax.option_char
    assign_char = syntax.assign_char
    if not looks_like_option(token, syntax):
        return NO_MATCH
    # yank the leading dash
    arg = token[1:]
    # long options have two dashes and at least two more characters
    is_long = len(arg) >= 3 and arg[0] == option_char
    if is_long:
        arg = arg[1:]
        # --l= is not an option
        if arg[1] == assign_char:
            return NO_MATCH

    value: Optional[str]
    eq = arg.find(assign_char)
    if eq >= 1:
        if not is_long and eq != 1:
            # -okey=value
            value = arg[1:]
            arg = arg[:1]
            if not numeric and cfg.no_space_only_for_short_numeric_options:
                return NO_MATCH
        else:
            value = arg[eq + 1 :]
            arg = arg[:eq]
    elif not is_long and not cfg.bundling:
        # -ovalue, or -o alone
        value = arg[1:] or None
        arg = arg[:1]
        if (
            value is not None
            and not numeric
            and cfg.no_space_only_for_short_numeric_options
        ):
            return NO_MATCH
    else:
        # --option, or -oxyz with bundling
        value = None

    for variant in variants(pattern):
        if arg == variant:
            return Match(True, value)
        if not cfg.case_sensitive and arg.upper() == variant.upper():
            return Match(True, value)
        if cfg.bundling and not is_long and len(variant) == 1 and variant in arg:
            return Match(True, value)
    return NO_MATCH
