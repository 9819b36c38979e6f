"""
Defines :py:class:`Syntax`, the characters that shape an option token.

The module-level values are the process-wide defaults. They may be reassigned
before calling :py:func:`getopt <dollar_getopt.parser.getopt>`; each invocation
reads them exactly once through :py:meth:`Syntax.current`.
"""
import os
from dataclasses import dataclass

OPTION_CHAR = os.environ.get("DOLLAR_GETOPT_OPTION_CHAR", "-")
END_OF_OPTIONS = os.environ.get("DOLLAR_GETOPT_END_OF_OPTIONS", "--")
ASSIGN_CHAR = os.environ.get("DOLLAR_GETOPT_ASSIGN_CHAR", "=")
ARRAY_SEP = os.environ.get("DOLLAR_GETOPT_ARRAY_SEP", ",")
AUTO_INCREMENT_CHAR = "+"


@dataclass(frozen=True)
class Syntax:
    """
    Parameters
    ----------
    option_char : str
        The character that introduces an option, ``-`` by default.
    end_of_options : str
        The token that ends option processing, ``--`` by default.
        An empty string disables the terminator.
    assign_char : str
        Separates an option from an attached value, ``=`` by default.
    array_sep : str
        Separates the elements of sequence and mapping values, ``,`` by default.

    >>> Syntax.current()
    Syntax(option_char='-', end_of_options='--', assign_char='=', array_sep=',')
    """

    option_char: str = "-"
    end_of_options: str = "--"
    assign_char: str = "="
    array_sep: str = ","

    @classmethod
    def current(cls) -> "Syntax":
        return cls(
            option_char=OPTION_CHAR,
            end_of_options=END_OF_OPTIONS,
            assign_char=ASSIGN_CHAR,
            array_sep=ARRAY_SEP,
        )
