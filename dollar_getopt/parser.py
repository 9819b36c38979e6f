"""
Defines :py:func:`getopt`, which binds command-line options to destinations and
removes them from the argument list.
"""
import os
import sys
from typing import Any, List, Optional

from dollar_getopt.bundling import expand, is_bundle
from dollar_getopt.classify import canonical, classify, looks_like_option
from dollar_getopt.configuration import Configuration
from dollar_getopt.declaration import Binding, Declaration, Directive, declarations
from dollar_getopt.error import (
    ArgumentError,
    EmptyArgumentsError,
    MissingValueError,
    UnrecognizedOptionError,
)
from dollar_getopt.result import Result
from dollar_getopt.syntax import Syntax

global TESTING
TESTING = os.environ.get("DOLLAR_GETOPT_TESTING", False)
PRINTING = os.environ.get("DOLLAR_GETOPT_PRINTING", True)


def is_end_of_options(token: str, syntax: Syntax) -> bool:
    return bool(syntax.end_of_options) and token == syntax.end_of_options


def handle_option(
    args: List[str], binding: Binding, cfg: Configuration, syntax: Syntax
) -> Result[None]:
    """
    Scans ``args`` for every occurrence of ``binding`` and applies it.
    Matched tokens, and the values taken from the tokens that follow them,
    are removed from ``args``.

    >>> from dollar_getopt.destination import Var, integer
    >>> paranoid = Var(2)
    >>> args = ["prog", "--paranoid", "42", "--paranoid"]
    >>> handle_option(args, Binding("paranoid", True, integer(paranoid)), Configuration(), Syntax())
    Result(None)
    >>> paranoid.value, args
    (4, ['prog', '42'])
    """
    destination = binding.destination
    name = canonical(binding.pattern)
    i = 1
    while i < len(args):
        a = args[i]
        if is_end_of_options(a, syntax):
            break
        if cfg.stop_on_first_non_option and not looks_like_option(a, syntax):
            # first non-option is end of options
            break
        if cfg.bundling and is_bundle(a, syntax):
            expand(args, i, syntax)
            continue
        match = classify(a, binding.pattern, cfg, destination.numeric, syntax)
        if not match:
            i += 1
            continue

        # from here on, commit to eat args[i]
        del args[i]
        value = match.value
        if value is None and destination.takes_value(binding.incremental):
            if i >= len(args):
                return Result(
                    MissingValueError(
                        usage=f"Missing value for argument {a}.", missing=a
                    )
                )
            value = args.pop(i)
        result = destination.apply(name, a, value, binding.incremental, syntax)
        if isinstance(result.get, ArgumentError):
            return result
    return Result(None)


def check_unparsed(
    args: List[str], cfg: Configuration, syntax: Syntax
) -> Result[List[str]]:
    """
    Looks for options that no declaration consumed. Removes the terminator.

    >>> check_unparsed(["prog", "file", "--", "-v"], Configuration(), Syntax())
    Result(['prog', 'file', '-v'])
    >>> check_unparsed(["prog", "--baz"], Configuration(), Syntax()).get.usage
    'Unrecognized option --baz'
    """
    i = 1
    while i < len(args):
        a = args[i]
        if is_end_of_options(a, syntax):
            del args[i]
            break
        if not looks_like_option(a, syntax):
            if cfg.stop_on_first_non_option:
                break
            i += 1
            continue
        if not cfg.pass_through:
            return Result(
                UnrecognizedOptionError(usage=f"Unrecognized option {a}", option=a)
            )
        i += 1
    return Result(args)


def process(
    args: List[str], decls: List[Declaration], syntax: Syntax
) -> Result[List[str]]:
    cfg = Configuration()
    for decl in decls:
        if isinstance(decl, Directive):
            cfg = cfg.apply(decl.directive)
            continue
        result = handle_option(args, decl, cfg, syntax)
        if isinstance(result.get, ArgumentError):
            return Result(result.get)
    return check_unparsed(args, cfg, syntax)


def parse(
    args: List[str], *opts: Any, syntax: Optional[Syntax] = None
) -> Result[List[str]]:
    """
    Like :py:func:`getopt`, but returns errors in a
    :py:class:`Result <dollar_getopt.result.Result>` instead of raising them.
    On success the result holds ``args``.

    >>> from dollar_getopt.destination import Var
    >>> parse([], "verbose", Var(False)).get.usage
    'Invalid arguments passed: program name missing'
    >>> parse(["prog", "--verbose=yes"], "verbose", Var(False)).get.usage
    "Option --verbose=yes does not take a value. Got 'yes'"
    """
    if not args:
        return Result(
            EmptyArgumentsError(
                usage="Invalid arguments passed: program name missing"
            )
        )
    _syntax = Syntax.current() if syntax is None else syntax
    return declarations(*opts) >= (lambda decls: process(args, decls, _syntax))


def getopt(args: List[str], *opts: Any, syntax: Optional[Syntax] = None) -> None:
    """
    Parses ``args`` in place. ``args[0]`` is the program name and is never
    treated as an option.

    Parameters
    ----------
    args : List[str]
        The command line. Consumed options and their values are removed;
        whatever is left is for the program to process.
    opts : Any
        Option strings, each followed by its destination, interleaved with
        :py:class:`config <dollar_getopt.configuration.config>` directives. A
        directive applies to every option after it.
    syntax : Optional[Syntax]
        The characters to use. Defaults to :py:meth:`Syntax.current`.

    Raises
    ------
    ArgumentError
        If ``args`` is empty, an option cannot be matched, or a value cannot be
        converted. ``args`` may have been partially consumed.

    Examples
    --------

    >>> from dollar_getopt.destination import Var
    >>> length, data, verbose = Var(24), Var("file.dat"), Var(False)
    >>> args = ["prog", "--length=5", "--file", "dat.file", "--verbose", "input"]
    >>> getopt(args, "length", length, "file", data, "verbose", verbose)
    >>> length.value, data.value, verbose.value
    (5, 'dat.file', True)
    >>> args
    ['prog', 'input']

    Unbundling happens before short options are handled:

    >>> from dollar_getopt.configuration import config
    >>> filename, verbose = Var(""), Var(False)
    >>> getopt(["prog", "-fzv"], config.bundling, "f", filename, "v", verbose)
    >>> filename.value, verbose.value
    ('-z', True)
    """
    parse(args, *opts, syntax=syntax).unwrap()


def _print(*args, **kwargs):
    if PRINTING:
        print(*args, **kwargs)


def handle_error(error: ArgumentError, usage: Optional[str] = None) -> None:
    if usage:
        _print("usage:", usage)
    if error.usage:
        _print(error.usage)
    if TESTING:
        return
    else:
        sys.exit(1)


def parse_args(
    *opts: Any,
    args: Optional[List[str]] = None,
    syntax: Optional[Syntax] = None,
    usage: Optional[str] = None,
) -> Optional[List[str]]:
    """
    Parses a copy of ``args`` (``sys.argv`` by default) and returns what is left.
    On failure, prints the error (preceded by ``usage`` if given) and exits.

    >>> from dollar_getopt.destination import Var
    >>> parse_args("verbose", Var(False), args=["prog", "--verbose", "file"])
    ['prog', 'file']
    """
    _args = list(sys.argv if args is None else args)
    result = parse(_args, *opts, syntax=syntax).get
    if isinstance(result, ArgumentError):
        handle_error(result, usage)
        return None
    return result
