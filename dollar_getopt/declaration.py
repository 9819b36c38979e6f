"""
Turns the heterogeneous arguments of :py:func:`getopt <dollar_getopt.parser.getopt>`
into a list of :py:class:`Directive` and :py:class:`Binding` declarations.
"""
from dataclasses import dataclass
from typing import Any, List, Union

from dollar_getopt.configuration import config
from dollar_getopt.destination import Destination, infer
from dollar_getopt.error import ArgumentError, UnsupportedDestinationError
from dollar_getopt.result import Result
from dollar_getopt.syntax import AUTO_INCREMENT_CHAR


@dataclass(frozen=True)
class Directive:
    directive: config


@dataclass(frozen=True)
class Binding:
    pattern: str
    incremental: bool
    destination: Destination


Declaration = Union[Directive, Binding]


def binding(pattern: str, target: Any) -> Result[Binding]:
    """
    >>> from dollar_getopt.destination import Var
    >>> b = binding("paranoid+", Var(0)).get
    >>> b.pattern, b.incremental
    ('paranoid', True)
    >>> binding("verbose+", Var(False)).get.usage
    "Incremental option 'verbose' requires a numeric destination"
    """
    incremental = pattern.endswith(AUTO_INCREMENT_CHAR)
    if incremental:
        pattern = pattern[: -len(AUTO_INCREMENT_CHAR)]

    def check(destination: Destination) -> Result[Binding]:
        if incremental and not destination.numeric:
            return Result(
                UnsupportedDestinationError(
                    usage=f"Incremental option {pattern!r} requires a numeric destination",
                    destination=destination,
                )
            )
        return Result(Binding(pattern, incremental, destination))

    return infer(target) >= check


def declarations(*opts: Any) -> Result[List[Declaration]]:
    """
    >>> from dollar_getopt.destination import Var
    >>> [type(d).__name__ for d in declarations(config.bundling, "verbose|v", Var(False)).get]
    ['Directive', 'Binding']
    >>> declarations("verbose").get.usage
    "Option 'verbose' has no destination"
    """
    result: List[Declaration] = []
    i = 0
    while i < len(opts):
        opt = opts[i]
        if isinstance(opt, config):
            result.append(Directive(opt))
            i += 1
            continue
        if not isinstance(opt, str):
            return Result(
                UnsupportedDestinationError(
                    usage=f"Expected an option string or a directive. Got {opt!r}",
                    destination=opt,
                )
            )
        if i + 1 == len(opts):
            return Result(
                UnsupportedDestinationError(
                    usage=f"Option {opt!r} has no destination", destination=None
                )
            )
        b = binding(opt, opts[i + 1]).get
        if isinstance(b, ArgumentError):
            return Result(b)
        result.append(b)
        i += 2
    return Result(result)
