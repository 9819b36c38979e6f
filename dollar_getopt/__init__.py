from dollar_getopt.configuration import Configuration, config
from dollar_getopt.destination import (
    Destination,
    Kind,
    Var,
    attr,
    boolean,
    callback,
    enumeration,
    floating,
    infer,
    integer,
    mapping,
    sequence,
    string,
)
from dollar_getopt.error import (
    ArgumentError,
    BooleanValueError,
    ConversionError,
    EmptyArgumentsError,
    IllegalArgumentError,
    MissingValueError,
    UnrecognizedOptionError,
    UnsupportedDestinationError,
)
from dollar_getopt.parser import getopt, parse, parse_args
from dollar_getopt.result import Result
from dollar_getopt.syntax import Syntax

__all__ = [
    "getopt",
    "parse",
    "parse_args",
    "config",
    "Configuration",
    "Syntax",
    "Destination",
    "Kind",
    "Var",
    "attr",
    "boolean",
    "integer",
    "floating",
    "string",
    "enumeration",
    "sequence",
    "mapping",
    "callback",
    "infer",
    "ArgumentError",
    "EmptyArgumentsError",
    "UnrecognizedOptionError",
    "MissingValueError",
    "IllegalArgumentError",
    "ConversionError",
    "BooleanValueError",
    "UnsupportedDestinationError",
    "Result",
]
