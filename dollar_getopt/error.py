"""
Defines errors which can be raised by :py:func:`getopt <dollar_getopt.parser.getopt>`.
"""
from dataclasses import dataclass
from typing import Any


@dataclass
class ArgumentError(Exception):
    usage: str


@dataclass
class EmptyArgumentsError(ArgumentError):
    pass


@dataclass
class UnrecognizedOptionError(ArgumentError):
    option: str


@dataclass
class MissingValueError(ArgumentError):
    missing: str


@dataclass
class IllegalArgumentError(ArgumentError):
    argument: str


@dataclass
class ConversionError(ArgumentError):
    value: str
    exception: Exception


@dataclass
class BooleanValueError(ArgumentError):
    option: str
    value: str


@dataclass
class UnsupportedDestinationError(ArgumentError):
    destination: Any
