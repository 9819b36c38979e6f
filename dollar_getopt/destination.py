"""
Defines :py:class:`Destination`, the place a matched option writes to, and the
functions that build destinations.

A destination is tagged with its :py:class:`Kind` once, when it is built. The
binder (:py:meth:`Destination.apply`) switches on that tag.
"""
import inspect
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    List,
    Optional,
    Protocol,
    Type,
    TypeVar,
    runtime_checkable,
)

from dollar_getopt.error import (
    ArgumentError,
    BooleanValueError,
    ConversionError,
    IllegalArgumentError,
    UnsupportedDestinationError,
)
from dollar_getopt.result import Result
from dollar_getopt.syntax import Syntax

A = TypeVar("A")


@runtime_checkable
class Ref(Protocol[A]):
    def get(self) -> A:
        ...

    def set(self, value: A) -> None:
        ...


@dataclass
class Var(Generic[A]):
    """
    A mutable cell, the simplest :py:class:`Ref`.

    >>> v = Var(24)
    >>> v.set(5)
    >>> v
    Var(value=5)
    """

    value: A

    def get(self) -> A:
        return self.value

    def set(self, value: A) -> None:
        self.value = value


@dataclass
class Attr(Generic[A]):
    obj: Any
    name: str

    def get(self) -> A:
        return getattr(self.obj, self.name)

    def set(self, value: A) -> None:
        setattr(self.obj, self.name, value)


def attr(obj: Any, name: str) -> Attr:
    """
    Binds the attribute ``name`` of ``obj``.

    >>> from types import SimpleNamespace
    >>> ns = SimpleNamespace(length=24)
    >>> attr(ns, "length").set(5)
    >>> ns.length
    5
    """
    return Attr(obj, name)


class Kind(Enum):
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"
    ENUM = "enum"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    CALLBACK0 = "callback0"
    CALLBACK1 = "callback1"
    CALLBACK2 = "callback2"


SCALARS = (Kind.BOOL, Kind.INT, Kind.FLOAT, Kind.STR, Kind.ENUM)
NUMERIC = (Kind.INT, Kind.FLOAT)


def to_bool(s: str) -> bool:
    """
    >>> to_bool("True"), to_bool("false")
    (True, False)
    """
    lowered = s.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"{s!r} is neither 'true' nor 'false'")


def to_number(type_: Type[Any]) -> Callable[[str], Any]:
    """
    Like ``type_``, but rejects surrounding whitespace, digit-grouping
    underscores and non-ASCII digits.

    >>> to_number(int)("-5"), to_number(float)(".1")
    (-5, 0.1)
    >>> to_number(int)(" 5 ")
    Traceback (most recent call last):
    ...
    ValueError: invalid literal for int(): ' 5 '
    """

    def convert(s: str) -> Any:
        if not s.isascii() or "_" in s or s != s.strip():
            raise ValueError(f"invalid literal for {type_.__name__}(): {s!r}")
        return type_(s)

    return convert


def converter(type_: Callable[[str], Any]) -> Callable[[str], Any]:
    """
    Returns the function that converts a command-line string to ``type_``.
    Enumerations are converted by member name, exactly.

    >>> class Color(Enum):
    ...     no = 0
    ...     yes = 1
    ...
    >>> converter(Color)("yes")
    <Color.yes: 1>
    >>> converter(int)("5")
    5
    """
    if type_ is bool:
        return to_bool
    if type_ is int or type_ is float:
        return to_number(type_)
    if isinstance(type_, type) and issubclass(type_, Enum):
        enum_type: Type[Enum] = type_

        def to_enum(s: str) -> Enum:
            return enum_type[s]

        return to_enum
    return type_


@dataclass
class Destination:
    """
    Parameters
    ----------
    kind : Kind
        Decides how :py:meth:`apply` treats values.
    target : Any
        A :py:class:`Ref` for scalar kinds, a ``list`` for :py:attr:`Kind.SEQUENCE`,
        a ``dict`` for :py:attr:`Kind.MAPPING` and a callable for the callback kinds.
    type : Callable[[str], Any]
        Converts scalar values, sequence elements and mapping values.
    key_type : Callable[[str], Any]
        Converts mapping keys.
    """

    kind: Kind
    target: Any
    type: Callable[[str], Any] = str
    key_type: Callable[[str], Any] = str

    @property
    def numeric(self) -> bool:
        return self.kind in NUMERIC

    def takes_value(self, incremental: bool) -> bool:
        """
        Whether a missing inline value must be taken from the following token.
        """
        if incremental:
            return False
        return self.kind not in (Kind.BOOL, Kind.CALLBACK0, Kind.CALLBACK1)

    def convert(self, f: Callable[[str], Any], s: str, token: str) -> Result[Any]:
        try:
            return Result(converter(f)(s))
        except Exception as e:
            usage = f"argument {token}: cannot convert {s!r}: {e}"
            return Result(ConversionError(usage=usage, value=s, exception=e))

    def apply(
        self,
        name: str,
        token: str,
        value: Optional[str],
        incremental: bool,
        syntax: Syntax,
    ) -> Result[None]:
        """
        Stores ``value`` or invokes the callback.

        Parameters
        ----------
        name : str
            The canonical name of the option, passed to callbacks.
        token : str
            The token that matched, used in error messages.
        value : Optional[str]
            The value of the option: inline, or taken from the following token.
        incremental : bool
            Whether the option was declared with the auto-increment marker.
        syntax : Syntax
            Supplies the array separator and the assignment character.

        Examples
        --------

        >>> v = Var(0)
        >>> integer(v).apply("length", "--length", "5", False, Syntax())
        Result(None)
        >>> v.value
        5
        >>> names = []
        >>> sequence(names).apply("name", "-n", "foo,bar", False, Syntax())
        Result(None)
        >>> names
        ['foo', 'bar']
        """
        kind = self.kind
        if kind is Kind.BOOL:
            if value is not None:
                return Result(
                    BooleanValueError(
                        usage=f"Option {token} does not take a value. Got {value!r}",
                        option=token,
                        value=value,
                    )
                )
            self.target.set(True)
            return Result(None)

        if kind in NUMERIC and incremental:
            self.target.set(self.target.get() + 1)
            return Result(None)

        if kind is Kind.CALLBACK0:
            self.target()
            return Result(None)
        if kind is Kind.CALLBACK1:
            self.target(name)
            return Result(None)

        assert value is not None, token
        if kind is Kind.CALLBACK2:
            self.target(name, value)
            return Result(None)

        if kind in SCALARS:
            return self.convert(self.type, value, token) >= (
                lambda x: Result(self.target.set(x))
            )

        # an empty value holds no pieces
        pieces = value.split(syntax.array_sep) if value else []
        if kind is Kind.SEQUENCE:
            elements = []
            for piece in pieces:
                result = self.convert(self.type, piece, token)
                if isinstance(result.get, ArgumentError):
                    return result
                elements.append(result.get)
            self.target.extend(elements)
            return Result(None)

        if kind is Kind.MAPPING:
            for piece in pieces:
                j = piece.find(syntax.assign_char)
                if j <= 0:
                    return Result(
                        IllegalArgumentError(
                            usage=f"Illegal argument {token}. Expected key{syntax.assign_char}value, got {piece!r}",
                            argument=piece,
                        )
                    )
                key = self.convert(self.key_type, piece[:j], token)
                item = key >= (
                    lambda k: self.convert(self.type, piece[j + 1 :], token)
                    >= (lambda v: Result((k, v)))
                )
                if isinstance(item.get, ArgumentError):
                    return Result(item.get)
                k, v = item.get
                self.target[k] = v
            return Result(None)

        return Result(
            UnsupportedDestinationError(
                usage=f"Don't know how to deal with destination {self!r}",
                destination=self,
            )
        )


def boolean(ref: Ref[bool]) -> Destination:
    return Destination(Kind.BOOL, ref, bool)


def integer(ref: Ref[int]) -> Destination:
    return Destination(Kind.INT, ref, int)


def floating(ref: Ref[float]) -> Destination:
    return Destination(Kind.FLOAT, ref, float)


def string(ref: Ref[str]) -> Destination:
    return Destination(Kind.STR, ref, str)


def enumeration(ref: Ref[Enum], enum: Type[Enum]) -> Destination:
    """
    >>> class Color(Enum):
    ...     no = 0
    ...     yes = 1
    ...
    >>> color = Var(Color.no)
    >>> enumeration(color, Color).apply("color", "--color", "yes", False, Syntax())
    Result(None)
    >>> color.value
    <Color.yes: 1>
    """
    return Destination(Kind.ENUM, ref, enum)


def sequence(target: List[Any], type: Callable[[str], Any] = str) -> Destination:
    return Destination(Kind.SEQUENCE, target, type)


def mapping(
    target: Dict[Any, Any],
    key_type: Callable[[str], Any] = str,
    value_type: Callable[[str], Any] = str,
) -> Destination:
    """
    >>> tuning = {}
    >>> mapping(tuning, value_type=float).apply("tune", "--tune", "alpha=0.5,beta=0.6", False, Syntax())
    Result(None)
    >>> tuning
    {'alpha': 0.5, 'beta': 0.6}
    """
    return Destination(Kind.MAPPING, target, value_type, key_type)


CALLBACKS = {0: Kind.CALLBACK0, 1: Kind.CALLBACK1, 2: Kind.CALLBACK2}


def arity(f: Callable[..., Any]) -> Result[int]:
    """
    Counts the positional parameters that ``f`` requires.

    >>> arity(lambda: None).get, arity(lambda o: None).get, arity(lambda o, v: None).get
    (0, 1, 2)
    """
    try:
        signature = inspect.signature(f)
    except (TypeError, ValueError) as e:
        return Result(
            UnsupportedDestinationError(
                usage=f"Cannot inspect callback {f!r}: {e}", destination=f
            )
        )
    positional = (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )
    required = [
        p
        for p in signature.parameters.values()
        if p.kind in positional and p.default is inspect.Parameter.empty
    ]
    if len(required) > 2:
        return Result(
            UnsupportedDestinationError(
                usage=f"Callbacks take at most two arguments. {f!r} requires {len(required)}",
                destination=f,
            )
        )
    return Result(len(required))


def callback(f: Callable[..., Any], n: Optional[int] = None) -> Result[Destination]:
    """
    Binds a callback taking no arguments, the option name, or the option name
    and its value. The number of arguments is read from the signature of ``f``
    unless ``n`` is given. The result can be passed to :py:func:`getopt
    <dollar_getopt.parser.getopt>` as it is; an error in it is reported when
    the options are parsed.

    >>> seen = []
    >>> callback(lambda option, value: seen.append((option, value))).get.kind
    <Kind.CALLBACK2: 'callback2'>
    >>> callback(print, 3).get.usage
    'Callbacks take at most two arguments, not 3'
    """
    count = Result(n) if n is not None else arity(f)
    return count >= (
        lambda i: Result(Destination(CALLBACKS[i], f))
        if i in CALLBACKS
        else Result(
            UnsupportedDestinationError(
                usage=f"Callbacks take at most two arguments, not {i}", destination=f
            )
        )
    )


def infer(target: Any) -> Result[Destination]:
    """
    Tags ``target`` from its runtime type.

    >>> infer(Var(False)).get.kind
    <Kind.BOOL: 'bool'>
    >>> infer(Var(1.5)).get.kind
    <Kind.FLOAT: 'float'>
    >>> infer([1, 2]).get.type
    <class 'int'>
    >>> infer({"a": 1.0}).get.kind
    <Kind.MAPPING: 'mapping'>
    >>> infer(lambda option: None).get.kind
    <Kind.CALLBACK1: 'callback1'>
    >>> infer(3).get.usage
    'Cannot bind an option to 3'

    Enumerations with a mixed-in type are still converted by member name:

    >>> from enum import IntEnum
    >>> class Level(IntEnum):
    ...     low = 0
    ...     high = 1
    ...
    >>> infer(Var(Level.low)).get.kind
    <Kind.ENUM: 'enum'>
    """
    if isinstance(target, Destination):
        return Result(target)
    if isinstance(target, Result):
        return target >= infer
    if isinstance(target, list):
        return Result(sequence(target, type(target[0]) if target else str))
    if isinstance(target, dict):
        if target:
            k, v = next(iter(target.items()))
            return Result(mapping(target, type(k), type(v)))
        return Result(mapping(target))
    if isinstance(target, Ref):
        current = target.get()
        # IntEnum is an int and bool is an int, so check them first
        if isinstance(current, Enum):
            return Result(enumeration(target, type(current)))
        if isinstance(current, bool):
            return Result(boolean(target))
        if isinstance(current, int):
            return Result(integer(target))
        if isinstance(current, float):
            return Result(floating(target))
        if isinstance(current, str):
            return Result(string(target))
    elif callable(target):
        return arity(target) >= (lambda i: Result(Destination(CALLBACKS[i], target)))
    return Result(
        UnsupportedDestinationError(
            usage=f"Cannot bind an option to {target!r}", destination=target
        )
    )
