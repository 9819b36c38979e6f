"""
Defines the `Result` dataclass, representing success or failure of a parsing step.
"""
from dataclasses import dataclass
from typing import Callable, Type, TypeVar

from pytypeclass import Monad

from dollar_getopt.error import ArgumentError

A_co = TypeVar("A_co", covariant=True)
A = TypeVar("A")
B = TypeVar("B")


@dataclass
class Result(Monad[A_co]):
    """
    >>> Result(1) >= (lambda x: Result(x + 1))
    Result(2)
    >>> from dollar_getopt.error import MissingValueError
    >>> error = MissingValueError(usage="Missing value for argument --x.", missing="--x")
    >>> (Result(error) >= (lambda x: Result(x + 1))).get is error
    True
    """

    get: "A_co | ArgumentError"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({repr(self.get)})"

    def __ge__(self, f: Callable[[A_co], "Result[B]"]) -> "Result[B]":
        return self.bind(f)

    def bind(self, f: Callable[[A_co], "Result[B]"]) -> "Result[B]":  # type: ignore[override]
        x = self.get
        if isinstance(x, ArgumentError):
            return Result(x)
        return f(x)

    @classmethod
    def return_(cls: "Type[Result[A]]", a: A) -> "Result[A]":  # type: ignore[misc]
        return Result(a)

    def unwrap(self) -> A_co:
        """
        Returns the wrapped value or raises the wrapped error.

        >>> Result(3).unwrap()
        3
        """
        x = self.get
        if isinstance(x, ArgumentError):
            raise x
        return x
