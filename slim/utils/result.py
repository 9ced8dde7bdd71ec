# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
A small `Result` type modeled after Rust's, used as the return channel of every encode and decode operation.

A successful call returns `Ok(value)`, a failed one returns `Err(error)`. Failures are values, not exceptions, so a
malformed stream never raises: the caller decides whether to inspect, map, propagate or raise.

>>> r: Result[int, str] = Ok(100)
>>> r.map(lambda x: x + 1)
Ok(101)
>>> Err('boom').unwrap_or(0)
0

Inside a function decorated with `propagate_result`, `unwrap_or_propagate()` behaves like Rust's `?` operator:

>>> @propagate_result
... def add(a: Result[int, str], b: Result[int, str]) -> Result[int, str]:
...     return Ok(a.unwrap_or_propagate() + b.unwrap_or_propagate())
>>> add(Ok(1), Ok(2))
Ok(3)
>>> add(Ok(1), Err('missing'))
Err('missing')
"""


from __future__ import annotations

import functools
import traceback
from typing import Any, Callable, Generic, Literal, NoReturn, ParamSpec, TypeAlias, TypeVar

T = TypeVar('T', covariant=True)  # Success type
E = TypeVar('E', covariant=True)  # Error type
U = TypeVar('U')
F = TypeVar('F')
P = ParamSpec('P')


class Ok(Generic[T]):
    """ The outcome of an operation that succeeded, holding its return value.
    """

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Ok({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Ok, self._value))

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, f'unwrap_err() called on {self!r}')

    def unwrap_or(self, _default: Any) -> T:
        return self._value

    def unwrap_or_raise_another(self, _exc_class: Callable[[Any], BaseException]) -> T:
        return self._value

    def unwrap_or_propagate(self) -> T:
        return self._value

    def map(self, op: Callable[[T], U]) -> Ok[U]:
        """Apply `op` to the value."""
        return Ok(op(self._value))

    def map_err(self, _op: Callable[[Any], Any]) -> Ok[T]:
        return self


class Err(Generic[E]):
    """ The outcome of an operation that failed, holding the error.

    When built inside an `except` block with `cause=exc`, the formatted traceback of the exception is kept in
    `traceback`, so a failure that was turned into a plain error value can still be logged in full.
    """

    __slots__ = ('_value', 'traceback')
    __match_args__ = ('_value',)

    def __init__(self, value: E, cause: BaseException | None = None) -> None:
        self._value = value
        self.traceback: str | None = None
        if cause is not None:
            assert cause.__traceback__ is not None, 'cause must only be used from a try-except context'
            self.traceback = ''.join(traceback.format_exception(cause))

    def __repr__(self) -> str:
        return f'Err({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Err) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Err, self._value))

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError(self, f'unwrap() called on {self!r}')

    def unwrap_err(self) -> E:
        return self._value

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_raise_another(self, exc_class: Callable[[E], BaseException]) -> NoReturn:
        """Raise `exc_class(error)`, for callers that prefer exceptions."""
        raise exc_class(self._value)

    def unwrap_or_propagate(self) -> NoReturn:
        """Make the enclosing `propagate_result` function return this `Err`."""
        raise _ResultPropagation(self)

    def map(self, _op: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, op: Callable[[E], F]) -> Err[F]:
        """Apply `op` to the error."""
        return Err(op(self._value))


Result: TypeAlias = Ok[T] | Err[E]


class UnwrapError(Exception):
    """ Raised when unwrapping the wrong arm of a `Result`, which is always a programming error.

    The offending `Result` is kept in `result`.
    """

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        super().__init__(message)
        self.result = result


class _ResultPropagation(Exception):
    def __init__(self, err: Err[Any]) -> None:
        super().__init__('unwrap_or_propagate() used outside of a function decorated with @propagate_result')
        self.err = err


def propagate_result(f: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
    """ Decorator that makes `unwrap_or_propagate()` return early from `f` with the `Err` it was called on.
    """
    @functools.wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        try:
            return f(*args, **kwargs)
        except _ResultPropagation as e:
            return e.err

    return wrapper
