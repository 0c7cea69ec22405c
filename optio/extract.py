from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from .logger import get_logger
from .option import Option, UnwrapError
from .query import is_some

T = TypeVar("T")
U = TypeVar("U")


def unwrap(option: Option[T]) -> T:
    """Return the contained value.

    Raises `UnwrapError("option is None")` on `NONE`; use it only where absence
    is a programming error.

        >>> unwrap(Some(0))
        0
    """
    if is_some(option):
        return option.value
    get_logger().debug("unwrap called on NONE", op="unwrap", error=UnwrapError.__name__)
    raise UnwrapError("option is None")


def unwrap_or(option: Option[T], default: T) -> T:
    """Return the contained value, otherwise `default`.

    `default` is evaluated by the caller; pass a callable to `unwrap_or_else`
    when it is expensive to build.
    """
    if is_some(option):
        return option.value
    return default


def unwrap_or_else(option: Option[T], fn: Callable[[], T]) -> T:
    """Return the contained value, otherwise compute one with `fn()`."""
    if is_some(option):
        return option.value
    return fn()


def expect(option: Option[T], message: str, error: Callable[[str], BaseException] = UnwrapError) -> T:
    """Return the contained value, otherwise raise `error(message)`.

        >>> expect(NONE, "port is required", KeyError)
        Traceback (most recent call last):
        ...
        KeyError: 'port is required'
    """
    if is_some(option):
        return option.value
    exc = error(message)
    get_logger().debug(message, op="expect", error=type(exc).__name__)
    raise exc


@dataclass(frozen=True)
class Matcher(Generic[T, U]):
    some: Callable[[T], U]
    none: Callable[[], U]


def match(option: Option[T], matcher: Matcher[T, U]) -> U:
    """Call `matcher.some(value)` if `option` is `Some`, otherwise `matcher.none()`."""
    if is_some(option):
        return matcher.some(option.value)
    return matcher.none()


def to_nullable(option: Option[T]) -> Optional[T]:
    return option.value if is_some(option) else None
