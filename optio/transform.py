from __future__ import annotations
from typing import Callable, Tuple, TypeGuard, TypeVar, overload

from .option import NONE, Option, Some
from .query import is_none, is_some

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def map(option: Option[T], fn: Callable[[T], U]) -> Option[U]:
    if is_some(option):
        return Some(fn(option.value))
    return option


def map_or(option: Option[T], default: U, fn: Callable[[T], U]) -> U:
    if is_none(option):
        return default
    return fn(option.value)  # type: ignore[union-attr]


def map_or_else(option: Option[T], default_fn: Callable[[], U], fn: Callable[[T], U]) -> U:
    if is_none(option):
        return default_fn()
    return fn(option.value)  # type: ignore[union-attr]


@overload
def filter(option: Option[T], predicate: Callable[[T], TypeGuard[U]]) -> Option[U]: ...
@overload
def filter(option: Option[T], predicate: Callable[[T], bool]) -> Option[T]: ...
def filter(option, predicate):
    """Keep `option` only if its value satisfies `predicate`.

    A passing `Some` is returned as the same instance, not a copy. With a
    `TypeGuard` predicate the result type is narrowed accordingly.
    """
    if is_none(option):
        return option
    if predicate(option.value):
        return option
    return NONE


def flat(option: Option[Option[T]]) -> Option[T]:
    if is_some(option):
        return option.value
    return option


def zip(option: Option[T], other: Option[U]) -> Option[Tuple[T, U]]:
    if is_some(option) and is_some(other):
        return Some((option.value, other.value))
    return NONE


def zip_with(option: Option[T], other: Option[U], fn: Callable[[T, U], V]) -> Option[V]:
    if is_some(option) and is_some(other):
        return Some(fn(option.value, other.value))
    return NONE


def inspect(option: Option[T], fn: Callable[[T], object]) -> Option[T]:
    # fn is for side effects only; its result is discarded
    if is_some(option):
        fn(option.value)
    return option
