from __future__ import annotations
from typing import Any, Callable, TypeVar

from .option import NONE, Option, Some
from .query import is_none, is_some

T = TypeVar("T")
U = TypeVar("U")


# Present counts as true, NONE as false.

def or_(option: Option[T], optb: Option[T]) -> Option[T]:
    if is_some(option):
        return option
    return optb


def or_else(option: Option[T], fn: Callable[[], Option[T]]) -> Option[T]:
    if is_some(option):
        return option
    return fn()


def and_(option: Option[Any], optb: Option[U]) -> Option[U]:
    if is_none(option):
        return option
    return optb


def and_then(option: Option[T], fn: Callable[[T], U]) -> Option[U]:
    """`Some(fn(value))` if `option` is `Some`, otherwise `NONE`.

    The result of `fn` is always wrapped, even when it is itself an option;
    use `flat_map` to chain functions that already return options.
    """
    if is_some(option):
        return Some(fn(option.value))
    return option


def flat_map(option: Option[T], fn: Callable[[T], Option[U]]) -> Option[U]:
    if is_some(option):
        return fn(option.value)
    return option


def xor(option: Option[T], optb: Option[T]) -> Option[T]:
    """`Some` if exactly one of `option`, `optb` is `Some`, otherwise `NONE`."""
    if is_some(option):
        if is_some(optb):
            return NONE
        return option
    return optb
