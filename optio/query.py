from __future__ import annotations
from typing import Any, Callable, TypeGuard, TypeVar

from .option import Option, OptionType, Some, _NoneType

T = TypeVar("T")


def is_some(option: Option[T]) -> TypeGuard[Some[T]]:
    """True if `option` holds a value. Narrows `option` to `Some` for type checkers."""
    return option.type is OptionType.SOME


def is_none(option: Option[Any]) -> TypeGuard[_NoneType]:
    """True if `option` is `NONE`."""
    return option.type is OptionType.NONE


def is_some_and(option: Option[T], predicate: Callable[[T], bool]) -> bool:
    if is_some(option):
        return bool(predicate(option.value))
    return False


def is_none_or(option: Option[T], predicate: Callable[[T], bool]) -> bool:
    if is_some(option):
        return bool(predicate(option.value))
    return True
