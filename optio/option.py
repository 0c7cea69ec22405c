from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class OptionType(Enum):
    NONE = 0
    SOME = 1


class UnwrapError(Exception):
    def __init__(self, message: str = "option is None"):
        super().__init__(message); self.message = message


@dataclass(frozen=True)
class Some(Generic[T]):
    value: T

    @property
    def type(self) -> OptionType: return OptionType.SOME

    def __repr__(self) -> str: return f"Some({self.value!r})"


class _NoneType:
    # Only ever instantiated once, below. copy/pickle hand back that instance.
    __slots__ = ()
    _instance: Optional["_NoneType"] = None

    def __new__(cls) -> "_NoneType":
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    @property
    def type(self) -> OptionType: return OptionType.NONE

    def __repr__(self) -> str: return "NONE"
    def __bool__(self) -> bool: return False
    def __reduce__(self) -> str: return "NONE"
    def __copy__(self) -> "_NoneType": return self
    def __deepcopy__(self, _memo: dict) -> "_NoneType": return self


NONE = _NoneType()

Option = Union[Some[T], _NoneType]


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE
