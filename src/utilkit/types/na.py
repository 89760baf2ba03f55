from __future__ import annotations
from typing import Any, TypeVar, Generic, Type

__all__ = ['NA', 'is_na']

T = TypeVar('T')


class NA(Generic[T]):
    """
    Class representing NA (Not Available) values.

    It is the zero value of sequences whose element type has no default constructor,
    and of untyped empty sequences.
    """
    __slots__ = ('type',)

    _type_cache: dict[Type, NA] = {}

    # noinspection PyShadowingBuiltins
    def __new__(cls, type: Type[T] | None = None) -> NA[T]:
        try:
            # One instance per element type
            return cls._type_cache[type]
        except KeyError:
            na = super().__new__(cls)
            cls._type_cache[type] = na
            return na
        except TypeError:
            # Unhashable type parameter, don't cache
            return super().__new__(cls)

    # noinspection PyShadowingBuiltins
    def __init__(self, type: Type[T] | None = None) -> None:
        self.type = type

    def __repr__(self) -> str:
        if self.type is None:
            return "NA"
        return f"NA[{getattr(self.type, '__name__', self.type)}]"

    def __str__(self) -> str:
        return ""

    def __format__(self, format_spec: str) -> str:
        if format_spec:
            return "NaN"
        return ""

    def __hash__(self) -> int:
        return hash((NA, self.type))

    def __bool__(self) -> bool:
        return False

    #
    # Arithmetic propagates NA
    #

    def __neg__(self) -> NA[T]:
        return self

    def __abs__(self) -> NA[T]:
        return self

    def __add__(self, _: Any) -> NA[T]:
        return self

    def __radd__(self, _: Any) -> NA[T]:
        return self

    def __sub__(self, _: Any) -> NA[T]:
        return self

    def __rsub__(self, _: Any) -> NA[T]:
        return self

    def __mul__(self, _: Any) -> NA[T]:
        return self

    def __rmul__(self, _: Any) -> NA[T]:
        return self

    def __truediv__(self, _: Any) -> NA[T]:
        return self

    def __rtruediv__(self, _: Any) -> NA[T]:
        return self

    #
    # All comparisons should be false
    #

    def __eq__(self, _: Any) -> bool:
        return False

    def __ne__(self, _: Any) -> bool:
        return True

    def __gt__(self, _: Any) -> bool:
        return False

    def __lt__(self, _: Any) -> bool:
        return False

    def __le__(self, _: Any) -> bool:
        return False

    def __ge__(self, _: Any) -> bool:
        return False


def is_na(value: Any) -> bool:
    """Check if value is NA."""
    return isinstance(value, NA)
