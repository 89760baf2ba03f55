from __future__ import annotations

import sys
from functools import cmp_to_key
from typing import TypeVar, Generic, Any, Callable, Iterable, Iterator

from typing_extensions import Self

from .na import NA, is_na
from ..core.flatten import flatten_items
from ..utils.sequence_view import SequenceView

__all__ = ['Sequence']

T = TypeVar('T')
U = TypeVar('U')
A = TypeVar('A')

_MISSING: Any = object()

# Inferred element types whose no-argument constructor gives the zero value
_VALUE_TYPES = (bool, int, float, complex, str, bytes, list, tuple, dict)


def _relative(index: int, length: int) -> int:
    """Resolve a possibly negative (from the end) index and clamp it to [0, length]."""
    if index < 0:
        return max(length + index, 0)
    return min(index, length)


def _less_to_cmp(less: Callable[[Any, Any], bool]) -> Callable[[Any, Any], int]:
    def cmp(a: Any, b: Any) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return cmp


class Sequence(Generic[T]):
    """
    An ordered, mutable, homogeneous collection with JavaScript Array style methods.

    Mutators (push, pop, shift, unshift, concat, copy_within, filter, sort, reverse, fill, splice)
    change the sequence itself. Every other transform (to_sorted, to_reversed, to_spliced, slice,
    with_, map, flat_map, flat, copy) returns a new, independent sequence and leaves this one alone.

    Out of range reads degrade silently to the zero value of the element type, out of range
    copy-producing requests raise IndexError.
    """

    __slots__ = ('_items', '_element_type')

    def __init__(self, items: Iterable[T] | None = None, element_type: type[T] | None = None) -> None:
        """
        :param items: Initial elements, they are copied into the sequence
        :param element_type: The type of the elements. If given, every written value is checked
                             against it. If not given, it is inferred from the first element and
                             used only for the zero value.
        """
        self._element_type = element_type
        self._items: list[T] = [] if items is None else [self._check(v) for v in items]

    @classmethod
    def _wrap(cls, items: list[Any], element_type: type | None) -> Sequence:
        """Create a sequence owning ``items`` without copying or checking it."""
        seq = cls.__new__(cls)
        seq._items = items
        seq._element_type = element_type
        return seq

    @classmethod
    def from_string(cls, text: str) -> Sequence[str]:
        """
        Create a sequence of the characters of a string.

        :param text: The source string
        :return: A sequence of single character strings
        """
        return cls(list(text), str)

    @classmethod
    def from_iter(cls, items: Iterable[T], fn: Callable[[T], Any]) -> Sequence[T]:
        """
        Call ``fn`` with every item, then return a sequence of the items.

        :param items: The source items
        :param fn: Function called once for each item, its return value is ignored
        :return: A sequence of the original items
        """
        values = list(items)
        for v in values:
            fn(v)
        return cls(values)

    def _check(self, value: Any) -> Any:
        et = self._element_type
        if et is None or is_na(value):
            return value
        if et is float and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        if not isinstance(value, et):
            raise TypeError(f"Sequence of {et.__name__} cannot hold {type(value).__name__} value {value!r}")
        return value

    @property
    def element_type(self) -> type[T] | None:
        """
        The explicit element type, or the type of the first element if none was given.
        """
        if self._element_type is not None:
            return self._element_type
        for v in self._items:
            if not is_na(v):
                return type(v)
        return None

    @property
    def zero(self) -> T | NA[T]:
        """
        The zero value of the element type: ``element_type()`` if it can be called without
        arguments, otherwise NA.

        An inferred element type is only instantiated if it is a builtin value type.
        """
        et = self.element_type
        if et is None:
            return NA()
        if self._element_type is None and et not in _VALUE_TYPES:
            return NA(et)
        try:
            return et()
        except TypeError:
            return NA(et)

    #
    # Reading
    #

    def at(self, index: int) -> T | NA[T]:
        """
        Return the element at the specified index.

        :param index: Index of the element
        :return: The element, or the zero value if the index is out of range (negative included)
        """
        if 0 <= index < len(self._items):
            return self._items[index]
        return self.zero

    def index_of(self, value: T) -> int:
        """
        Return the index of the first element equal to ``value``, or -1.
        """
        for i, v in enumerate(self._items):
            if v == value:
                return i
        return -1

    def last_index_of(self, value: T) -> int:
        """
        Return the index of the last element equal to ``value``, or -1.
        """
        for i in range(len(self._items) - 1, -1, -1):
            if self._items[i] == value:
                return i
        return -1

    def includes(self, value: T) -> bool:
        """
        Return True if any element is equal to ``value``.
        """
        return any(v == value for v in self._items)

    def find(self, fn: Callable[[T], bool]) -> tuple[T | NA[T], bool]:
        """
        Find the first element satisfying the predicate.

        :param fn: Predicate
        :return: ``(element, True)``, or ``(zero value, False)`` if there is no such element
        """
        for v in self._items:
            if fn(v):
                return v, True
        return self.zero, False

    def find_last(self, fn: Callable[[T], bool]) -> tuple[T | NA[T], bool]:
        """
        Find the last element satisfying the predicate.

        :param fn: Predicate
        :return: ``(element, True)``, or ``(zero value, False)`` if there is no such element
        """
        for v in reversed(self._items):
            if fn(v):
                return v, True
        return self.zero, False

    def find_index(self, fn: Callable[[T], bool]) -> tuple[int, bool]:
        """
        Find the index of the first element satisfying the predicate.

        :param fn: Predicate
        :return: ``(index, True)``, or ``(-1, False)`` if there is no such element
        """
        for i, v in enumerate(self._items):
            if fn(v):
                return i, True
        return -1, False

    def find_last_index(self, fn: Callable[[T], bool]) -> tuple[int, bool]:
        """
        Find the index of the last element satisfying the predicate.

        :param fn: Predicate
        :return: ``(index, True)``, or ``(-1, False)`` if there is no such element
        """
        for i in range(len(self._items) - 1, -1, -1):
            if fn(self._items[i]):
                return i, True
        return -1, False

    def every(self, fn: Callable[[T], bool]) -> bool:
        """
        Return True if the predicate holds for every element.

        Stops at the first element failing the predicate. An empty sequence returns True.
        """
        for v in self._items:
            if not fn(v):
                return False
        return True

    def some(self, fn: Callable[[T], bool]) -> bool:
        """
        Return True if the predicate holds for at least one element.

        Stops at the first element satisfying the predicate. An empty sequence returns False.
        """
        for v in self._items:
            if fn(v):
                return True
        return False

    def for_each(self, fn: Callable[[T], Any]) -> None:
        """Call ``fn`` with every element in order."""
        for v in self._items:
            fn(v)

    def keys(self) -> list[int]:
        """
        Return the valid indices of the sequence.
        """
        return list(range(len(self._items)))

    def values(self) -> list[T]:
        """
        Return the elements as a new list.

        The list is an owning copy, modifying it does not modify the sequence. Use ``view()`` for
        an aliasing view.
        """
        return list(self._items)

    entries = values

    def view(self, start: int = 0, end: int | None = None) -> SequenceView[T]:
        """
        Return a borrowed view of ``[start, end)``.

        Writing through the view modifies this sequence and vice versa. Values written through the
        view are not type checked.

        :param start: Start index (inclusive)
        :param end: End index (exclusive), defaults to the length of the sequence
        :return: A view aliasing the elements of the sequence
        """
        return SequenceView(self._items)[start:end]  # type: ignore

    def join(self, separator: str = ",", max_length: int = sys.maxsize) -> str:
        """
        Concatenate the string representation of the elements, separated by ``separator``.

        :param separator: Separator to use
        :param max_length: Maximum length of the result
        :return: The joined string
        :raises OverflowError: If the result would be longer than ``max_length``
        """
        parts = [str(v) for v in self._items]
        length = sum(len(p) for p in parts) + len(separator) * max(len(parts) - 1, 0)
        if length > max_length:
            raise OverflowError(f"Joined string length {length} exceeds the maximum of {max_length}")
        return separator.join(parts)

    #
    # Mutation
    #

    def push(self, *values: T) -> int:
        """
        Append values to the end of the sequence.

        :return: The new length
        """
        checked = [self._check(v) for v in values]
        self._items.extend(checked)
        return len(self._items)

    append = push

    def unshift(self, *values: T) -> int:
        """
        Prepend values to the beginning of the sequence, keeping their order.

        :return: The new length
        """
        self._items[0:0] = [self._check(v) for v in values]
        return len(self._items)

    def pop(self) -> T | NA[T]:
        """
        Remove and return the last element.

        :return: The last element, or the zero value if the sequence is empty
        """
        if not self._items:
            return self.zero
        return self._items.pop()

    def shift(self) -> T | NA[T]:
        """
        Remove and return the first element.

        :return: The first element, or the zero value if the sequence is empty
        """
        if not self._items:
            return self.zero
        return self._items.pop(0)

    def concat(self, *lists: Iterable[T]) -> Self:
        """
        Append the elements of every given list (or sequence) to this sequence.

        The elements are checked before any of them is appended.

        :return: This sequence
        """
        checked = [self._check(v) for values in lists for v in values]
        self._items.extend(checked)
        return self

    def copy_within(self, target: int, start: int = 0, end: int | None = None) -> Self:
        """
        Copy the elements of ``[start, end)`` over the elements starting at ``target``.

        The length never changes, elements that would be copied past the end are dropped.
        Negative indices count from the end.

        :return: This sequence
        """
        length = len(self._items)
        target = _relative(target, length)
        start = _relative(start, length)
        end = length if end is None else _relative(end, length)
        count = min(end - start, length - target)
        if count > 0:
            self._items[target:target + count] = self._items[start:start + count]
        return self

    def filter(self, fn: Callable[[T], bool]) -> Sequence[T]:
        """
        Keep only the elements satisfying the predicate.

        This sequence is modified in place, and the retained elements are also returned as a new,
        independent sequence.

        :param fn: Predicate
        :return: A new sequence of the retained elements
        """
        self._items[:] = [v for v in self._items if fn(v)]
        return self._wrap(list(self._items), self._element_type)

    def sort(self, less: Callable[[T, T], bool] | None = None) -> Self:
        """
        Stable in-place sort.

        :param less: ``less(a, b)`` returns True if ``a`` must come before ``b``. If None,
                     the natural ``<`` ordering is used.
        :return: This sequence
        """
        if less is None:
            self._items.sort()
        else:
            self._items.sort(key=cmp_to_key(_less_to_cmp(less)))
        return self

    def reverse(self) -> Self:
        """
        Reverse the sequence in place.

        :return: This sequence
        """
        self._items.reverse()
        return self

    def fill(self, value: T, start: int = 0, end: int | None = None) -> bool:
        """
        Overwrite the elements of ``[start, end)`` with ``value``.

        ``end`` defaults to, and is clamped to, the length of the sequence. A start outside of
        ``[0, len)`` or a negative end is rejected: nothing is written and False is returned.

        :param value: The value to fill with
        :param start: Start index (inclusive)
        :param end: End index (exclusive)
        :return: True if the range was accepted, False otherwise
        """
        value = self._check(value)
        length = len(self._items)
        if start < 0 or start >= length:
            return False
        if end is None or end > length:
            end = length
        if end < 0:
            return False
        for i in range(start, end):
            self._items[i] = value
        return True

    def splice(self, start: int, delete_count: int | None = None, *items: T) -> Self:
        """
        Remove ``delete_count`` elements at ``start`` and insert ``items`` in their place, in place.

        ``seq.splice(1, 3, 99)`` on ``[1, 2, 3, 4, 5]`` gives ``[1, 99, 5]``.

        :param start: Start index, negative values count from the end. Clamped to ``[0, len]``.
        :param delete_count: Number of elements to remove, clamped to the remaining length.
                             If None, everything from start is removed.
        :param items: Values to insert at start
        :return: This sequence
        """
        length = len(self._items)
        start = _relative(start, length)
        if delete_count is None:
            delete_count = length - start
        delete_count = max(0, min(delete_count, length - start))
        self._items[start:start + delete_count] = [self._check(v) for v in items]
        return self

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = self._check(value)

    #
    # Copy-producing transforms
    #

    def copy(self) -> Sequence[T]:
        """Return a shallow copy."""
        return self._wrap(list(self._items), self._element_type)

    def to_sorted(self, less: Callable[[T, T], bool] | None = None) -> Sequence[T]:
        """
        Return a sorted copy, see ``sort()``.
        """
        return self.copy().sort(less)

    def to_reversed(self) -> Sequence[T]:
        """
        Return a reversed copy.
        """
        return self._wrap(self._items[::-1], self._element_type)

    def to_spliced(self, start: int, delete_count: int | None = None, *items: T) -> Sequence[T]:
        """
        Return a copy with ``delete_count`` elements removed at ``start`` and ``items`` inserted
        in their place, see ``splice()``.

        :return: A new sequence
        """
        return self.copy().splice(start, delete_count, *items)

    def slice(self, start: int = 0, end: int | None = None) -> Sequence[T]:
        """
        Return a copy of the elements of ``[start, end)``.

        :param start: Start index (inclusive)
        :param end: End index (exclusive), defaults to the length of the sequence
        :return: A new sequence
        :raises IndexError: If not ``0 <= start <= end <= len``
        """
        length = len(self._items)
        if end is None:
            end = length
        if not 0 <= start <= end <= length:
            raise IndexError(f"Slice [{start}:{end}] out of range for sequence of length {length}")
        return self._wrap(self._items[start:end], self._element_type)

    def with_(self, index: int, value: T) -> Sequence[T]:
        """
        Return a copy with the element at ``index`` replaced by ``value``.

        :raises IndexError: If not ``0 <= index < len``
        """
        length = len(self._items)
        if not 0 <= index < length:
            raise IndexError(f"Index {index} out of range for sequence of length {length}")
        result = self.copy()
        result._items[index] = self._check(value)
        return result

    def map(self, fn: Callable[[T], U]) -> Sequence[U]:
        """
        Return a new sequence with one ``fn(element)`` result per element.
        """
        return self._wrap([fn(v) for v in self._items], None)

    def flat_map(self, fn: Callable[[T], Iterable[U]]) -> Sequence[U]:
        """
        Return the concatenation of ``fn(element)`` for every element, in order.

        :param fn: Function returning an iterable of zero or more results per element
        :return: A new sequence
        """
        result: list[U] = []
        for v in self._items:
            result.extend(fn(v))
        return self._wrap(result, None)

    def flat(self, depth: int = 1) -> Sequence[Any]:
        """
        Return a new sequence with nested lists, tuples and sequences concatenated into it up to
        ``depth`` levels. Deeper nesting is kept as is, strings are never split.

        :param depth: Number of nesting levels to remove. 0 returns an identical copy.
        :return: A new sequence
        :raises ValueError: If depth is negative
        """
        if depth == 0:
            return self.copy()
        return self._wrap(flatten_items(self._items, depth), None)

    def reduce(self, fn: Callable[[A, T], A], initial: A = _MISSING) -> A:
        """
        Fold the elements from left to right with ``fn(accumulator, element)``.

        :param fn: Reducer function
        :param initial: Initial accumulator, defaults to the zero value
        :return: The accumulated value, the initial value for an empty sequence
        """
        acc = self.zero if initial is _MISSING else initial
        for v in self._items:
            acc = fn(acc, v)
        return acc

    def reduce_right(self, fn: Callable[[A, T], A], initial: A = _MISSING) -> A:
        """
        Fold the elements from right to left with ``fn(accumulator, element)``.

        :param fn: Reducer function
        :param initial: Initial accumulator, defaults to the zero value
        :return: The accumulated value, the initial value for an empty sequence
        """
        acc = self.zero if initial is _MISSING else initial
        for v in reversed(self._items):
            acc = fn(acc, v)
        return acc

    #
    # Python protocols
    #

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, value: Any) -> bool:
        return self.includes(value)

    def __getitem__(self, key: int | slice) -> T | Sequence[T]:
        if isinstance(key, slice):
            return self._wrap(self._items[key], self._element_type)
        return self._items[key]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Sequence):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"Sequence({self._items!r})"

    def __str__(self) -> str:
        return self.join(",")
