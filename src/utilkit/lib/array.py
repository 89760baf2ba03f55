"""
Function style access to sequences, every function takes the sequence as its first argument
"""
from typing import TypeVar, Any, Callable, Iterable

import builtins

from typing_extensions import SupportsIndex

from ..types.na import NA
from ..types.sequence import Sequence
from . import log

T = TypeVar('T')
U = TypeVar('U')

_MISSING: Any = object()

__all__ = [
    'concat',
    'copy',
    'every',
    'fill',
    'filter',
    'find',
    'find_index',
    'flat',
    'flat_map',
    'from_items',
    'from_string',
    'get',
    'includes',
    'indexof',
    'join',
    'lastindexof',
    'map',
    'new',
    'pop',
    'push',
    'reduce',
    'reverse',
    'set',
    'shift',
    'size',
    'slice',
    'some',
    'sort',
    'sort_indices',
    'splice',
    'to_spliced',
    'unshift',
]


# noinspection PyShadowingNames
def new(size: int = 0, initial_value: T | NA[T] = NA(), element_type: type[T] | None = None) -> Sequence[T]:
    """
    Creates a new sequence of the specified size, with each element initialized to the specified value.

    :param size: Size of the new sequence
    :param initial_value: Initial value to set for each element
    :param element_type: Type of the elements, enforced on every write if given
    :return: New sequence of the specified size
    """
    assert size >= 0, "Size must be >=0!"
    return Sequence([initial_value] * size, element_type)


def from_items(*items: T) -> Sequence[T]:
    """
    Returns a sequence containing the specified elements.
    NOTE: this is `Array.from()` in JavaScript, but `from` is a reserved keyword in Python

    :param items: Elements to include in the sequence
    :return: Sequence containing the specified elements
    """
    return Sequence(items)


def from_string(text: str) -> Sequence[str]:
    """
    Returns a sequence of the characters of a string.

    :param text: Source string
    :return: Sequence of single character strings
    """
    return Sequence.from_string(text)


# noinspection PyShadowingBuiltins
def concat(id1: Sequence[T], id2: Iterable[T]) -> Sequence[T]:
    """
    Appends the elements of the second sequence to the first one.

    :param id1: First sequence, modified in place
    :param id2: Second sequence or list
    :return: The first sequence
    """
    return id1.concat(id2)


# noinspection PyShadowingBuiltins
def copy(id: Sequence[T]) -> Sequence[T]:
    """
    Returns a shallow copy of the sequence.

    :param id: Input sequence
    :return: Shallow copy of the sequence
    """
    return id.copy()


# noinspection PyShadowingBuiltins
def every(id: Sequence[T], fn: Callable[[T], bool] = bool) -> bool:
    """
    Returns true if the predicate holds for all elements, false otherwise.

    :param id: Input sequence
    :param fn: Predicate, defaults to the truthiness of the elements
    :return: True if all elements pass
    """
    return id.every(fn)


# noinspection PyShadowingBuiltins
def fill(id: Sequence[T], value: T, index_from: int = 0, index_to: int | None = None) -> bool:
    """
    Fills the elements in the sequence with the specified value.
    A rejected range is logged as a warning and leaves the sequence unchanged.

    :param id: Input sequence
    :param value: Value to fill
    :param index_from: Index to start filling from
    :param index_to: Index to stop filling at, defaults to the end of the sequence
    :return: True if the sequence was filled
    """
    if id.fill(value, index_from, index_to):
        return True
    log.warning("fill(): range [%s:%s] rejected for sequence of length %d",
                index_from, index_to, len(id))
    return False


# noinspection PyShadowingBuiltins
def filter(id: Sequence[T], fn: Callable[[T], bool]) -> Sequence[T]:
    """
    Keeps only the elements satisfying the predicate, in place.

    :param id: Input sequence
    :param fn: Predicate
    :return: New sequence of the retained elements
    """
    return id.filter(fn)


# noinspection PyShadowingBuiltins
def find(id: Sequence[T], fn: Callable[[T], bool]) -> T | NA[T]:
    """
    Returns the first element satisfying the predicate.

    :param id: Input sequence
    :param fn: Predicate
    :return: The element, or the zero value of the sequence if not found
    """
    return id.find(fn)[0]


# noinspection PyShadowingBuiltins
def find_index(id: Sequence[T], fn: Callable[[T], bool]) -> int:
    """
    Returns the index of the first element satisfying the predicate.

    :param id: Input sequence
    :param fn: Predicate
    :return: Index of the element, or -1 if not found
    """
    return id.find_index(fn)[0]


# noinspection PyShadowingBuiltins
def flat(id: Sequence[Any], depth: int = 1) -> Sequence[Any]:
    """
    Returns a new sequence with the nested sequences concatenated up to the specified depth.

    :param id: Input sequence
    :param depth: Number of nesting levels to remove
    :return: New flattened sequence
    """
    return id.flat(depth)


# noinspection PyShadowingBuiltins
def flat_map(id: Sequence[T], fn: Callable[[T], Iterable[U]]) -> Sequence[U]:
    """
    Returns the concatenation of the results of the function for every element.

    :param id: Input sequence
    :param fn: Function returning zero or more results per element
    :return: New sequence
    """
    return id.flat_map(fn)


# noinspection PyShadowingBuiltins
def get(id: Sequence[T], index: int) -> T:
    """
    Returns the element at the specified index.

    :param id: Input sequence
    :param index: Index of the element to return
    :return: Element at the specified index, the zero value if out of range
    """
    return id.at(index)


# noinspection PyShadowingBuiltins
def includes(id: Sequence[T], value: T) -> bool:
    """
    Returns true if the sequence contains the specified value, false otherwise.

    :param id: Input sequence
    :param value: Value to search for
    :return: True if the sequence contains the specified value
    """
    return id.includes(value)


# noinspection PyShadowingBuiltins
def indexof(id: Sequence[T], value: T) -> int:
    """
    Returns the index of the first occurrence of the specified value, or -1.

    :param id: Input sequence
    :param value: Value to search for
    :return: Index of the first occurrence of the specified value
    """
    return id.index_of(value)


# noinspection PyShadowingBuiltins
def join(id: Sequence[Any], separator: str = ",") -> str:
    """
    Concatenates the elements into a single string, separated by the specified separator.

    :param id: Input sequence
    :param separator: Separator to use
    :return: String containing the concatenated elements
    """
    return id.join(separator)


# noinspection PyShadowingBuiltins
def lastindexof(id: Sequence[T], value: T) -> int:
    """
    Returns the index of the last occurrence of the specified value, or -1.

    :param id: Input sequence
    :param value: Value to search for
    :return: Index of the last occurrence of the specified value
    """
    return id.last_index_of(value)


# noinspection PyShadowingBuiltins
def map(id: Sequence[T], fn: Callable[[T], U]) -> Sequence[U]:
    """
    Returns a new sequence with the result of the function for every element.

    :param id: Input sequence
    :param fn: Function applied to every element
    :return: New sequence
    """
    return id.map(fn)


# noinspection PyShadowingBuiltins
def pop(id: Sequence[T]) -> T:
    """
    Removes the last element from the sequence and returns it.

    :param id: Input sequence
    :return: Last element, or the zero value if the sequence is empty
    """
    return id.pop()


# noinspection PyShadowingBuiltins
def push(id: Sequence[T], value: T) -> None:
    """
    Appends the specified value to the end of the sequence.

    :param id: Input sequence
    :param value: Value to append
    """
    id.push(value)


# noinspection PyShadowingBuiltins
def reduce(id: Sequence[T], fn: Callable[[Any, T], Any], initial: Any = _MISSING) -> Any:
    """
    Folds the elements from left to right.

    :param id: Input sequence
    :param fn: Reducer function ``fn(accumulator, element)``
    :param initial: Initial accumulator, the zero value of the sequence if not given
    :return: The accumulated value
    """
    if initial is _MISSING:
        return id.reduce(fn)
    return id.reduce(fn, initial)


# noinspection PyShadowingBuiltins
def reverse(id: Sequence[T]) -> None:
    """
    Reverses the order of the elements in the sequence.

    :param id: Input sequence
    """
    id.reverse()


# noinspection PyShadowingBuiltins
def set(id: Sequence[T], index: int, value: T) -> None:
    """
    Sets the value of the element at the specified index.

    :param id: Input sequence
    :param index: Index of the element to set
    :param value: Value to set
    :raises IndexError: If the index is out of range
    """
    if not 0 <= index < len(id):
        raise IndexError(f"Index {index} out of range for sequence of length {len(id)}")
    id[index] = value


# noinspection PyShadowingBuiltins
def shift(id: Sequence[T]) -> T:
    """
    Removes the first element from the sequence and returns it.

    :param id: Input sequence
    :return: First element, or the zero value if the sequence is empty
    """
    return id.shift()


# noinspection PyShadowingBuiltins
def size(id: Sequence[Any]) -> int:
    """
    Returns the number of elements in the sequence.

    :param id: Input sequence
    :return: Number of elements
    """
    return len(id)


# noinspection PyShadowingBuiltins
def slice(id: Sequence[T], index_from: int, index_to: int) -> Sequence[T]:
    """
    Returns a copy of a part of the sequence.
    Use ``Sequence.view()`` for a slice that writes through to the original.

    :param id: Input sequence
    :param index_from: Index to start the sub-sequence from
    :param index_to: Index to end the sub-sequence at
    :return: New sequence
    :raises IndexError: If the range is out of bounds
    """
    return id.slice(index_from, index_to)


# noinspection PyShadowingBuiltins
def some(id: Sequence[T], fn: Callable[[T], bool] = bool) -> bool:
    """
    Returns true if the predicate holds for at least one element, false otherwise.

    :param id: Input sequence
    :param fn: Predicate, defaults to the truthiness of the elements
    :return: True if at least one element passes
    """
    return id.some(fn)


# noinspection PyShadowingBuiltins
def sort(id: Sequence[T], less: Callable[[T, T], bool] | None = None) -> None:
    """
    Sorts the elements of the sequence in place, stable.

    :param id: Input sequence
    :param less: Strict ordering predicate, the natural ordering if None
    """
    id.sort(less)


# noinspection PyShadowingBuiltins
def sort_indices(id: Sequence[T], descending: bool = False) -> list[SupportsIndex]:
    """
    Returns a list of indices which, when used to index the original sequence, will access its elements
    in their sorted order. It does not modify the original sequence.

    :param id: Input sequence
    :param descending: Sort in descending order
    :return: List of indices to access the elements in their sorted order
    """
    indices = sorted(builtins.range(len(id)), key=id.__getitem__)  # type: ignore
    if descending:
        indices.reverse()
    return indices


# noinspection PyShadowingBuiltins
def splice(id: Sequence[T], index: int, delete_count: int, value: T) -> Sequence[T]:
    """
    Replaces ``delete_count`` elements at the specified index with a single value, in place.

    :param id: Input sequence
    :param index: Start index, negative values count from the end
    :param delete_count: Number of elements to remove
    :param value: Value to insert
    :return: The modified sequence
    """
    return id.splice(index, delete_count, value)


# noinspection PyShadowingBuiltins
def to_spliced(id: Sequence[T], start: int, delete_count: int | None = None, *items: T) -> Sequence[T]:
    """
    Returns a copy with elements removed and/or inserted at the specified index.

    :param id: Input sequence
    :param start: Start index, negative values count from the end
    :param delete_count: Number of elements to remove, all remaining if None
    :param items: Values to insert
    :return: New sequence
    """
    return id.to_spliced(start, delete_count, *items)


# noinspection PyShadowingBuiltins
def unshift(id: Sequence[T], value: T) -> None:
    """
    Prepends the specified value to the beginning of the sequence.

    :param id: Input sequence
    :param value: Value to prepend
    """
    id.unshift(value)
