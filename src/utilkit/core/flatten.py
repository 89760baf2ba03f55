from typing import Any, Iterable

from ..utils.sequence_view import SequenceView

__all__ = ['flatten', 'flatten_items', 'is_nested']


def is_nested(value: Any) -> bool:
    """
    Check if a value is a sequence that flattening descends into.
    Strings and bytes are always leaves.

    :param value: The value to check
    :return: True if the value is a list, tuple, SequenceView or Sequence
    """
    # Import Sequence here to avoid circular imports
    from ..types.sequence import Sequence

    return isinstance(value, (list, tuple, SequenceView, Sequence))


def flatten(value: Any, depth: int) -> list[Any]:
    """
    Flatten a (possibly nested) value up to ``depth`` levels.

    If depth is exhausted, or the value is not nested, the value is a single leaf. Otherwise every
    child is flattened with ``depth - 1`` and the results are concatenated in order.

    :param value: The value to flatten
    :param depth: Number of nesting levels still allowed to be removed
    :return: A list of the leaves
    """
    if depth <= 0 or not is_nested(value):
        return [value]

    result: list[Any] = []
    for child in value:
        result.extend(flatten(child, depth - 1))
    return result


def flatten_items(items: Iterable[Any], depth: int) -> list[Any]:
    """
    Flatten every top-level item of ``items`` by ``depth`` levels.

    ``flatten_items(items, 0)`` is a plain copy of ``items``.

    :param items: The elements of a sequence
    :param depth: Number of nesting levels to remove, must be >= 0
    :return: New list of the flattened elements
    :raises ValueError: If depth is negative
    """
    if depth < 0:
        raise ValueError(f"Flatten depth must be >= 0, got {depth}")

    result: list[Any] = []
    for item in items:
        result.extend(flatten(item, depth))
    return result
