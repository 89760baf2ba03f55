from __future__ import annotations
from typing import TypeVar, Generic, MutableSequence, Iterator, Any

T = TypeVar('T')


class SequenceView(Generic[T]):
    """
    A borrowed view over a range of a list

    Writing through the view modifies the underlying list, and changes of the list are visible
    through the view. This is what ``Sequence.view()`` returns when aliasing is wanted, every other
    accessor of ``Sequence`` hands out owning copies.
    """

    __slots__ = ('sequence', 'range')

    def __init__(self, sequence: MutableSequence[T], range_object: range | None = None) -> None:
        if range_object is None:
            range_object = range(len(sequence))
        self.range = range_object
        self.sequence = sequence

    def __getitem__(self, key: int | slice) -> T | SequenceView[T]:
        if isinstance(key, slice):
            return SequenceView(self.sequence, self.range[key])
        return self.sequence[self.range[key]]

    def __setitem__(self, key: int, value: T) -> None:
        self.sequence[self.range[key]] = value

    def __len__(self) -> int:
        return len(self.range)

    def __iter__(self) -> Iterator[T]:
        for i in self.range:
            if i < len(self.sequence):
                yield self.sequence[i]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SequenceView):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def index(self, value: T) -> int:
        """Return index of first occurrence of value within the view."""
        for i, idx in enumerate(self.range):
            if idx < len(self.sequence) and self.sequence[idx] == value:
                return i
        raise ValueError(f"{value!r} is not in SequenceView")

    def reverse(self) -> None:
        """Reverse elements within the view."""
        indices = list(self.range)
        values = [self.sequence[i] for i in indices]
        values.reverse()
        for idx, value in zip(indices, values):
            self.sequence[idx] = value

    def sort(self, *, key=None, reverse=False) -> None:
        """Sort elements within the view."""
        indices = list(self.range)
        values = [self.sequence[i] for i in indices]
        values.sort(key=key, reverse=reverse)
        for idx, value in zip(indices, values):
            self.sequence[idx] = value

    def tolist(self) -> list[T]:
        """Owning copy of the viewed elements."""
        return list(self)

    def __repr__(self) -> str:
        return f"SequenceView({self.sequence!r}, {self.range!r})"

    def __str__(self) -> str:
        return str(list(self))
