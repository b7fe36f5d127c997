"""
Free monoid on annotated string slices

A FreeMonoid keeps one contiguous text store and an ordered list of labels,
each label pairing a tag with the range of the store it annotates. Buffers
combine with ``+`` (associative, the empty buffer is the identity), which is
how independently built document fragments are joined.

Example:
    >>> m = FreeMonoid().push('a', "string ").push('b', "more string")
    >>> [(tag, text) for tag, text in m]
    [('a', 'string '), ('b', 'more string')]
"""

from typing import Generic, Iterator, List, Tuple, TypeVar

T = TypeVar("T")


class FreeMonoid(Generic[T]):
    """
    Append-only sequence of (tag, text) fragments backed by one text store

    Attributes:
        labels: Ordered (range, tag) pairs; ranges are contiguous and
                increasing, so their texts concatenate to the full store
    """

    def __init__(self) -> None:
        self._chunks: List[str] = []
        self._length = 0
        self.labels: List[Tuple[range, T]] = []

    @property
    def payload(self) -> str:
        """Full text store"""
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def __len__(self) -> int:
        """Length of the stored text, structural tags do not count"""
        return self._length

    def is_empty(self) -> bool:
        """True when there is neither text nor labels"""
        return self._length == 0 and not self.labels

    def clear(self) -> None:
        """Drop all text and labels"""
        self._chunks = []
        self._length = 0
        self.labels = []

    def push(self, tag: T, text: str) -> "FreeMonoid[T]":
        """
        Append an annotated string slice

        Args:
            tag: Annotation for the slice
            text: Slice text, may be empty for structural tags

        Returns:
            self, so pushes can be chained
        """
        start = self._length
        if text:
            self._chunks.append(text)
            self._length += len(text)
        self.labels.append((range(start, self._length), tag))
        return self

    def iter(self) -> Iterator[Tuple[T, str]]:
        """Iterate over (tag, text) fragments in insertion order"""
        store = self.payload
        for span, tag in self.labels:
            yield tag, store[span.start:span.stop]

    def __iter__(self) -> Iterator[Tuple[T, str]]:
        return self.iter()

    def __iadd__(self, other: "FreeMonoid[T]") -> "FreeMonoid[T]":
        """Append other's text and labels in place, shifting other's ranges"""
        if not isinstance(other, FreeMonoid):
            return NotImplemented
        offset = self._length
        store = other.payload
        labels = list(other.labels)
        if store:
            self._chunks.append(store)
            self._length += len(store)
        self.labels.extend(
            (range(span.start + offset, span.stop + offset), tag) for span, tag in labels
        )
        return self

    def concat(self, other: "FreeMonoid[T]") -> "FreeMonoid[T]":
        """Return a new buffer holding self followed by other, inputs untouched"""
        result: FreeMonoid[T] = self.copy()
        result += other
        return result

    def __add__(self, other: "FreeMonoid[T]") -> "FreeMonoid[T]":
        if not isinstance(other, FreeMonoid):
            return NotImplemented
        return self.concat(other)

    def copy(self) -> "FreeMonoid[T]":
        """Shallow copy; tags are immutable so sharing them is safe"""
        result: FreeMonoid[T] = type(self)()
        store = self.payload
        if store:
            result._chunks = [store]
        result._length = self._length
        result.labels = list(self.labels)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FreeMonoid):
            return NotImplemented
        return self.payload == other.payload and self.labels == other.labels

    def __repr__(self) -> str:
        return f"FreeMonoid({list(self.iter())!r})"
