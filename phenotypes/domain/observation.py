"""
Presence/exclusion contracts for single features and collections of features.

Both contracts are abstract base classes with a structural `__subclasshook__`
(in the manner of `collections.abc`): a class that defines the required methods
is recognised by `isinstance`/`issubclass` without inheriting. Inheriting adds
the default methods.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

F = TypeVar("F")


def _defines(klass: type, *methods: str) -> bool:
    """True if every method is defined (and not blocked with None) somewhere in the MRO."""
    mro = klass.__mro__
    for method in methods:
        for base in mro:
            if method in base.__dict__:
                if base.__dict__[method] is None:
                    return False
                break
        else:
            return False
    return True


class Observable(ABC):
    """
    An entity that is either *present* or *excluded* in the investigated item.

    For instance, a phenotypic feature such as Polydactyly (HP:0010442) can either
    be present or excluded in the study subject.

    Invariant: exactly one of `is_present()` and `is_excluded()` holds. `is_excluded`
    defaults to the negation of `is_present`; implementers that override it must
    keep the two complementary.
    """

    __slots__ = ()

    @abstractmethod
    def is_present(self) -> bool:
        """Test if the feature was observed in one or more items."""
        raise NotImplementedError

    def is_excluded(self) -> bool:
        """Test if the feature was not observed in any of the items."""
        return not self.is_present()

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is Observable:
            return True if _defines(subclass, "is_present") else NotImplemented
        return NotImplemented


def is_excluded(item: Any) -> bool:
    """
    Exclusion query that also works for duck-typed observables.

    Uses the item's own `is_excluded` when it has one, and the negation of
    `is_present` otherwise.
    """
    method = getattr(item, "is_excluded", None)
    if method is None:
        return not item.is_present()
    return bool(method())


# Blanket conformance: any re-iterable sequence of observables


def present_features(features: Sequence[F]) -> Iterator[F]:
    """Lazily yield the features that were observed, in collection order."""
    return (f for f in features if f.is_present())


def excluded_features(features: Sequence[F]) -> Iterator[F]:
    """Lazily yield the features whose presence was specifically excluded, in collection order."""
    return (f for f in features if is_excluded(f))


def present_feature_count(features: Sequence[F]) -> int:
    return sum(1 for _ in present_features(features))


def excluded_feature_count(features: Sequence[F]) -> int:
    return sum(1 for _ in excluded_features(features))


class ObservableFeatures(ABC, Generic[F]):
    """
    Common functionality for containers of `Observable` features.

    Both iterators must be finite, preserve the container's order, and be
    restartable: each call returns a fresh iterator over the backing collection.
    """

    __slots__ = ()

    @abstractmethod
    def present_features(self) -> Iterator[F]:
        """Get an iterator over features that were observed in the investigated item."""
        raise NotImplementedError

    def present_feature_count(self) -> int:
        """Get the number of observed features."""
        return sum(1 for _ in self.present_features())

    @abstractmethod
    def excluded_features(self) -> Iterator[F]:
        """Get an iterator over features whose presence was specifically excluded."""
        raise NotImplementedError

    def excluded_feature_count(self) -> int:
        """Get the number of features whose presence was specifically excluded."""
        return sum(1 for _ in self.excluded_features())

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is ObservableFeatures:
            return True if _defines(subclass, "present_features", "excluded_features") else NotImplemented
        return NotImplemented


class Features(Sequence[F], ObservableFeatures[F]):
    """Immutable, ordered collection of observable features."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[F] = ()) -> None:
        self._items: tuple[F, ...] = tuple(items)

    @overload
    def __getitem__(self, index: int) -> F: ...

    @overload
    def __getitem__(self, index: slice) -> "Features[F]": ...

    def __getitem__(self, index: int | slice) -> "F | Features[F]":
        if isinstance(index, slice):
            return Features(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Features):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"Features({list(self._items)!r})"

    def present_features(self) -> Iterator[F]:
        return present_features(self._items)

    def excluded_features(self) -> Iterator[F]:
        return excluded_features(self._items)
