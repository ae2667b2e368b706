"""Capability interface for objects that contribute standing response errors."""

from __future__ import annotations

from typing import Iterable, Iterator, Protocol, Sequence, runtime_checkable

from packages.armor_api.errors import ErrorEntry


@runtime_checkable
class ResponseErrorer(Protocol):
    """Anything holding error entries that must ride along with a response."""

    def response_errors(self) -> Sequence[ErrorEntry]:
        """Return the standing error entries in order."""
        ...


class ErrorCollector:
    """Ordered accumulator of error entries, e.g. from validation passes."""

    def __init__(self, errors: Iterable[ErrorEntry] = ()) -> None:
        self._errors: list[ErrorEntry] = list(errors)

    def add(self, entry: ErrorEntry) -> None:
        self._errors.append(entry)

    def extend(self, entries: Iterable[ErrorEntry]) -> None:
        self._errors.extend(entries)

    def response_errors(self) -> tuple[ErrorEntry, ...]:
        return tuple(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ErrorEntry]:
        return iter(tuple(self._errors))
