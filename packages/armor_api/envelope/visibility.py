"""Error visibility filtering applied before a response is serialized.

In debug mode (level > 0) every entry passes through untouched. In
production mode (level 0):

- public entries pass through untouched;
- private key-value entries are dropped, and a single code-only sentinel is
  appended if any were dropped;
- every other private entry keeps its code and severity but loses its
  message.

Public always wins, so a public key-value entry is never dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from packages.armor_api.errors import KV_ERROR_CODE, ErrorEntry, Severity


@dataclass(frozen=True)
class FilterReport:
    """Filtered entries plus counters describing what was removed."""

    errors: tuple[ErrorEntry, ...]
    debug_mode: bool
    redacted: int = 0
    kv_suppressed: int = 0

    @property
    def kv_removed(self) -> bool:
        """Return ``True`` when key-value data was stripped out."""
        return self.kv_suppressed > 0


def kv_sentinel() -> ErrorEntry:
    """Return the code-only entry that marks removed key-value data."""
    return ErrorEntry(code=KV_ERROR_CODE, severity=Severity.DEBUG)


def filter_report(errors: Iterable[ErrorEntry], *, debug_level: int) -> FilterReport:
    """Filter ``errors`` for external exposure and report what changed."""
    entries = tuple(errors)
    if debug_level > 0:
        return FilterReport(errors=entries, debug_mode=True)

    visible: list[ErrorEntry] = []
    redacted = 0
    kv_suppressed = 0
    for entry in entries:
        if entry.public:
            visible.append(entry)
            continue

        if entry.code == KV_ERROR_CODE:
            kv_suppressed += 1
            continue

        if entry.has_message:
            redacted += 1
        visible.append(entry.redacted())

    if kv_suppressed:
        visible.append(kv_sentinel())

    return FilterReport(
        errors=tuple(visible),
        debug_mode=False,
        redacted=redacted,
        kv_suppressed=kv_suppressed,
    )


def filter_errors(errors: Iterable[ErrorEntry], *, debug_level: int) -> list[ErrorEntry]:
    """Return the entries of ``errors`` that may appear in a response."""
    return list(filter_report(errors, debug_level=debug_level).errors)
