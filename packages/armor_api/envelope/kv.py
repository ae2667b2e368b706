"""Key-value decoding from a response envelope's error entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from packages.armor_api.errors import (
    KV_ERROR_CODE,
    KV_SEPARATOR,
    EmptyEntryError,
    EmptyErrorListError,
    EmptyKeyValuesError,
    EmptyResponseError,
    MalformedEntryError,
)

if TYPE_CHECKING:
    from .envelope import ResponseEnvelope


def decode_key_values(envelope: "ResponseEnvelope | None") -> dict[str, str]:
    """Rebuild the key-value mapping carried by ``envelope``.

    Entries are read in order, so a later duplicate key overwrites an earlier
    one. A redaction sentinel (reserved code, empty message) raises
    ``EmptyEntryError``; an envelope with no reserved-code entries at all
    raises ``EmptyKeyValuesError``.
    """
    if envelope is None:
        raise EmptyResponseError(message="empty api response")

    if len(envelope.errors) == 0:
        raise EmptyErrorListError(message="response has no error entries")

    values: dict[str, str] = {}
    matched = False
    for index, entry in enumerate(envelope.errors):
        if entry.code != KV_ERROR_CODE:
            continue
        matched = True

        if not entry.message:
            raise EmptyEntryError(message=f"key-value entry {index} is empty", index=index)

        key, separator, value = entry.message.partition(KV_SEPARATOR)
        if not separator:
            raise MalformedEntryError(
                message=f"key-value entry {index} has no {KV_SEPARATOR!r} separator",
                index=index,
                entry_message=entry.message,
            )
        values[key] = value

    if not matched:
        raise EmptyKeyValuesError(message="response has no key-value entries")

    return values
