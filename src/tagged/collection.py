"""Folding sequences of tagged results."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

from src.tagged.normalize import normalize_input
from src.tagged.tag import OK, Tag, Tagged, ensure_tag


def collect_tagged(results: Iterable[Any], tag: Tag) -> Tagged:
    """Collect results into ``(tag, [payloads])``.

    The first result not tagged ``tag`` is returned instead, in canonical
    form, and everything after it is ignored.

        collect_tagged([(OK, 1), (OK, 1, 2), OK], OK)      # (OK, [1, (1, 2), ()])
        collect_tagged([OK, ERROR, (ERROR, 2)], OK)        # (ERROR, ())
    """
    ensure_tag(tag)
    values: list[Any] = []
    mismatch: Optional[Tagged] = None
    # The whole input is consumed even after a mismatch.
    for item in results:
        normalized = normalize_input(item)
        if mismatch is not None:
            continue
        if normalized.tag != tag:
            mismatch = normalized
        else:
            values.append(normalized.value)
    if mismatch is not None:
        return mismatch
    return Tagged(tag, values)


def collect(results: Iterable[Any]) -> Tagged:
    return collect_tagged(results, OK)


def group_by_tag(results: Iterable[Any]) -> dict[Tag, list[Any]]:
    """Group payloads by tag, keeping each group in input order."""
    groups: dict[Tag, list[Any]] = {}
    for item in results:
        normalized = normalize_input(item)
        groups.setdefault(normalized.tag, []).append(normalized.value)
    return groups
