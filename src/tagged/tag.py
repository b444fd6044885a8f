"""Tag symbols for tagged results.

A tag is a small immutable symbol. Results are either a bare tag or a tuple
whose first slot is a tag, e.g. ``OK``, ``(OK, 1)`` or ``(ERROR, "boom")``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple

from src.tagged.errors import InvalidTagError


@dataclass(frozen=True, slots=True)
class Tag:
    """A named discriminator. Tags with equal names are equal."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidTagError(
                f"Tag name must be a non-empty string, got: {self.name!r}.",
                value=self.name,
            )

    def __repr__(self) -> str:
        return self.name.upper() if self.name in _WELL_KNOWN else f"Tag({self.name!r})"

    def __str__(self) -> str:
        return self.name


_WELL_KNOWN = frozenset({"ok", "error", "none", "untagged"})

OK = Tag("ok")
ERROR = Tag("error")
NONE = Tag("none")
UNTAGGED = Tag("untagged")

EMPTY: tuple[()] = ()
"""Empty payload marker, also the unit value handed to payload consumers."""


class Tagged(NamedTuple):
    """Canonical ``(tag, value)`` pair. Compares equal to a plain tuple."""

    tag: Tag
    value: Any


def is_tag(value: object) -> bool:
    return isinstance(value, Tag)


def ensure_tag(value: object) -> Tag:
    """Return ``value`` if it is a tag, otherwise raise InvalidTagError."""
    if not isinstance(value, Tag):
        raise InvalidTagError(f"Expected Tag, got: {value!r}.", value=value)
    return value


def is_empty(payload: object) -> bool:
    return isinstance(payload, tuple) and len(payload) == 0
