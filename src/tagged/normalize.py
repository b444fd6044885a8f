"""Normalization between external inputs and the canonical pair shape.

Canonical shape is always ``Tagged(tag, value)``. Compact shape collapses a
pair with an empty payload to its bare tag.
"""

from __future__ import annotations

from typing import Any, Union

from src.tagged.errors import InvalidTagError, UntaggedError
from src.tagged.tag import EMPTY, NONE, UNTAGGED, Tag, Tagged, ensure_tag, is_empty, is_tag

Compact = Union[Tag, Tagged]


def normalize_input(value: Any, default_tag: Tag = UNTAGGED) -> Tagged:
    """Interpret any value as a canonical ``(tag, value)`` pair.

    - ``OK`` becomes ``(OK, ())``
    - ``(OK, 1)`` is kept as is
    - ``(OK, 1, 2)`` becomes ``(OK, (1, 2))``
    - anything else is wrapped under ``default_tag``; ``None`` becomes ``NONE``
    """
    ensure_tag(default_tag)
    if is_tag(value):
        return Tagged(value, EMPTY)
    if isinstance(value, tuple) and value and is_tag(value[0]):
        if len(value) == 2:
            return value if isinstance(value, Tagged) else Tagged(value[0], value[1])
        return Tagged(value[0], value[1:])
    return normalize_input(wrap(value, default_tag))


def normalize_output(result: Tagged) -> Compact:
    """Collapse ``(tag, ())`` to ``tag``; leave other pairs untouched."""
    tag, value = result
    if not is_tag(tag):
        raise InvalidTagError(f"Expected a (tag, value) pair, got: {result!r}.", value=result)
    if is_empty(value):
        return tag
    return result


def wrap(value: Any, tag: Tag) -> Compact:
    """Put ``value`` under ``tag``. ``None`` is always ``NONE``."""
    ensure_tag(tag)
    if value is None:
        return NONE
    return normalize_output(Tagged(tag, value))


def normalize(value: Any, default_tag: Tag = UNTAGGED) -> Compact:
    """Normalize ``value`` to its compact form.

        normalize((OK, 1, 2))    # (OK, (1, 2))
        normalize("hello")       # (UNTAGGED, "hello")
        normalize(None)          # NONE
    """
    return normalize_output(normalize_input(value, default_tag))


def normalize_strict(value: Any) -> Compact:
    """Like :func:`normalize` but reject untagged input."""
    result = normalize(value)
    if isinstance(result, Tagged) and result.tag == UNTAGGED:
        raise UntaggedError(result.value)
    return result


def expand(result: Any) -> Tagged:
    """Compact to canonical. Only accepts values that already carry a tag."""
    if not is_tagged_result(result):
        raise InvalidTagError(f"Expected a tagged result, got: {result!r}.", value=result)
    return normalize_input(result)


def collapse(result: Any) -> Compact:
    """Canonical to compact. The inverse of :func:`expand`."""
    return normalize_output(expand(result))


def is_tagged_result(value: Any) -> bool:
    """True for a bare tag or a tuple whose first slot is a tag."""
    return is_tag(value) or (isinstance(value, tuple) and len(value) > 0 and is_tag(value[0]))


def is_tagged(value: Any, tag: Any) -> bool:
    """True when ``value`` is tagged with ``tag``. Never raises."""
    if not is_tag(tag):
        return False
    if is_tag(value):
        return value == tag
    return isinstance(value, tuple) and len(value) > 0 and value[0] == tag
