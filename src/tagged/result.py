"""Combinators over tagged results.

A result is a bare tag (``OK``) or a tuple whose first slot is a tag
(``(OK, 1)``, ``(ERROR, "boom")``, ``(OK, 1, 2)``). Anything else is an
untagged value, and ``None`` is the absence tag ``NONE``.

Every ``tagged_*`` function acts only when the input carries the requested
tag and returns the input untouched otherwise, so they chain naturally:

    from_value(1)                          # (OK, 1)
    map(_, lambda x: x * 2)                # (OK, 2)
    then(_, lambda x: (OK, x + 1))         # (OK, 3)
    unwrap_or_else(_, 0)                   # 3

The same chain started from ``from_error(1)`` passes the error through every
step and ``unwrap_or_else`` returns ``0``.

Callables given as ``func_or_value`` are dispatched by arity: no arguments,
the payload, or (for ``or_else`` style functions) the tag and the payload.
Non-callables are used verbatim.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from src.tagged.callables import map_pair, map_value, require_callable
from src.tagged.errors import InvalidTagError, NilValueError, NotTaggedError
from src.tagged.normalize import Compact, is_tagged, normalize_input, normalize_output, wrap
from src.tagged.tag import ERROR, NONE, OK, Tag, Tagged, ensure_tag, is_tag

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _identity(value: T) -> T:
    return value


# Constructors


def from_as(value: Any, tag: Tag) -> Compact:
    """Wrap ``value`` under ``tag``. ``None`` gives ``NONE``, ``()`` the bare tag."""
    return wrap(value, tag)


def from_as_strict(value: Any, tag: Tag) -> Compact:
    """Like :func:`from_as` but ``None`` raises NilValueError."""
    ensure_tag(tag)
    if value is None:
        raise NilValueError("Value is None.")
    return wrap(value, tag)


def from_value(value: Any) -> Compact:
    return from_as(value, OK)


def from_value_strict(value: Any) -> Compact:
    return from_as_strict(value, OK)


def from_error(value: Any) -> Compact:
    return from_as(value, ERROR)


def from_error_strict(value: Any) -> Compact:
    return from_as_strict(value, ERROR)


# Guards


def is_ok(value: Any) -> bool:
    return is_tagged(value, OK)


def is_error(value: Any) -> bool:
    return is_tagged(value, ERROR)


def is_none(value: Any) -> bool:
    return is_tagged(value, NONE)


# Generic combinators


def tagged_map(result: Any, tag: Tag, func_or_value: Any) -> Any:
    """Replace the payload of a ``tag`` result.

    A ``None`` replacement collapses the result to ``NONE``; a ``()``
    replacement collapses it to the bare tag.
    """
    ensure_tag(tag)
    normalized = normalize_input(result)
    if normalized.tag != tag:
        return result
    return from_as(map_value(normalized.value, func_or_value), tag)


def tagged_then(result: Any, tag: Tag, func_or_value: Any) -> Any:
    """Pass the payload of a ``tag`` result on and return whatever comes back."""
    ensure_tag(tag)
    normalized = normalize_input(result)
    if normalized.tag != tag:
        return result
    return map_value(normalized.value, func_or_value)


def tagged_filter(result: Any, tag: Tag, check: Callable[[Any], Any]) -> Any:
    """Keep a ``tag`` result whose payload passes ``check``, else ``NONE``."""
    require_callable(check, "filter check")
    return tagged_then(result, tag, lambda value: result if map_value(value, check) else NONE)


def tagged_consume(result: Any, tag: Tag, func: Callable[..., Any] = _identity) -> Any:
    """Hand the payload of a ``tag`` result to ``func`` and return ``NONE``."""
    require_callable(func, "consumer")

    def _consume(value: Any) -> Tag:
        map_value(value, func)
        return NONE

    return tagged_then(result, tag, _consume)


def tagged_retag(result: Any, tag: Tag, new_tag: Tag) -> Any:
    """Move the payload of a ``tag`` result under ``new_tag``."""
    if not is_tag(new_tag):
        logger.debug("Rejected retag target %r", new_tag)
        raise InvalidTagError(f"Expected Tag as new tag, got: {new_tag!r}.", value=new_tag)
    ensure_tag(tag)
    normalized = normalize_input(result)
    if normalized.tag != tag:
        return result
    return normalize_output(Tagged(new_tag, normalized.value))


def tagged_or_else(result: Any, tag: Tag, func_or_value: Any) -> Any:
    """Handle every result *not* tagged ``tag``; ``tag`` results pass through.

    A two-argument callable receives the tag and the payload.
    """
    ensure_tag(tag)
    normalized = normalize_input(result)
    if normalized.tag == tag:
        return result
    return map_pair(normalized.tag, normalized.value, func_or_value)


def tagged_unwrap_or_else(result: Any, tag: Tag, func_or_value: Any) -> Any:
    """Payload of a ``tag`` result, or ``func_or_value`` resolved against the other one."""
    ensure_tag(tag)
    normalized = normalize_input(result)
    if normalized.tag == tag:
        return normalized.value
    return map_pair(normalized.tag, normalized.value, func_or_value)


def tagged_unwrap(result: Any, tag: Tag) -> Any:
    """Payload of a ``tag`` result. Raises NotTaggedError for anything else."""
    ensure_tag(tag)
    normalized = normalize_input(result)
    if normalized.tag != tag:
        logger.debug("Unwrap expected %s, got %r", tag, result)
        raise NotTaggedError(tag, result)
    return normalized.value


def default_as(result: Any, tag: Tag, func_or_value: Any) -> Any:
    """Replace ``NONE`` with ``func_or_value`` wrapped under ``tag``.

    A ``None`` default keeps the result ``NONE``.
    """
    ensure_tag(tag)
    return none_then(result, lambda value: from_as(map_value(value, func_or_value), tag))


# OK


def map(result: Any, func_or_value: Any) -> Any:
    return tagged_map(result, OK, func_or_value)


def then(result: Any, func_or_value: Any) -> Any:
    return tagged_then(result, OK, func_or_value)


def filter(result: Any, check: Callable[[Any], Any]) -> Any:
    return tagged_filter(result, OK, check)


def consume(result: Any, func: Callable[..., Any] = _identity) -> Any:
    return tagged_consume(result, OK, func)


def retag(result: Any, new_tag: Tag) -> Any:
    return tagged_retag(result, OK, new_tag)


def or_else(result: Any, func_or_value: Any) -> Any:
    return tagged_or_else(result, OK, func_or_value)


def unwrap_or_else(result: Any, func_or_value: Any) -> Any:
    return tagged_unwrap_or_else(result, OK, func_or_value)


def unwrap(result: Any) -> Any:
    return tagged_unwrap(result, OK)


def default(result: Any, func_or_value: Any) -> Any:
    return default_as(result, OK, func_or_value)


# ERROR


def error_map(result: Any, func_or_value: Any) -> Any:
    return tagged_map(result, ERROR, func_or_value)


def error_then(result: Any, func_or_value: Any) -> Any:
    return tagged_then(result, ERROR, func_or_value)


def error_filter(result: Any, check: Callable[[Any], Any]) -> Any:
    return tagged_filter(result, ERROR, check)


def error_consume(result: Any, func: Callable[..., Any] = _identity) -> Any:
    return tagged_consume(result, ERROR, func)


def error_retag(result: Any, new_tag: Tag) -> Any:
    return tagged_retag(result, ERROR, new_tag)


def error_or_else(result: Any, func_or_value: Any) -> Any:
    return tagged_or_else(result, ERROR, func_or_value)


def error_unwrap_or_else(result: Any, func_or_value: Any) -> Any:
    return tagged_unwrap_or_else(result, ERROR, func_or_value)


def error_unwrap(result: Any) -> Any:
    return tagged_unwrap(result, ERROR)


def default_error(result: Any, func_or_value: Any) -> Any:
    return default_as(result, ERROR, func_or_value)


# NONE


def none_then(result: Any, func_or_value: Any) -> Any:
    """Like :func:`then` for ``NONE``. A bare ``None`` input counts as ``NONE``."""
    return tagged_then(result, NONE, func_or_value)


def none_retag(result: Any, new_tag: Tag) -> Any:
    return tagged_retag(result, NONE, new_tag)
