"""Function-or-value resolution.

Combinators accept either a plain value, used verbatim, or a callable whose
positional arity decides what it receives: nothing, the payload, or the tag
followed by the payload.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

from src.tagged.errors import InvalidCallableError
from src.tagged.tag import Tag

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def arity(func: Callable[..., Any], offered: int) -> int:
    """Number of positional arguments ``func`` should be called with.

    ``offered`` is the most arguments the call site can supply. Required
    parameters are always filled; optional ones (defaults or ``*args``)
    take further arguments up to ``offered``.
    """
    try:
        sig = inspect.signature(func)
    except (ValueError, TypeError):
        logger.debug("No signature for %r, assuming it takes one argument", func)
        return 1

    required = 0
    accepted = 0
    for param in sig.parameters.values():
        if param.kind in _POSITIONAL:
            accepted += 1
            if param.default is inspect.Parameter.empty:
                required += 1
        elif param.kind is inspect.Parameter.VAR_POSITIONAL:
            accepted = max(accepted, offered)
        elif (
            param.kind is inspect.Parameter.KEYWORD_ONLY
            and param.default is inspect.Parameter.empty
        ):
            raise InvalidCallableError(
                f"Value-mapping function {func!r} has required keyword-only "
                f"parameter {param.name!r}."
            )

    return max(required, min(accepted, offered))


def map_value(value: Any, func_or_value: Any) -> Any:
    """Resolve ``func_or_value`` against a payload."""
    if not callable(func_or_value):
        return func_or_value

    n = arity(func_or_value, offered=1)
    if n == 0:
        return func_or_value()
    if n == 1:
        return func_or_value(value)
    logger.debug("Rejected %r with arity %d at a payload-only call site", func_or_value, n)
    raise InvalidCallableError("Value-mapping function must have arity between 0 and 1.")


def map_pair(tag: Tag, value: Any, func_or_value: Any) -> Any:
    """Resolve ``func_or_value`` against a full ``(tag, payload)`` pair."""
    if not callable(func_or_value):
        return func_or_value

    n = arity(func_or_value, offered=2)
    if n == 0:
        return func_or_value()
    if n == 1:
        return func_or_value(value)
    if n == 2:
        return func_or_value(tag, value)
    logger.debug("Rejected %r with arity %d at a pair call site", func_or_value, n)
    raise InvalidCallableError("Value-mapping function must have arity between 0 and 2.")


def require_callable(func: Any, role: str) -> Callable[..., Any]:
    if not callable(func):
        raise InvalidCallableError(f"Expected a callable {role}, got: {func!r}.")
    return func
