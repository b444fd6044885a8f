"""Chaining sugar for result pipelines.

``Pipe(x).map(f)`` is ``result.map(x, f)`` and ``Pipe(x).then(f)`` is
``result.then(x, f)``. Steps run left to right in any mix:

    Pipe((OK, 1)).map(add_one).then(to_ok).value

``|`` and ``>>`` are operator spellings of ``map`` and ``then``. Python gives
``>>`` higher precedence than ``|``, so a mixed operator chain needs
parentheses; the methods do not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from src.tagged import result as _result


@dataclass(frozen=True, slots=True)
class Pipe:
    """Wraps a result so combinators can be chained left to right."""

    value: Any

    def map(self, func_or_value: Any) -> Pipe:
        return Pipe(_result.map(self.value, func_or_value))

    def then(self, func_or_value: Any) -> Pipe:
        return Pipe(_result.then(self.value, func_or_value))

    def apply(self, combinator: Callable[..., Any], *args: Any) -> Pipe:
        """Call ``combinator(self.value, *args)``, e.g. ``apply(result.default, 3)``."""
        return Pipe(combinator(self.value, *args))

    __or__ = map
    __rshift__ = then
