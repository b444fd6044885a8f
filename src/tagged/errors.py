"""Exception hierarchy for tagged results.

Every error here is a caller contract violation. Nothing is retried or
recovered internally.
"""

from __future__ import annotations

from typing import Any, Optional


class TaggedResultError(ValueError):
    """Base exception for all tagged-result errors."""

    def __init__(self, message: str, *, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidCallableError(TaggedResultError):
    """A supplied callable has an arity the call site cannot satisfy."""


class InvalidTagError(TaggedResultError):
    """A value that is not a Tag was given where a tag is required."""

    def __init__(self, message: str, *, value: Any = None, hint: Optional[str] = None) -> None:
        super().__init__(message, hint=hint)
        self.value = value


class NotTaggedError(TaggedResultError):
    """An unwrap was attempted on a result carrying a different tag."""

    def __init__(self, expected: Any, result: Any) -> None:
        super().__init__(f"Result is not tagged {expected}: {result!r}.")
        self.expected = expected
        self.result = result


class NilValueError(TaggedResultError):
    """A strict constructor was given None."""


class UntaggedError(TaggedResultError):
    """Strict normalization was given a value without a tag."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Result is untagged: {value!r}",
            hint="Wrap the value with from_value() or from_as() first.",
        )
        self.value = value
