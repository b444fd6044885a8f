"""Tagged results - combinators for tag/payload values in pipelines."""

from src.tagged.collection import collect, collect_tagged, group_by_tag
from src.tagged.config import OutputFormat, TaggedConfig
from src.tagged.errors import (
    InvalidCallableError,
    InvalidTagError,
    NilValueError,
    NotTaggedError,
    TaggedResultError,
    UntaggedError,
)
from src.tagged.normalize import (
    collapse,
    expand,
    is_tagged,
    is_tagged_result,
    normalize,
    normalize_strict,
)
from src.tagged.pipe import Pipe
from src.tagged.tag import EMPTY, ERROR, NONE, OK, UNTAGGED, Tag, Tagged

__all__ = [
    "EMPTY",
    "ERROR",
    "NONE",
    "OK",
    "UNTAGGED",
    "Tag",
    "Tagged",
    "Pipe",
    "TaggedConfig",
    "OutputFormat",
    "collect",
    "collect_tagged",
    "group_by_tag",
    "collapse",
    "expand",
    "is_tagged",
    "is_tagged_result",
    "normalize",
    "normalize_strict",
    "TaggedResultError",
    "InvalidCallableError",
    "InvalidTagError",
    "NilValueError",
    "NotTaggedError",
    "UntaggedError",
]
