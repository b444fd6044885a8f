"""CLI interface for tagged results.

Provides command-line access to the core operations:
- normalize: Show the normalized form of a result
- collect: Collect results into a single result
- group: Group result payloads by tag
- demo: Run the example pipelines

Results are written as tokens: ``ok:1`` is a tag with a JSON payload,
``error`` is a bare tag, and anything else (``42``, ``'"text"'``, ``null``)
is an untagged value.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

from src.tagged import result
from src.tagged.collection import collect_tagged, group_by_tag
from src.tagged.config import OutputFormat, TaggedConfig
from src.tagged.errors import InvalidTagError, TaggedResultError
from src.tagged.normalize import normalize, normalize_output
from src.tagged.tag import OK, Tag

logger = logging.getLogger(__name__)

_JSON_WORDS = frozenset({"true", "false", "null"})


def parse_token(token: str) -> Any:
    """Turn a command-line token into a result or an untagged value."""
    name, sep, raw = token.partition(":")
    if sep and name.isidentifier():
        return Tag(name) if raw == "" else (Tag(name), _parse_json(raw))
    if token.isidentifier() and token not in _JSON_WORDS:
        return Tag(token)
    return _parse_json(token)


def _parse_json(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _jsonable(value: Any) -> Any:
    if isinstance(value, Tag):
        return value.name
    if isinstance(value, (tuple, list)):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(_jsonable(k)): _jsonable(v) for k, v in value.items()}
    return value


def render(value: Any, output_format: OutputFormat) -> str:
    """Format a result for printing."""
    if isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], Tag):
        value = normalize_output(value)
    if output_format == OutputFormat.JSON:
        if isinstance(value, Tag):
            return json.dumps({"tag": value.name})
        if isinstance(value, tuple) and value and isinstance(value[0], Tag):
            return json.dumps({"tag": value[0].name, "value": _jsonable(value[1])})
        return json.dumps(_jsonable(value))

    if isinstance(value, Tag):
        return value.name
    if isinstance(value, tuple) and value and isinstance(value[0], Tag):
        return f"{value[0].name}: {json.dumps(_jsonable(value[1]))}"
    return json.dumps(_jsonable(value))


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Tagged results - normalize, collect and group tagged values"
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Output format (defaults to TAGGED_OUTPUT_FORMAT)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    subparsers.add_parser("demo", help="Run the example pipelines")

    # Normalize command
    normalize_parser = subparsers.add_parser("normalize", help="Normalize a result")
    normalize_parser.add_argument("token", help="Result token, e.g. ok:1")
    normalize_parser.add_argument(
        "--default-tag", default=None, help="Tag for untagged values"
    )

    # Collect command
    collect_parser = subparsers.add_parser("collect", help="Collect results")
    collect_parser.add_argument("tokens", nargs="*", help="Result tokens")
    collect_parser.add_argument("--tag", default=OK.name, help="Tag to collect")

    # Group command
    group_parser = subparsers.add_parser("group", help="Group results by tag")
    group_parser.add_argument("tokens", nargs="*", help="Result tokens")

    args = parser.parse_args(argv)

    config = TaggedConfig()
    if args.format is not None:
        config = TaggedConfig.with_overrides(output_format=args.format)
    logging.basicConfig(level=config.log_level)

    try:
        if args.command == "demo":
            run_demo(config)
        elif args.command == "normalize":
            run_normalize(args.token, args.default_tag, config)
        elif args.command == "collect":
            run_collect(args.tokens, args.tag, config)
        elif args.command == "group":
            run_group(args.tokens, config)
        else:
            parser.print_help()
            sys.exit(1)
    except TaggedResultError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"ERROR: {e}")
        sys.exit(1)


def run_normalize(
    token: str, default_tag: Optional[str], config: Optional[TaggedConfig] = None
) -> None:
    """Print the normalized form of one token."""
    config = config or TaggedConfig()
    tag = _tag_from_name(default_tag) if default_tag else config.untagged
    print(render(normalize(parse_token(token), tag), config.output_format))


def run_collect(tokens: list[str], tag: str, config: Optional[TaggedConfig] = None) -> None:
    """Print the collected result of several tokens."""
    config = config or TaggedConfig()
    values = [_untagged_as(parse_token(t), config) for t in tokens]
    print(render(collect_tagged(values, _tag_from_name(tag)), config.output_format))


def run_group(tokens: list[str], config: Optional[TaggedConfig] = None) -> None:
    """Print payloads grouped by tag."""
    config = config or TaggedConfig()
    values = [_untagged_as(parse_token(t), config) for t in tokens]
    print(render(group_by_tag(values), config.output_format))


def _untagged_as(value: Any, config: TaggedConfig) -> Any:
    return normalize(value, config.untagged)


def _tag_from_name(name: str) -> Tag:
    # Same rule as TaggedConfig.default_tag.
    if not name.isidentifier():
        raise InvalidTagError(f"Tag name must be an identifier, got: {name!r}.", value=name)
    return Tag(name)


def run_demo(config: Optional[TaggedConfig] = None) -> None:
    """Run the success and failure pipelines step by step."""
    config = config or TaggedConfig()
    print("=" * 60)
    print("Tagged Results - Demo")
    print("=" * 60)
    print()

    summary = {}
    for label, start in (("success", result.from_value(1)), ("failure", result.from_error(1))):
        print(f"[{label}] start:          {render(start, config.output_format)}")
        doubled = result.map(start, lambda x: x * 2)
        print(f"[{label}] map(x * 2):     {render(doubled, config.output_format)}")
        chained = result.then(doubled, lambda x: (OK, x + 1))
        print(f"[{label}] then(ok, x + 1): {render(chained, config.output_format)}")
        final = result.unwrap_or_else(chained, 0)
        print(f"[{label}] unwrap_or_else: {final}")
        print()
        summary[label] = final

    print("=" * 60)
    print("JSON output:")
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
