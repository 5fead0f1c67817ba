"""Syntax definition parsing: YAML documents into patterns and regions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import regex
import yaml

_groups: dict[str, int] = {}


class SyntaxError_(ValueError):
    """Raised when a syntax definition cannot be parsed."""


def compile_regex(pattern: str) -> regex.Pattern:
    """Compile a syntax rule expression, raising SyntaxError_ on failure."""
    if not isinstance(pattern, str):
        raise SyntaxError_(f"expected a string expression, got {type(pattern).__name__}")
    errors = []
    for flags in (regex.V1, regex.V0):
        try:
            return regex.compile(pattern, flags)
        except (regex.error, ValueError) as exc:
            errors.append(exc)
    raise SyntaxError_(f"invalid expression {pattern!r}: {errors[0]}")


def group_id(name: str) -> int:
    """Return the number for a group name, registering it when new."""
    if name not in _groups:
        _groups[name] = len(_groups) + 1
    return _groups[name]


def group_name(group: int) -> str:
    """Return the name of a group number, or an empty string if unknown."""
    for name, number in _groups.items():
        if number == group:
            return name
    return ""


@dataclass(eq=False)
class Pattern:
    """A single-line rule: text matching the expression gets the group."""

    group: int
    regex: regex.Pattern


@dataclass(eq=False)
class Rules:
    """The patterns, regions and included filetypes active in a context."""

    regions: list["Region"] = field(default_factory=list)
    patterns: list[Pattern] = field(default_factory=list)
    includes: list[str] = field(default_factory=list)


@dataclass(eq=False)
class Region:
    """A delimited span such as a string or a block comment."""

    group: int
    limit_group: int
    start: regex.Pattern
    end: regex.Pattern
    skip: regex.Pattern | None
    rules: Rules
    parent: "Region | None" = None


@dataclass(eq=False)
class Definition:
    """A complete syntax definition for one filetype."""

    filetype: str = ""
    rules: Rules | None = None


def _require(value: Any, kind: type, what: str) -> Any:
    if not isinstance(value, kind):
        raise SyntaxError_(f"{what}: expected {kind.__name__}, got {type(value).__name__}")
    return value


def _parse_rules(items: Any, parent: Region | None) -> Rules:
    rules = Rules()
    for item in _require(items, list, "rules"):
        for key, value in _require(item, dict, "rule").items():
            if isinstance(value, str):
                if key == "include":
                    rules.includes.append(value)
                else:
                    compiled = compile_regex(value)
                    name = _require(key, str, "group name")
                    rules.patterns.append(Pattern(group_id(name), compiled))
            elif isinstance(value, dict):
                rules.regions.append(
                    _parse_region(_require(key, str, "group name"), value, parent)
                )
            else:
                raise SyntaxError_(f"bad type {type(value).__name__}")
    return rules


def _parse_region(name: str, info: dict, parent: Region | None) -> Region:
    group = group_id(name)
    start = compile_regex(info.get("start"))
    end = compile_regex(info.get("end"))
    skip = compile_regex(info["skip"]) if "skip" in info else None
    if "limit-group" in info:
        limit_group = group_id(_require(info["limit-group"], str, "limit-group"))
    else:
        limit_group = group
    region = Region(group, limit_group, start, end, skip, Rules(), parent)
    region.rules = _parse_rules(info.get("rules"), region)
    return region


def parse_def(data: bytes | str) -> Definition:
    """Parse a YAML syntax document into a Definition."""
    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise SyntaxError_(str(exc)) from exc
    definition = Definition()
    if document is None:
        return definition
    for key, value in _require(document, dict, "document").items():
        if key == "filetype":
            definition.filetype = _require(value, str, "filetype")
        elif key == "rules":
            definition.rules = _parse_rules(value, None)
    return definition


def _include_into(defs: list[Definition], rules: Rules) -> None:
    for language in rules.includes:
        for other in defs:
            if other.rules is not None and other.filetype == language:
                rules.patterns.extend(list(other.rules.patterns))
                rules.regions.extend(list(other.rules.regions))


def _resolve_region(defs: list[Definition], region: Region) -> None:
    _include_into(defs, region.rules)
    for child in region.rules.regions:
        _resolve_region(defs, child)
        child.parent = region


def resolve_includes(defs: list[Definition]) -> None:
    """Merge included filetypes' rules; call after parsing every definition."""
    for definition in defs:
        if definition.rules is None:
            continue
        _include_into(defs, definition.rules)
        for region in definition.rules.regions:
            _resolve_region(defs, region)
            region.parent = None