"""Line-oriented syntax highlighting driven by a Definition."""

from __future__ import annotations

import abc
from pathlib import Path

import regex

from highlite.parser import Definition, Region, SyntaxError_, parse_def

LineMatch = dict[int, int]


class LineStates(abc.ABC):
    """A buffer of lines that also stores per-line states and matches."""

    @abc.abstractmethod
    def line(self, n: int) -> str: ...

    @abc.abstractmethod
    def line_count(self) -> int: ...

    @abc.abstractmethod
    def state(self, n: int) -> Region | None: ...

    @abc.abstractmethod
    def set_state(self, n: int, state: Region | None) -> None: ...

    @abc.abstractmethod
    def set_match(self, n: int, match: LineMatch | None) -> None: ...


def parse_syntax_files(directory) -> tuple[list[Definition], list[str]]:
    """Parse every *.yaml file in a directory; return definitions and warnings."""
    defs: list[Definition] = []
    warnings: list[str] = []
    for path in sorted(Path(directory).glob("*.yaml")):
        try:
            data = path.read_bytes()
        except OSError as exc:
            warnings.append(f"{path}: {exc}")
            continue
        if not data:
            continue
        try:
            defs.append(parse_def(data))
        except SyntaxError_ as exc:
            warnings.append(f"{path}: {exc}")
    return defs, warnings


def _anchors_allowed(pattern: regex.Pattern, can_start: bool, can_end: bool) -> bool:
    text = pattern.pattern
    if "^" in text and not can_start:
        return False
    if "$" in text and not can_end:
        return False
    return True


def _find(pattern, skip, line: str, can_start: bool, can_end: bool):
    if not _anchors_allowed(pattern, can_start, can_end):
        return None
    if skip is not None:
        line = skip.sub(lambda m: "\0" * len(m.group()), line)
    match = pattern.search(line)
    return match.span() if match else None


def _find_all(pattern, line: str, can_start: bool, can_end: bool):
    if not _anchors_allowed(pattern, can_start, can_end):
        return []
    return [m.span() for m in pattern.finditer(line)]


def _first_region(regions, line: str, can_start: bool, can_end: bool):
    first_loc, first = (len(line), 0), None
    for region in regions:
        loc = _find(region.start, None, line, can_start, can_end)
        if loc is not None and loc[0] < first_loc[0]:
            first_loc, first = loc, region
    return first_loc, first


def _mark_changes(highlights: LineMatch, start: int, colours: list[int]) -> None:
    previous = None
    for i, colour in enumerate(colours):
        if i == 0 or colour != previous:
            highlights[start + i] = colour
        previous = colour


class Highlighter:
    """Highlights text with one syntax definition."""

    def __init__(self, definition: Definition):
        self.definition = definition
        self.last_region: Region | None = None

    def _region(self, hl, start, can_end, line, region, states_only):
        if start == 0 and not states_only and 0 not in hl:
            hl[0] = region.group

        loc = _find(region.end, region.skip, line, start == 0, can_end)
        if loc is not None:
            if not states_only:
                hl[start + loc[0]] = region.limit_group
            if region.parent is None:
                if not states_only:
                    hl[start + loc[1]] = 0
                    self._region(hl, start, False, line[: loc[0]], region, states_only)
                self._empty(hl, start + loc[1], can_end, line[loc[1]:], states_only)
                return hl
            if not states_only:
                hl[start + loc[1]] = region.parent.group
                self._region(hl, start, False, line[: loc[0]], region, states_only)
            self._region(hl, start + loc[1], can_end, line[loc[1]:], region.parent, states_only)
            return hl

        if not line or states_only:
            if can_end:
                self.last_region = region
            return hl

        first_loc, first = _first_region(region.rules.regions, line, start == 0, can_end)
        if first_loc[0] != len(line):
            hl[start + first_loc[0]] = first.limit_group
            self._region(hl, start, False, line[: first_loc[0]], region, states_only)
            self._region(hl, start + first_loc[1], can_end, line[first_loc[1]:], first, states_only)
            return hl

        colours = [region.group] * len(line)
        for pattern in region.rules.patterns:
            for a, b in _find_all(pattern.regex, line, start == 0, can_end):
                colours[a:b] = [pattern.group] * (b - a)
        _mark_changes(hl, start, colours)
        if can_end:
            self.last_region = region
        return hl

    def _empty(self, hl, start, can_end, line, states_only):
        rules = self.definition.rules
        if rules is None:
            return hl
        if not line:
            if can_end:
                self.last_region = None
            return hl

        first_loc, first = _first_region(rules.regions, line, start == 0, can_end)
        if first_loc[0] != len(line):
            if not states_only:
                hl[start + first_loc[0]] = first.limit_group
            self._empty(hl, start, False, line[: first_loc[0]], states_only)
            self._region(hl, start + first_loc[1], can_end, line[first_loc[1]:], first, states_only)
            return hl

        if states_only:
            if can_end:
                self.last_region = None
            return hl

        colours = [0] * len(line)
        for pattern in rules.patterns:
            for a, b in _find_all(pattern.regex, line, start == 0, can_end):
                colours[a:b] = [pattern.group] * (b - a)
        _mark_changes(hl, start, colours)
        if can_end:
            self.last_region = None
        return hl

    def _line(self, hl, n, line, previous, states_only):
        if n == 0 or previous is None:
            return self._empty(hl, 0, True, line, states_only)
        return self._region(hl, 0, True, line, previous, states_only)

    def highlight_string(self, text: str) -> list[LineMatch]:
        """Highlight a whole string; return one match map per line."""
        return [
            self._line({}, n, line, self.last_region, False)
            for n, line in enumerate(text.split("\n"))
        ]

    def highlight_states(self, buffer: LineStates) -> None:
        """Compute and store the end-of-line state of every line."""
        for n in range(buffer.line_count()):
            self._line({}, n, buffer.line(n), self.last_region, True)
            buffer.set_state(n, self.last_region)

    def highlight_matches(self, buffer: LineStates, start_line: int, end_line: int) -> None:
        """Store matches for lines in [start_line, end_line), using stored states."""
        for n in range(start_line, min(end_line, buffer.line_count())):
            previous = buffer.state(n - 1) if n > 0 else None
            buffer.set_match(n, self._line({}, n, buffer.line(n), previous, False))

    def rehighlight_states(self, buffer: LineStates, start_line: int) -> None:
        """Recompute states from start_line until one is unchanged."""
        self.last_region = buffer.state(start_line - 1) if start_line > 0 else None
        for n in range(start_line, buffer.line_count()):
            self._line({}, n, buffer.line(n), self.last_region, True)
            current = self.last_region
            old = buffer.state(n)
            buffer.set_state(n, current)
            if current is old:
                break

    def rehighlight_line(self, buffer: LineStates, line_number: int) -> None:
        """Recompute the match and state of a single line."""
        self.last_region = buffer.state(line_number - 1) if line_number > 0 else None
        match = self._line({}, line_number, buffer.line(line_number), self.last_region, False)
        buffer.set_match(line_number, match)
        buffer.set_state(line_number, self.last_region)