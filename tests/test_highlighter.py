from highlite.highlighter import Highlighter, LineStates, parse_syntax_files
from highlite.parser import group_id, parse_def

DOC = """filetype: t
rules:
    - keyword: "\\\\bfoo\\\\b"
    - comment:
        start: "//"
        end: "$"
        rules: []
    - comment:
        start: "/\\\\*"
        end: "\\\\*/"
        rules: []
"""


class Buffer(LineStates):
    def __init__(self, lines):
        self.lines = lines
        self.states = [None] * len(lines)
        self.matches = [None] * len(lines)

    def line(self, n):
        return self.lines[n]

    def line_count(self):
        return len(self.lines)

    def state(self, n):
        return self.states[n]

    def set_state(self, n, state):
        self.states[n] = state

    def set_match(self, n, match):
        self.matches[n] = match


def make():
    return Highlighter(parse_def(DOC))


def test_keyword_and_line_comment():
    kw, comment = group_id("keyword"), group_id("comment")
    result = make().highlight_string("foo // x")
    assert len(result) == 1
    assert result[0][0] == kw
    assert result[0][4] == comment
    assert result[0][3] == 0


def test_multiline_comment_carries_over():
    comment = group_id("comment")
    h = make()
    result = h.highlight_string("/* a\nfoo */ foo")
    assert result[1][0] == comment
    assert group_id("keyword") in result[1].values()
    assert h.last_region is None


def test_states_and_matches():
    h = make()
    buf = Buffer(["/* a", "still", "end */", "foo"])
    h.highlight_states(buf)
    region = buf.states[0]
    assert region is not None
    assert buf.states[1] is region
    assert buf.states[2] is None and buf.states[3] is None
    h.highlight_matches(buf, 0, 10)
    assert buf.matches[1][0] == group_id("comment")
    assert buf.matches[3][0] == group_id("keyword")


def test_rehighlight():
    h = make()
    buf = Buffer(["x", "y", "z"])
    h.highlight_states(buf)
    buf.lines[0] = "/* open"
    h.rehighlight_states(buf, 0)
    assert all(s is not None for s in buf.states)
    buf.lines[1] = "*/"
    h.rehighlight_line(buf, 1)
    assert buf.states[1] is None
    assert buf.matches[1][0] == group_id("comment")


def test_parse_syntax_files(tmp_path):
    (tmp_path / "a.yaml").write_text(DOC)
    (tmp_path / "b.yaml").write_text('rules:\n  - a: "("\n')
    (tmp_path / "c.yaml").write_text("")
    defs, warnings = parse_syntax_files(tmp_path)
    assert [d.filetype for d in defs] == ["t"]
    assert len(warnings) == 1 and "b.yaml" in warnings[0]