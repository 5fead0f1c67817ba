import pytest

from highlite.parser import (
    Definition,
    SyntaxError_,
    compile_regex,
    group_id,
    group_name,
    parse_def,
    resolve_includes,
)

DOC = """filetype: demo
rules:
    - keyword: "\\\\bfoo\\\\b"
    - include: other
    - constant.string:
        start: "\\""
        end: "\\""
        skip: "\\\\\\\\."
        rules:
            - constant.specialChar: "\\\\\\\\."
"""


def test_parse_filetype_and_rules():
    d = parse_def(DOC)
    assert d.filetype == "demo"
    assert len(d.rules.patterns) == 1
    assert d.rules.includes == ["other"]
    region = d.rules.regions[0]
    assert region.group == group_id("constant.string")
    assert region.limit_group == region.group
    assert region.skip is not None
    assert region.rules.patterns[0].group == group_id("constant.specialChar")


def test_group_roundtrip():
    number = group_id("some.group")
    assert group_id("some.group") == number
    assert group_name(number) == "some.group"
    assert group_name(10_000) == ""


def test_limit_group():
    d = parse_def('filetype: x\nrules:\n  - a:\n      start: "<"\n      end: ">"\n      limit-group: lim\n      rules: []\n')
    assert d.rules.regions[0].limit_group == group_id("lim")


def test_bad_regex():
    with pytest.raises(SyntaxError_):
        parse_def('filetype: x\nrules:\n  - a: "("\n')
    with pytest.raises(SyntaxError_):
        compile_regex("(")


def test_bad_value_type():
    with pytest.raises(SyntaxError_):
        parse_def("filetype: x\nrules:\n  - a: [1, 2]\n")


def test_region_requires_rules():
    with pytest.raises(SyntaxError_):
        parse_def('rules:\n  - a:\n      start: "<"\n      end: ">"\n')


def test_posix_and_scoped_flags():
    assert compile_regex("[[:space:]]+").search("a  b").span() == (1, 3)
    assert compile_regex("\\b(?i)(mov)(?-i)\\b").search("MOV ax") is not None


def test_empty_document():
    d = parse_def("")
    assert d.filetype == "" and d.rules is None


def test_resolve_includes():
    main = parse_def(DOC)
    other = parse_def('filetype: other\nrules:\n  - bar: "bar"\n')
    resolve_includes([main, other])
    assert other.rules.patterns[0] in main.rules.patterns
    assert len(main.rules.patterns) == 2
    assert main.rules.regions[0].parent is None
    assert isinstance(main, Definition)