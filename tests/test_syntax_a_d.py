import pytest

from highlite.highlighter import Highlighter
from highlite.lexers.syntax_a_d import definitions
from highlite.parser import group_id, parse_def

LANGUAGES = ["asm", "c", "caddyfile", "cmake", "cpp", "csharp", "d"]


def _highlight(language, text):
    return Highlighter(parse_def(definitions()[language])).highlight_string(text)


def test_languages_present():
    assert sorted(definitions()) == sorted(LANGUAGES)


def test_definitions_returns_fresh_mapping():
    first = definitions()
    first.pop("c")
    assert "c" in definitions()


@pytest.mark.parametrize("language", LANGUAGES)
def test_every_definition_parses_with_rules(language):
    definition = parse_def(definitions()[language])
    assert definition.rules is not None
    assert len(definition.rules.patterns) + len(definition.rules.regions) > 0


@pytest.mark.parametrize(
    "language, filetype",
    [("asm", "asm"), ("c", "c"), ("caddyfile", "caddyfile"), ("cmake", "cmake"),
     ("cpp", "c++"), ("csharp", "csharp"), ("d", "d")],
)
def test_filetypes(language, filetype):
    assert parse_def(definitions()[language]).filetype == filetype


def test_c_line_comment():
    matches = _highlight("c", "// note")
    assert matches[0][0] == group_id("comment")


def test_c_block_comment_continues_to_next_line():
    matches = _highlight("c", "/* a\nb */ x")
    assert len(matches) == 2
    assert matches[1][0] == group_id("comment")


def test_c_string_start():
    matches = _highlight("c", 'x = "hi";')
    assert matches[0][4] == group_id("constant.string")


def test_cpp_return_statement():
    matches = _highlight("cpp", "return 0;")
    assert matches[0][0] == group_id("statement")


def test_asm_instruction_and_register():
    matches = _highlight("asm", "mov eax, 1")
    assert matches[0][0] == group_id("statement")
    assert matches[0][4] == group_id("identifier")


def test_asm_is_case_insensitive():
    matches = _highlight("asm", "MOV eax, 1")
    assert matches[0][0] == group_id("statement")


def test_asm_comment():
    matches = _highlight("asm", "; remark")
    assert matches[0][0] == group_id("comment")


def test_caddyfile_comment():
    matches = _highlight("caddyfile", "# remark")
    assert matches[0][0] == group_id("comment")


def test_cmake_comment_and_variable_region():
    assert _highlight("cmake", "# remark")[0][0] == group_id("comment")
    assert _highlight("cmake", "${VAR}")[0][0] == group_id("preproc")


def test_csharp_bool_and_comment():
    assert _highlight("csharp", "true")[0][0] == group_id("constant.bool")
    assert _highlight("csharp", "// x")[0][0] == group_id("comment")


def test_d_nesting_comment():
    matches = _highlight("d", "/+ a +/")
    assert matches[0][0] == group_id("comment")


def test_one_match_per_line():
    text = "int a;\nint b;\nint c;"
    assert len(_highlight("c", text)) == len(text.split("\n"))