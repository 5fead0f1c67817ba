import pytest
import yaml

from highlite.highlighter import Highlighter
from highlite.lexers.syntax_r_y import definitions
from highlite.parser import group_name, parse_def

FILETYPES = {
    "rust": "rust",
    "scala": "scala",
    "shell": "shell",
    "swift": "swift",
    "toml": "toml",
    "ts": "typescript",
    "xml": "xml",
    "yaml": "yaml",
}


def test_language_ids():
    assert set(definitions()) == set(FILETYPES)


@pytest.mark.parametrize("language, filetype", sorted(FILETYPES.items()))
def test_filetype_in_document(language, filetype):
    document = yaml.safe_load(definitions()[language])
    assert document["filetype"] == filetype
    assert isinstance(document["rules"], list) and document["rules"]


def test_definitions_returns_a_copy():
    first = definitions()
    first.pop("rust")
    assert "rust" in definitions()


@pytest.mark.parametrize("language", sorted(FILETYPES))
def test_every_definition_highlights(language):
    highlighter = Highlighter(parse_def(definitions()[language]))
    assert len(highlighter.highlight_string("x\ny\nz")) == 3


@pytest.mark.parametrize(
    "language, sample",
    [
        ("rust", "// note"),
        ("scala", "// note"),
        ("shell", "# note"),
        ("swift", "// note"),
        ("toml", "# note"),
        ("ts", "// note"),
        ("xml", "<!-- note -->"),
        ("yaml", "# note"),
    ],
)
def test_comment_starts_line(language, sample):
    matches = Highlighter(parse_def(definitions()[language])).highlight_string(sample)
    assert group_name(matches[0][0]) == "comment"


def test_rust_string_region():
    matches = Highlighter(parse_def(definitions()["rust"])).highlight_string('"a"')
    assert group_name(matches[0][0]) == "constant.string"