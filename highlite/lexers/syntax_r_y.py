"""Syntax definitions for Rust, Scala, shell, Swift, TOML, TypeScript, XML and YAML."""

from __future__ import annotations

import functools

import yaml

_ESCAPE = r"\\."
_SPECIAL = ("constant.specialChar", _ESCAPE)
_TODO = ("todo", "(TODO|XXX|FIXME):?")


def _alt(words: str) -> str:
    """Join whitespace-separated alternatives into one capturing group."""
    return "(" + "|".join(words.split()) + ")"


def _words(words: str) -> str:
    """Match any of the given words on word boundaries."""
    return r"\b" + _alt(words) + r"\b"


def _region(start: str, end: str, *rules: tuple, skip: str | None = None) -> dict:
    region: dict = {"start": start, "end": end}
    if skip is not None:
        region["skip"] = skip
    region["rules"] = [{group: value} for group, value in rules]
    return region


def _quoted(quote: str, *rules: tuple, skip: str | None = _ESCAPE) -> tuple:
    return ("constant.string", _region(quote, quote, *rules, skip=skip))


def _document(filetype: str, rules: list) -> str:
    data = {"filetype": filetype, "rules": [{group: value} for group, value in rules]}
    return yaml.safe_dump(data, sort_keys=False, width=1 << 16)


_RUST_RULES = [
    ("identifier", "fn [a-z0-9_]+"),
    (
        "statement",
        _words(
            "abstract alignof as become box break const continue crate do else enum extern "
            "false final fn for if impl in let loop macro match mod move mut offsetof "
            "override priv pub pure ref return sizeof static self struct super true trait "
            "type typeof unsafe unsized use virtual where while yield"
        ),
    ),
    ("special", "[a-z_]+!"),
    ("constant", "[A-Z][A-Z_]+"),
    ("constant.number", r"\b[0-9]+\b"),
    ("type", "[A-Z][a-z]+"),
    _quoted('"', _SPECIAL),
    ("constant.string", _region('r#+"', '"#+')),
    ("comment", _region("//", "$", _TODO)),
    ("comment", _region(r"/\*", r"\*/", _TODO)),
    ("special", _region(r"#!\[", r"\]")),
]

_SCALA_RULES = [
    ("type", _words("boolean byte char double float int long new short this transient void")),
    (
        "statement",
        _words(
            "match val var break case catch continue default do else finally for if return "
            "switch throw try while"
        ),
    ),
    (
        "statement",
        _words(
            "def object case trait lazy implicit abstract class extends final implements "
            "import instanceof interface native package private protected public static "
            "strictfp super synchronized throws volatile sealed"
        ),
    ),
    _quoted('"', _SPECIAL),
    ("constant", _words("true false null")),
    ("comment", _region("//", "$")),
    ("comment", _region(r"/\*", r"\*/")),
    ("comment", _region(r"/\*\*", r"\*/")),
]

_SHELL_VARIABLE = r"\$\{?[0-9A-Z_!@#$*?-]+\}?"

_SHELL_RULES = [
    ("constant.number", r"\b[0-9]+\b"),
    (
        "statement",
        _words(
            "case do done elif else esac exit fi for function if in local read return "
            "select shift then time until while"
        ),
    ),
    ("type", _words("cd echo export let set umask unset")),
    (
        "type",
        _words(
            r"(g|ig)?awk bash dash find \w{0,4}grep kill killall \w{0,4}less make pkill sed "
            "sh tar ping traceroute service dpkg apt apt-get apt-cache aptitude "
            "dpkg-buildpackage yum"
        ),
    ),
    (
        "type",
        _words(
            "which sudo base64 basename cat chcon chgrp chmod chown chroot cksum comm cp "
            "csplit cut date (l)?dd df dir dircolors dirname du env expand expr factor false "
            "fmt fold head hostid id install join link ln logname ls md5sum mkdir mkfifo "
            "mknod mktemp mv nice nl nohup nproc numfmt od paste pathchk pinky pr printenv "
            "printf ptx pwd readlink realpath rm rmdir runcon seq "
            "(sha1|sha224|sha256|sha384|sha512)sum shred shuf sleep sort split stat stdbuf "
            "stty sum sync tac tail tee test time timeout touch tr true truncate tsort tty "
            "uname unexpand uniq unlink users vdir wc who whoami yes"
        ),
    ),
    ("identifier.var", "(^([[:space:]]+)?[A-Za-z0-9_]+)"),
    ("special", r"(\{|\}|\(|\)|\;|\]|\[|`|\\|\$|<|>|!|=|&|\|)"),
    ("statement", "--[a-z-]+"),
    ("statement", r"\ -[a-z]+"),
    ("identifier", _SHELL_VARIABLE),
    ("identifier", _SHELL_VARIABLE),
    ("symbol.brackets", r"(\[|\]|\{|\}|[()])"),
    _quoted('"', _SPECIAL),
    _quoted("'", skip=None),
    ("comment", _region("#", "$", _TODO)),
]

_SWIFT_RULES = [
    ("statement", r"([.:;,+*|=!?\%]|<|>|/|-|&)"),
    (
        "statement",
        _alt(
            "class import let var struct enum func if else switch case default for in "
            "internal external unowned private public throws"
        )
        + r"\ ",
    ),
    (
        "statement",
        _alt(
            "prefix postfix operator extension lazy get set self willSet didSet override "
            "super convenience weak strong mutating return guard"
        )
        + r"\ ",
    ),
    ("statement", "(print)"),
    ("statement", "(init)"),
    ("constant.number", "([0-9]+)"),
    ("type", r"\ ((U)?Int(8|16|32|64))"),
    ("constant", "(true|false|nil)"),
    ("type", r"\ " + _alt("Double String Float Boolean Dictionary Array Int")),
    ("type", r"\ (AnyObject)"),
    _quoted('"', _SPECIAL),
    ("comment", _region("//", "$", _TODO)),
    ("comment", _region("///", "$", _TODO)),
    ("comment", _region(r"/\*\*", r"\*/", _TODO)),
]

_TOML_RULES = [
    ("statement", "(.*)[[:space:]]="),
    ("special", "="),
    ("special", r"(\[|\])"),
    ("constant.number", r"\b([0-9]+|0x[0-9a-fA-F]*)\b|'.'"),
    ("constant.number", r"\\([0-7]{3}|x[A-Fa-f0-9]{2}|u[A-Fa-f0-9]{4}|U[A-Fa-f0-9]{8})"),
    _quoted('"', _SPECIAL),
    _quoted("'", _SPECIAL),
    _quoted("`", _SPECIAL, skip=None),
    ("comment", _region("#", "$", _TODO)),
]

_TS_RULES = [
    ("constant.number", r"\b[-+]?([1-9][0-9]*|0[0-7]*|0x[0-9a-fA-F]+)([uU][lL]?|[lL][uU]?)?\b"),
    ("constant.number", r"\b[-+]?([0-9]+\.[0-9]*|[0-9]*\.[0-9]+)([EePp][+-]?[0-9]+)?[fFlL]?"),
    ("constant.number", r"\b[-+]?([0-9]+[EePp][+-]?[0-9]+)[fFlL]?"),
    ("identifier", "[A-Za-z_][A-Za-z0-9_]*[[:space:]]*[(]"),
    (
        "statement",
        _words("abstract as async await break case catch class const constructor continue"),
    ),
    (
        "statement",
        _words("debugger declare default delete do else enum export extends finally for from"),
    ),
    (
        "statement",
        _words(
            "function get if implements import in instanceof interface is let module namespace"
        ),
    ),
    (
        "statement",
        _words("new of package private protected public require return set static super switch"),
    ),
    ("statement", _words("this throw try type typeof var void while with yield")),
    ("constant", _words("false true null undefined NaN")),
    ("type", _words("Array Boolean Date Enumerator Error Function Math")),
    ("type", _words("Number Object RegExp String Symbol")),
    ("type", _words("any boolean never number string symbol")),
    ("statement", "[-+/*=<>!~%?:&|]"),
    ("constant", r"/[^*]([^/]|(\\/))*[^\\]/[gim]*"),
    ("constant", r"""\\[0-7][0-7]?[0-7]?|\\x[0-9a-fA-F]+|\\[bfnrt'"\?\\]"""),
    ("comment", _region("//", "$")),
    ("comment", _region(r"/\*", r"\*/", ("todo", "TODO:?"))),
    _quoted('"', _SPECIAL),
    _quoted("'", _SPECIAL),
]

_XML_RULES = [
    ("type", "(<(/)?[a-zA-Z:]+>)"),
    ("type", "(<(/)?[a-zA-Z:]+[[:space:]]+)"),
    ("constant.specialChar", '[a-zA-Z0-9]+="(.*)+"'),
    ("statement", "([a-zA-Z0-9]+)="),
    ("type", "(([[:space:]])?/?>([[:space:]]+)?$)"),
    ("comment", _region("<!DOCTYPE", "[/]?>")),
    ("comment", _region("<!--", "-->")),
    ("special", "&[^;]*;"),
]

_YAML_RULES = [
    ("type", "(^| )!!(binary|bool|float|int|map|null|omap|seq|set|str) "),
    ("constant", _words("YES yes Y y ON on NO no N n OFF off")),
    ("constant", _words("true false")),
    ("statement", r"(:[[:space:]]|\[|\]|:[[:space:]]+[|>]|^[[:space:]]*- )"),
    ("identifier", r"[[:space:]][\*&][A-Za-z0-9]+"),
    ("type", r"[-.\w]+:"),
    ("statement", ":"),
    ("special", r"(^---|^\.\.\.|^%YAML|^%TAG)"),
    _quoted('"', _SPECIAL),
    _quoted("'", _SPECIAL),
    ("comment", _region("#", "$")),
]

_LANGUAGES: dict[str, tuple[str, list]] = {
    "rust": ("rust", _RUST_RULES),
    "scala": ("scala", _SCALA_RULES),
    "shell": ("shell", _SHELL_RULES),
    "swift": ("swift", _SWIFT_RULES),
    "toml": ("toml", _TOML_RULES),
    "ts": ("typescript", _TS_RULES),
    "xml": ("xml", _XML_RULES),
    "yaml": ("yaml", _YAML_RULES),
}


@functools.lru_cache(maxsize=None)
def _documents() -> dict[str, str]:
    return {
        language: _document(filetype, rules)
        for language, (filetype, rules) in _LANGUAGES.items()
    }


def definitions() -> dict[str, str]:
    """Return the YAML syntax documents of this module, keyed by language id."""
    return dict(_documents())