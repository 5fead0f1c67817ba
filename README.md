# highlite

A small syntax highlighter. Each language is described by a YAML syntax
definition made of regex *patterns* and *regions* (strings, comments and the
like, which can span several lines and hold rules of their own). The
highlighter turns text into a per-line map from column to syntax group.

## Installation

```
pip install .
```

## Highlighting a string

```python
from highlite.parser import parse_def, group_name
from highlite.highlighter import Highlighter
from highlite.lexers.syntax_r_y import definitions

definition = parse_def(definitions()["rust"])
matches = Highlighter(definition).highlight_string('let x = 1; // note')
for column, group in sorted(matches[0].items()):
    print(column, group_name(group))
```

Each entry of the result is one line of input. Its keys are the (character)
columns where the group changes, and its values are group ids; group 0 means
default text. `group_name` turns an id back into its name, such as
`"comment"` or `"constant.string"`, and `group_id` gives the id for a name.

`parse_def` accepts YAML text or bytes and raises `SyntaxError_` when the
document or one of its expressions cannot be parsed.

## Built-in definitions

Two modules each provide a `definitions()` function returning a dict of YAML
documents keyed by language id:

- `highlite.lexers.syntax_a_d`: `asm`, `c`, `caddyfile`, `cmake`, `cpp`,
  `csharp`, `d`
- `highlite.lexers.syntax_r_y`: `rust`, `scala`, `shell`, `swift`, `toml`,
  `ts`, `xml`, `yaml`

## Incremental highlighting

For editors that re-highlight text as it changes, `Highlighter` also works on
any object that implements the abstract class
`highlite.highlighter.LineStates` (`line`, `line_count`, `state`,
`set_state`, `set_match`). It offers `highlight_states`, `highlight_matches`,
`rehighlight_states` and `rehighlight_line`, which keep per-line end states
and matches up to date without redoing the whole buffer.

## Your own definitions

`highlite.highlighter.parse_syntax_files(directory)` parses every `*.yaml`
file in a directory and returns a pair: the parsed definitions and a list of
warnings for files that could not be read or parsed. Definitions that
`include` other file types are linked with `highlite.parser.resolve_includes`.

## What this package does not do

- It produces group maps only; it does not turn them into coloured terminal
  output or any other rendered form.
- It has no command-line program.
- There is no single lookup of a language by id across all built-in
  definitions, and languages other than those listed above have no built-in
  definition; supply their YAML yourself.

## Running the tests

```
pip install .[test]
pytest
```