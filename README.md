# puzzleres

Pieces of the resource and localization layer of a logic puzzle game. It
packs resource files into a single archive, reads compiled message bundles
and provides a few text helpers. It has no dependencies outside the standard
library.

## Modules

- `puzzleres.errors.PuzzleError` is the exception raised for bad input
  throughout the package. Its `message` attribute holds the text.
- `puzzleres.convert` provides `to_string`, `to_lower_case`, `to_upper_case`,
  `num_to_str`, `str_to_int` and `str_to_double`.
  - `str_to_int` and `str_to_double` accept leading whitespace.
  - They raise `PuzzleError` unless the whole string is a valid number.
  - `str_to_double` also accepts hexadecimal floats, `inf` and `nan`.
  - `to_string` renders floats in `%g` style and booleans as `1` or `0`.
- `puzzleres.buffer.Buffer` is a growable byte buffer with a write position.
  - Writing methods: `put_data`, `put_byte`, `put_integer` (32-bit
    little-endian) and `put_utf8` (a length prefix followed by UTF-8 bytes).
  - `goto(offset)` moves the write position.
  - `getvalue()` returns the whole content and `len()` gives its size.
- `puzzleres.formatter.MessageFormatter` parses one compiled message template
  from a byte buffer at a given offset.
  - A template is a sequence of text pieces and numbered argument slots:
    `CmdType` and `Command`.
  - `get_message()` returns only the text pieces.
  - `format(*args)` fills in integer and string arguments.
- `puzzleres.messages.Messages` is a table of localized messages.
  - `load_bundle(score, data)` loads a compiled `CMF` bundle. When a key is
    already present, the entry with the higher score wins. On equal scores
    the later bundle wins.
  - Look up plain text with `messages["key"]` or `get_message`.
  - Fill in arguments with `messages("key", *args)` or `format`.
  - Unknown keys come back unchanged. Use `"key" in messages` to test for a
    key.
- `puzzleres.i18n` handles locales and localized file names.
  - `Locale.parse("ru_RU.UTF-8")` builds a `Locale` with `language`,
    `country` and `encoding`.
  - `current_locale()` activates the user's locale and describes it. It
    resets numeric formatting to the C locale.
  - `split_file_name("story_ru_RU.txt")` returns a `FileNameParts` of
    `name`, `ext`, `lang` and `country`.
  - `get_score(lang, country, locale)` rates a variant against a locale:
    - 1 for a variant with no language and no country;
    - otherwise +2 when the country matches and +4 when the language
      matches.
- `puzzleres.lexal.Lexer` tokenizes resource description text into `Lexeme`
  values. Each lexeme carries a `type` (a `LexemeType`), its `content`, and
  the `line` and `pos` where it starts.
  - Lexeme types are identifiers, integers, floats, quoted strings and the
    symbols `{ } , = ;`.
  - `#` and `//` comments run to the end of the line.
  - A `/*` comment is always reported as unterminated.
  - Iterating over a lexer yields every lexeme up to the end of input.
  - `next_lexeme()` returns an `EOF` lexeme at the end.
  - `pos_to_str` renders a position as `(line:pos)`.
- `puzzleres.args.command_line_to_argv` splits a raw command line into
  arguments. Double quotes group text into one argument.
- `puzzleres.format` defines the abstract `Formatter` and a `FormatRegistry`
  that maps names to formatters (`register`, `get`, `in`).
  - A formatter writes an entry's data into a `Buffer`.
  - The module-level `format_registry` starts empty.
- `puzzleres.compressor` packs entries into a `CRF` resource archive.
  - Each `Entry` has a name, a compression level, a group, a source file and
    an optional formatter.
  - The archive holds a header, the packed data of each entry, and then a
    footer that indexes the entries.
  - `pack(data, level)` deflates with zlib. Level 0 stores the data as it
    is.
  - `ResourceCompressor.write_to(stream)` writes to a binary stream.
  - `compress(path)` writes to a file, or to standard output for `""` or
    `"-"`. Both return the number of bytes written. With `verbose=True`, the
    size and ratio of each entry are printed to standard error.
  - `print_deps(output_file, source_file, out)` prints a make-style
    dependency rule.

## Example

```python
import io

from puzzleres.compressor import Entry, ResourceCompressor

compressor = ResourceCompressor(priority=1000)
compressor.add(Entry("cursor.bmp", 9, "images", "res/cursor.bmp"))
compressor.compress("game.res", verbose=True)

deps = io.StringIO()
compressor.print_deps("game.res", "resources.descr", deps)
```

## What this package does not do

- There is no game: no puzzle generation, screens, sound or score storage.
- There is no command-line tool. Archives are built by calling
  `ResourceCompressor` from Python.
- There is no parser that turns a resource description file into entries.
  `Lexer` only produces the lexemes.
- No formatter for message source files is included. `format_registry` is
  empty until you register your own `Formatter`.
- Archives can be written but not read back, and `Messages` does not locate
  bundles by itself. Pass it the bundle bytes with `load_bundle`.

## Running the tests

```
pip install .[test]
pytest
```